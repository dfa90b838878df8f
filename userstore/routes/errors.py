"""Map store outcomes to JSON error responses."""

import logging

from fastapi.responses import JSONResponse

from userstore.storage import InvalidItem, NotFound, StoreError

logger = logging.getLogger(__name__)


def error_response(e: StoreError) -> JSONResponse:
    """404 for NotFound, 400 for InvalidItem, 500 (logged) for anything else."""
    if isinstance(e, NotFound):
        status = 404
    elif isinstance(e, InvalidItem):
        status = 400
    else:
        logger.error(f"{e.message}: {e.__cause__!r}", exc_info=e)
        status = 500
    return JSONResponse({"error": e.message}, status_code=status)
