"""User Store — dev launcher. Serves the plugin API with auto-reload."""

import argparse
import logging
import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = os.getenv("PORT", "13015")


def main():
    parser = argparse.ArgumentParser(description="User Store dev launcher")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Data storage directory (default: ./data)")
    parser.add_argument("--user", default=None,
                        help="Default user directory name (default: default-user)")
    parser.add_argument("--host", default=HOST)
    parser.add_argument("--port", type=int, default=int(PORT))
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # The app reads these at import time, including in the reload worker
    if args.data_dir:
        os.environ["DATA_DIR"] = str(args.data_dir.resolve())
    if args.user:
        os.environ["DEFAULT_USER"] = args.user

    print(f"Starting server on http://localhost:{args.port} ...")
    uvicorn.run("userstore.app:app", host=args.host, port=args.port, reload=True)


if __name__ == "__main__":
    main()
