"""File-based JSON storage for per-user settings, sampler presets and themes.

Data layout (per user root, see profiles.py for the concrete names):
  <root>/
    <settings-file>.json   One settings document. Missing → {}.
    <preset-dir>/          One <name>.json per sampler preset.
    <theme-dir>/           One <name>.json per theme.

Each file holds exactly the payload, pretty-printed with 2-space indent.
Collection directories are created on first write; a missing directory is an
empty collection. Writes replace a file wholesale (temp file + rename) and
there is no locking: concurrent writers to one name race, last one wins.

Every store coroutine takes the user root explicitly and runs its blocking
I/O in a worker thread. Failures surface as StoreError subclasses:
NotFound (404), InvalidItem (400, raised before any I/O), StoreIOError (500).
"""

# Re-export public symbols so `from userstore import storage` is enough.

from .core import (  # noqa: F401
    InvalidItem,
    NotFound,
    StoreError,
    StoreIOError,
    check_name,
)

from .settings import SettingsStore  # noqa: F401

from .collections import CollectionStore  # noqa: F401

from .profiles import (  # noqa: F401
    LEGACY,
    NEO,
    PROFILES,
    Profile,
)
