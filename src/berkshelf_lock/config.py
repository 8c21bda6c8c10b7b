"""Environment-driven defaults for lockfile handling."""

import logging
import os
from pathlib import Path

from berkshelf_lock.constants import (
    DEFAULT_LOCKFILE_INDENT,
    DEFAULT_MANIFEST_NAME,
    ENV_LOCKFILE_INDENT,
    ENV_MANIFEST_PATH,
)

logger = logging.getLogger(__name__)


def default_manifest_path() -> Path:
    """Manifest used when the caller does not name one.

    Reads BERKSHELF_BERKSFILE, falling back to ``Berksfile`` in the
    current directory.
    """
    return Path(os.environ.get(ENV_MANIFEST_PATH) or DEFAULT_MANIFEST_NAME)


def lockfile_indent() -> int:
    """JSON indent for rendered lockfiles (BERKSHELF_LOCKFILE_INDENT)."""
    raw = os.environ.get(ENV_LOCKFILE_INDENT)
    if raw is None or raw.strip() == "":
        return DEFAULT_LOCKFILE_INDENT

    try:
        indent = int(raw)
    except ValueError:
        logger.warning(
            f"Ignoring invalid {ENV_LOCKFILE_INDENT}={raw!r}; "
            f"using {DEFAULT_LOCKFILE_INDENT}"
        )
        return DEFAULT_LOCKFILE_INDENT

    if indent < 0:
        logger.warning(
            f"Ignoring negative {ENV_LOCKFILE_INDENT}={indent}; using {DEFAULT_LOCKFILE_INDENT}"
        )
        return DEFAULT_LOCKFILE_INDENT
    return indent
