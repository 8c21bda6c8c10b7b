"""Manifest fingerprints for detecting drift between a manifest and its lockfile."""

import hashlib
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from berkshelf_lock.constants import MANIFEST_PATH_OPTION
from berkshelf_lock.exceptions import ManifestNotFoundError, MissingOptionError

if TYPE_CHECKING:
    from berkshelf_lock.lockfile_core import Lockfile

logger = logging.getLogger(__name__)


def compute_fingerprint(manifest_path: Union[str, Path]) -> str:
    """
    Calculate the SHA256 digest of a manifest's contents.

    Args:
        manifest_path: Path to the manifest (Berksfile)

    Returns:
        Hex-encoded SHA256 digest

    Raises:
        ManifestNotFoundError: If the manifest does not exist
    """
    path = Path(manifest_path)
    try:
        contents = path.read_bytes()
    except FileNotFoundError as e:
        raise ManifestNotFoundError(path) from e
    return hashlib.sha256(contents).hexdigest()


def manifest_changed(
    lockfile: "Lockfile", manifest_path: Optional[Union[str, Path]] = None
) -> bool:
    """Check whether the manifest changed since the lockfile was written.

    A lockfile without a fingerprint always counts as changed.

    Args:
        lockfile: Lockfile holding the last known fingerprint
        manifest_path: Manifest to compare against. Defaults to the
            lockfile's ``manifest_path`` option.

    Raises:
        MissingOptionError: If no manifest_path is given and the lockfile has none
        ManifestNotFoundError: If the manifest does not exist
    """
    if manifest_path is None:
        if MANIFEST_PATH_OPTION not in lockfile.options:
            raise MissingOptionError(MANIFEST_PATH_OPTION)
        manifest_path = lockfile.options[MANIFEST_PATH_OPTION]

    if not lockfile.fingerprint:
        return True

    current = compute_fingerprint(manifest_path)
    if current != lockfile.fingerprint:
        logger.debug(f"Manifest {manifest_path} changed: {lockfile.fingerprint} -> {current}")
        return True
    return False
