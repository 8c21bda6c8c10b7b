# ABOUTME: Package initialization for berkshelf_lock.
# ABOUTME: Exports the Lockfile, CookbookSource types and the exception hierarchy.
"""Persist and reload the resolved sources of a Berksfile."""

from berkshelf_lock.exceptions import (
    BerkshelfError,
    DecodeError,
    InvalidArgumentError,
    LockfileError,
    LockfileNotFoundError,
    LockfileParseError,
    ManifestNotFoundError,
    MissingOptionError,
    SourceDecodeError,
)
from berkshelf_lock.fingerprint import compute_fingerprint, manifest_changed
from berkshelf_lock.lockfile_core import Lockfile
from berkshelf_lock.source import (
    ChefAPILocation,
    CookbookSource,
    GitLocation,
    PathLocation,
    SiteLocation,
)

__version__ = "0.1.0"

__all__ = [
    "BerkshelfError",
    "ChefAPILocation",
    "CookbookSource",
    "DecodeError",
    "GitLocation",
    "InvalidArgumentError",
    "Lockfile",
    "LockfileError",
    "LockfileNotFoundError",
    "LockfileParseError",
    "ManifestNotFoundError",
    "MissingOptionError",
    "PathLocation",
    "SiteLocation",
    "SourceDecodeError",
    "compute_fingerprint",
    "manifest_changed",
]
