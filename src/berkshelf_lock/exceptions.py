"""Exception hierarchy for berkshelf_lock.

Errors raised while loading, changing and saving Berksfile lockfiles.
"""

from pathlib import Path
from typing import Optional, Union


class BerkshelfError(Exception):
    """Base exception for all berkshelf_lock errors."""
    pass


class InvalidArgumentError(BerkshelfError):
    """A value passed to a lockfile mutation is not a CookbookSource."""
    pass


class DecodeError(BerkshelfError):
    """Base error for persisted data that cannot be decoded."""
    pass


class SourceDecodeError(DecodeError):
    """A decoded source object is not a valid CookbookSource."""
    pass


class LockfileError(BerkshelfError):
    """Base error for lockfile-related issues."""
    pass


class LockfileNotFoundError(LockfileError):
    """Lockfile not found."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Could not find a valid lock file at {self.path}")


class LockfileParseError(LockfileError, DecodeError):
    """Cannot parse lockfile."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{message} (lockfile: {self.path})"
        super().__init__(message)


class MissingOptionError(LockfileError):
    """A required lockfile option is not set."""

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"Lockfile option '{option}' is required but was not set")


class ManifestNotFoundError(BerkshelfError):
    """Manifest (Berksfile) not found."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Could not find a manifest at {self.path}")
