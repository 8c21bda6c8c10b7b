"""Lockfile management for Berkshelf manifests. Handles reading, writing, and mutating <manifest>.lock files."""

import json
import logging
import os
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Any, Dict, List, Optional, Union, overload

from pydantic import AliasChoices, BaseModel, Field, ValidationError

from berkshelf_lock.config import default_manifest_path, lockfile_indent
from berkshelf_lock.constants import (
    LEGACY_FINGERPRINT_KEY,
    LEGACY_MANIFEST_OPTION,
    LOCKFILE_SUFFIX,
    MANIFEST_PATH_OPTION,
)
from berkshelf_lock.exceptions import (
    InvalidArgumentError,
    LockfileNotFoundError,
    LockfileParseError,
    MissingOptionError,
)
from berkshelf_lock.source import CookbookSource, format_validation_errors

logger = logging.getLogger(__name__)


class LockfileDocument(BaseModel):
    """Persisted shape of a lockfile, decoded by field name."""

    fingerprint: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("fingerprint", LEGACY_FINGERPRINT_KEY),
        description="Last known fingerprint of the manifest",
    )
    # Entries stay raw here; CookbookSource.from_decoded validates each one
    sources: List[Any] = Field(default_factory=list)
    options: Dict[str, Any] = Field(default_factory=dict)


def _json_default(value: Any) -> Any:
    if isinstance(value, os.PathLike):
        return os.fspath(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class Lockfile:
    """The resolved sources for a manifest, plus its fingerprint and options.

    Mutations only change the in-memory state; call :meth:`save` to persist.
    """

    def __init__(
        self,
        sources: Sequence[CookbookSource] = (),
        options: Optional[Dict[str, Any]] = None,
    ):
        """
        Create a new lockfile from the given sources.

        Args:
            sources: The list of cookbook sources
            options: Arbitrary options stored with the lockfile. The
                ``manifest_path`` option locates the file on disk.

        Raises:
            InvalidArgumentError: If any of the sources is not a CookbookSource
        """
        self._sources: List[CookbookSource] = self._checked_sources(sources, "Lockfile")
        self.options: Dict[str, Any] = dict(options) if options else {}
        self.fingerprint: Optional[str] = None
        # Where the lockfile was loaded from, for error messages only
        self.file_path: Optional[Path] = None

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Lockfile":
        """Build a lockfile from a .lock file on disk.

        Args:
            path: Path of the lockfile to read

        Returns:
            The loaded Lockfile

        Raises:
            LockfileNotFoundError: If no file exists at path
            LockfileParseError: If the file is not a valid lockfile document
            SourceDecodeError: If one of the sources cannot be decoded
        """
        path = Path(path)

        try:
            contents = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise LockfileNotFoundError(path) from e
        except UnicodeDecodeError as e:
            raise LockfileParseError(f"Lockfile is not valid UTF-8: {e.reason}", path) from e

        try:
            document = LockfileDocument.model_validate_json(contents)
        except ValidationError as e:
            details = format_validation_errors(e, root="document")
            raise LockfileParseError(f"Invalid lockfile: {details}", path) from e

        sources = [CookbookSource.from_decoded(entry) for entry in document.sources]
        options = dict(document.options)
        # Older lockfiles record the manifest under "berksfile"; both keys are kept
        if LEGACY_MANIFEST_OPTION in options and MANIFEST_PATH_OPTION not in options:
            options[MANIFEST_PATH_OPTION] = options[LEGACY_MANIFEST_OPTION]

        lockfile = cls(sources, options)
        lockfile.fingerprint = document.fingerprint
        lockfile.file_path = path

        logger.debug(f"Loaded lockfile {path} with {len(sources)} source(s)")
        return lockfile

    @classmethod
    def load_for_manifest(cls, manifest_path: Optional[Union[str, Path]] = None) -> "Lockfile":
        """Load the lockfile that sits next to a manifest.

        Args:
            manifest_path: Manifest whose ``.lock`` companion is read. Defaults
                to BERKSHELF_BERKSFILE, then ``Berksfile``.

        Returns:
            The loaded Lockfile, with ``manifest_path`` filled in when the
            document did not record one
        """
        manifest = Path(manifest_path) if manifest_path is not None else default_manifest_path()
        lockfile = cls.load(f"{manifest}{LOCKFILE_SUFFIX}")
        lockfile.options.setdefault(MANIFEST_PATH_OPTION, str(manifest))
        return lockfile

    @property
    def sources(self) -> tuple[CookbookSource, ...]:
        """The sources in this lockfile, in insertion order."""
        return tuple(self._sources)

    @overload
    def update(self, sources: CookbookSource) -> None: ...

    @overload
    def update(self, sources: Sequence[CookbookSource]) -> None: ...

    def update(self, sources):
        """Replace the current list of sources.

        This does not write out the lockfile; it only changes the state of
        the object. Duplicates are kept as given.

        Args:
            sources: A single CookbookSource or a sequence of them

        Raises:
            InvalidArgumentError: If any element is not a CookbookSource. The
                current sources are left untouched.
        """
        self._sources = self._checked_sources(sources, "update")

    def append(self, source: CookbookSource) -> bool:
        """Add a source to the end of the list unless an equal one is present.

        Args:
            source: The source to append

        Returns:
            True if the source was added, False if an equal source exists

        Raises:
            InvalidArgumentError: If source is not a CookbookSource
        """
        if not isinstance(source, CookbookSource):
            raise InvalidArgumentError(
                f"`append` requires a CookbookSource, got {type(source).__name__}"
            )

        if source in self._sources:
            logger.debug(f"Source {source} already locked; skipping")
            return False

        self._sources.append(source)
        return True

    def find(self, name: str) -> Optional[CookbookSource]:
        """Get the first source for the named cookbook."""
        for source in self._sources:
            if source.name == name:
                return source
        return None

    def lockfile_name(self) -> str:
        """The lockfile path for this manifest: the manifest path plus ``.lock``.

        Raises:
            MissingOptionError: If the ``manifest_path`` option is not set
        """
        try:
            manifest = self.options[MANIFEST_PATH_OPTION]
        except KeyError as e:
            raise MissingOptionError(MANIFEST_PATH_OPTION) from e
        return f"{os.fspath(manifest)}{LOCKFILE_SUFFIX}"

    def to_hash(self) -> Dict[str, Any]:
        """
        The dict representation of this lockfile.

        Returns:
            Dictionary with, in order:
            - fingerprint: the last known fingerprint of the manifest
            - sources: each source's own dict representation
            - options: the lockfile options
        """
        return {
            "fingerprint": self.fingerprint,
            "sources": [source.to_hash() for source in self._sources],
            "options": dict(self.options),
        }

    def to_text(self) -> str:
        """Pretty-printed JSON for this lockfile, as written by :meth:`save`."""
        return json.dumps(
            self.to_hash(),
            indent=lockfile_indent(),
            ensure_ascii=False,
            default=_json_default,
        )

    to_json = to_text

    def save(self) -> Path:
        """Write the lockfile next to its manifest, replacing any existing file.

        Returns:
            Path of the written lockfile

        Raises:
            MissingOptionError: If the ``manifest_path`` option is not set
        """
        path = Path(self.lockfile_name())

        # Render before opening; opening truncates the existing file
        contents = self.to_text() + "\n"
        with open(path, "w", encoding="utf-8") as f:
            f.write(contents)

        logger.debug(f"Saved lockfile {path} with {len(self._sources)} source(s)")
        return path

    write = save

    @staticmethod
    def _checked_sources(sources: Any, operation: str) -> List[CookbookSource]:
        if isinstance(sources, CookbookSource):
            return [sources]

        if isinstance(sources, (str, bytes)) or not isinstance(sources, Sequence):
            raise InvalidArgumentError(
                f"`{operation}` requires a CookbookSource or a sequence of them, "
                f"got {type(sources).__name__}"
            )

        candidates = list(sources)
        for index, candidate in enumerate(candidates):
            if not isinstance(candidate, CookbookSource):
                raise InvalidArgumentError(
                    f"`{operation}` requires a CookbookSource; "
                    f"item {index} is {type(candidate).__name__}"
                )
        return candidates

    def __len__(self) -> int:
        return len(self._sources)

    def __iter__(self) -> Iterator[CookbookSource]:
        return iter(tuple(self._sources))

    def __contains__(self, source: object) -> bool:
        return source in self._sources

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lockfile):
            return NotImplemented
        return (
            self.fingerprint == other.fingerprint
            and self._sources == other._sources
            and self.options == other.options
        )

    def __repr__(self) -> str:
        return (
            f"Lockfile(sources={len(self._sources)}, "
            f"fingerprint={self.fingerprint!r}, options={self.options!r})"
        )
