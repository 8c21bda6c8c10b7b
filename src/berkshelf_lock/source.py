# ABOUTME: Pydantic model for a resolved cookbook source and its location variants.
# ABOUTME: Sources are immutable values compared by field equality.
"""Cookbook source value type stored in lockfiles."""

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from berkshelf_lock.constants import DEFAULT_GROUP, DEFAULT_VERSION_CONSTRAINT
from berkshelf_lock.exceptions import SourceDecodeError


def format_validation_errors(error: ValidationError, root: str) -> str:
    """Join every validation error as ``field.path: message``.

    Errors on the top-level value itself are labelled with root.
    """
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc']) or root}: {item['msg']}"
        for item in error.errors()
    )


class PathLocation(BaseModel):
    """Cookbook vendored on the local filesystem."""

    model_config = ConfigDict(frozen=True)

    type: Literal["path"] = "path"
    path: str = Field(..., min_length=1, description="Filesystem path to the cookbook")


class GitLocation(BaseModel):
    """Cookbook checked out from a git repository."""

    model_config = ConfigDict(frozen=True)

    type: Literal["git"] = "git"
    uri: str = Field(..., min_length=1, description="Repository URI")
    branch: Optional[str] = None
    ref: Optional[str] = Field(None, description="Resolved commit the source is pinned to")
    rel: Optional[str] = Field(None, description="Path of the cookbook inside the repository")


class SiteLocation(BaseModel):
    """Cookbook downloaded from a community site."""

    model_config = ConfigDict(frozen=True)

    type: Literal["site"] = "site"
    uri: str = Field(..., min_length=1)


class ChefAPILocation(BaseModel):
    """Cookbook served by a Chef server."""

    model_config = ConfigDict(frozen=True)

    type: Literal["chef_api"] = "chef_api"
    uri: str = Field(..., min_length=1)
    node_name: Optional[str] = None
    client_key: Optional[str] = None


Location = Annotated[
    Union[PathLocation, GitLocation, SiteLocation, ChefAPILocation],
    Field(discriminator="type"),
]


class CookbookSource(BaseModel):
    """A resolved cookbook dependency.

    Two sources are equal when every field is equal, which is what
    :meth:`Lockfile.append` relies on to skip duplicates.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Cookbook name")
    version_constraint: str = Field(
        default=DEFAULT_VERSION_CONSTRAINT, description="Constraint from the manifest"
    )
    locked_version: Optional[str] = Field(None, description="Version picked at resolution time")
    groups: Tuple[str, ...] = Field(default=(DEFAULT_GROUP,), description="Manifest groups")
    location: Optional[Location] = None

    @classmethod
    def from_decoded(cls, obj: Any) -> "CookbookSource":
        """Build a source from a decoded lockfile entry.

        Args:
            obj: Mapping decoded from the persisted document

        Returns:
            The validated CookbookSource

        Raises:
            SourceDecodeError: If obj is not a mapping or fails validation
        """
        if not isinstance(obj, Mapping):
            raise SourceDecodeError(
                f"Cookbook source entry must be an object, got {type(obj).__name__}"
            )

        try:
            return cls.model_validate(dict(obj))
        except ValidationError as e:
            label = obj.get("name") or "<unnamed>"
            details = format_validation_errors(e, root="source")
            raise SourceDecodeError(f"Invalid cookbook source '{label}': {details}") from e

    def to_hash(self) -> dict[str, Any]:
        """JSON-ready representation, omitting unset optional fields."""
        return self.model_dump(mode="json", exclude_none=True)

    def __str__(self) -> str:
        return f"{self.name} ({self.version_constraint})"
