"""Common constants used throughout berkshelf_lock."""

# Lockfile constants
LOCKFILE_SUFFIX = ".lock"
DEFAULT_MANIFEST_NAME = "Berksfile"

# Reserved option key holding the manifest this lockfile belongs to
MANIFEST_PATH_OPTION = "manifest_path"

# Field names used by older lockfiles
LEGACY_FINGERPRINT_KEY = "sha"
LEGACY_MANIFEST_OPTION = "berksfile"

DEFAULT_VERSION_CONSTRAINT = ">= 0.0.0"
DEFAULT_GROUP = "default"

# Environment variables
ENV_MANIFEST_PATH = "BERKSHELF_BERKSFILE"
ENV_LOCKFILE_INDENT = "BERKSHELF_LOCKFILE_INDENT"
DEFAULT_LOCKFILE_INDENT = 2
