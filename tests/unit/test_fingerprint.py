"""Unit tests for manifest fingerprints."""

import hashlib

import pytest

from berkshelf_lock.exceptions import ManifestNotFoundError, MissingOptionError
from berkshelf_lock.fingerprint import compute_fingerprint, manifest_changed
from berkshelf_lock.lockfile_core import Lockfile


class TestComputeFingerprint:
    """Tests for compute_fingerprint()."""

    def test_sha256_of_contents(self, manifest_path):
        """Test that the fingerprint is the SHA256 of the manifest bytes."""
        expected = hashlib.sha256(manifest_path.read_bytes()).hexdigest()

        assert compute_fingerprint(manifest_path) == expected
        assert compute_fingerprint(str(manifest_path)) == expected

    def test_missing_manifest(self, tmp_path):
        """Test that a missing manifest raises the domain error."""
        with pytest.raises(ManifestNotFoundError) as excinfo:
            compute_fingerprint(tmp_path / "Berksfile")

        assert isinstance(excinfo.value.__cause__, FileNotFoundError)


class TestManifestChanged:
    """Tests for manifest_changed()."""

    def test_unchanged(self, manifest_path):
        """Test that a matching fingerprint means no drift."""
        lockfile = Lockfile(options={"manifest_path": str(manifest_path)})
        lockfile.fingerprint = compute_fingerprint(manifest_path)

        assert manifest_changed(lockfile) is False

    def test_changed_after_edit(self, manifest_path):
        """Test that editing the manifest is detected."""
        lockfile = Lockfile(options={"manifest_path": str(manifest_path)})
        lockfile.fingerprint = compute_fingerprint(manifest_path)

        manifest_path.write_text("site :opscode\n\ncookbook 'nginx', '~> 3.0'\n")

        assert manifest_changed(lockfile) is True

    def test_no_fingerprint_counts_as_changed(self, manifest_path):
        """Test that an unknown fingerprint is treated as drift."""
        lockfile = Lockfile(options={"manifest_path": str(manifest_path)})

        assert manifest_changed(lockfile) is True

    def test_explicit_manifest_path(self, manifest_path):
        """Test comparing against a manifest not recorded in options."""
        lockfile = Lockfile()
        lockfile.fingerprint = compute_fingerprint(manifest_path)

        assert manifest_changed(lockfile, manifest_path) is False

    def test_missing_manifest_option(self):
        """Test that the manifest must be known."""
        with pytest.raises(MissingOptionError):
            manifest_changed(Lockfile())
