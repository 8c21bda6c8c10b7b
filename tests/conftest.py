"""Test configuration and fixtures for berkshelf_lock"""

import pytest

from berkshelf_lock.source import CookbookSource, GitLocation, PathLocation, SiteLocation


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep developer environment variables out of the tests."""
    monkeypatch.delenv("BERKSHELF_BERKSFILE", raising=False)
    monkeypatch.delenv("BERKSHELF_LOCKFILE_INDENT", raising=False)


@pytest.fixture
def nginx_source():
    """A community-site source with a locked version."""
    return CookbookSource(
        name="nginx",
        version_constraint="~> 2.0",
        locked_version="2.7.6",
        location=SiteLocation(uri="https://supermarket.chef.io/api/v1"),
    )


@pytest.fixture
def mysql_source():
    """A git source pinned to a commit."""
    return CookbookSource(
        name="mysql",
        locked_version="5.1.0",
        groups=("default", "database"),
        location=GitLocation(
            uri="https://github.com/opscode-cookbooks/mysql.git",
            branch="main",
            ref="3f8a2c1d9e7b",
        ),
    )


@pytest.fixture
def app_source():
    """A source vendored next to the manifest."""
    return CookbookSource(name="myapp", location=PathLocation(path="cookbooks/myapp"))


@pytest.fixture
def manifest_path(tmp_path):
    """Path of a Berksfile inside a temporary directory."""
    manifest = tmp_path / "Berksfile"
    manifest.write_text("site :opscode\n\ncookbook 'nginx', '~> 2.0'\n")
    return manifest
