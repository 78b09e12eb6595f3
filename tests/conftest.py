import pytest

from aptree.modules import logger as _logger
from aptree.modules.config import config, default_locations
from aptree.modules.control import PackageRecord
from aptree.modules.repository import Repository


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    # no user/system aptree.conf leaks into the tests
    monkeypatch.delenv("APTREE_CONF", raising=False)
    config.reload([])
    _logger.reset()
    yield config
    config.reload(default_locations())
    _logger.reset()


def repo_from_mapping(mapping):
    return Repository(PackageRecord(name, tuple(deps)) for name, deps in mapping.items())


@pytest.fixture
def make_repo():
    return repo_from_mapping


@pytest.fixture
def packages_file(tmp_path):
    path = tmp_path / "Packages"
    path.write_text(
        "Package: A\n"
        "Version: 1.0\n"
        "Depends: B (>= 1.0), C | D\n"
        "Description: root package\n"
        " with a folded description\n"
        "\n"
        "Package: B\n"
        "Depends: D\n"
        "\n"
        "Package: C\n"
        "Depends: A\n"
        "\n"
        "Package: D\n",
        encoding="utf-8",
    )
    return path
