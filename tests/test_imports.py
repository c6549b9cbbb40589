"""Smoke tests for package import and version."""

import fakenews


def test_import_package() -> None:
    assert isinstance(fakenews, object)


def test_version() -> None:
    assert fakenews.__version__ == "0.1.0"


def test_public_api_exports() -> None:
    for name in fakenews.__all__:
        assert hasattr(fakenews, name), name
