"""Pytest configuration and shared fixtures for the eithr test suite."""

from collections.abc import Generator

import pytest

from eithr import Either, Left, Right, reset_config

_ENV_VARS = (
    "EITHR_REPR_LIMIT",
    "EITHR_LOG_WRONG_VARIANT",
    "EITHR_WRONG_VARIANT_LOG_LEVEL",
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "property: mark test as a property-based test")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Every test starts from default settings and an empty EITHR_* environment."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def left_five() -> Either[int, str]:
    return Left(5)


@pytest.fixture
def right_ten() -> Either[str, int]:
    return Right(10)

