from typing import Any

import pytest
from typer.testing import CliRunner

from asyncapi_bindings.__about__ import __version__


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        item.add_marker("all")


@pytest.fixture(scope="session")
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(scope="session")
def version() -> str:
    return __version__


@pytest.fixture
def query_schema() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "token": {"type": "string"},
        },
    }


@pytest.fixture
def headers_schema() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "Authorization": {"type": "string"},
        },
    }
