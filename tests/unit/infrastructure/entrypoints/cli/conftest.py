from collections.abc import Iterable
from unittest import mock

import pytest
from typer.testing import CliRunner


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Colorless, fixed width output, so assertions do not depend on the terminal."""
    for name, value in {"COLUMNS": "100", "TERM": "dumb", "NO_COLOR": "1"}.items():
        monkeypatch.setenv(name, value)


@pytest.fixture
def block_cli_configure_loggers() -> Iterable[mock.Mock]:
    """The root callback must not replace the logging set up for the test session."""
    with mock.patch("userdir.infrastructure.entrypoints.cli.main.configure_loggers") as patched:
        yield patched


@pytest.fixture
def runner(block_cli_configure_loggers: mock.Mock) -> CliRunner:
    return CliRunner()
