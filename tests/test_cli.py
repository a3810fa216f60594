import pytest
from typer.testing import CliRunner

from ryandata_postal_utils import cli
from ryandata_postal_utils.config import HANDLERS_ENV_VAR
from ryandata_postal_utils.handlers.europe import PLHandler

runner = CliRunner()


@pytest.fixture(autouse=True)
def _no_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(HANDLERS_ENV_VAR, raising=False)


def test_validate_valid() -> None:
    result = runner.invoke(cli.app, ["validate", "wc2e9rz", "--country", "gb"])

    assert result.exit_code == 0
    assert "valid: WC2E 9RZ" in result.output


def test_validate_invalid_exits_1() -> None:
    result = runner.invoke(cli.app, ["validate", "1234", "-c", "PL"])

    assert result.exit_code == 1
    assert f"Invalid postalCode: 1234. {PLHandler.hint_text}" in result.output


def test_validate_unknown_country() -> None:
    result = runner.invoke(cli.app, ["validate", "12345", "-c", "XX"])

    assert result.exit_code == 1
    assert "Unknown country: XX" in result.output


def test_format() -> None:
    result = runner.invoke(cli.app, ["format", "12345", "--country", "PL"])

    assert result.exit_code == 0
    assert result.output.strip() == "12-345"


def test_format_invalid() -> None:
    result = runner.invoke(cli.app, ["format", "123456", "--country", "FR"])

    assert result.exit_code == 1
    assert "Invalid postalCode: 123456" in result.output


def test_hint() -> None:
    result = runner.invoke(cli.app, ["hint", "pl"])

    assert result.exit_code == 0
    assert result.output.strip() == PLHandler.hint_text


def test_hint_unknown_country() -> None:
    result = runner.invoke(cli.app, ["hint", "xx"])

    assert result.exit_code == 1
    assert "Unknown country: XX" in result.output


def test_countries() -> None:
    result = runner.invoke(cli.app, ["countries"])

    assert result.exit_code == 0
    lines = result.output.split()
    assert "GB" in lines
    assert "PL" in lines
    assert lines == sorted(lines)


def test_countries_without_postal_codes() -> None:
    result = runner.invoke(cli.app, ["countries", "--without-postal-codes"])

    assert result.exit_code == 0
    lines = result.output.split()
    assert len(lines) == 62
    assert "HK" in lines
    assert "GB" not in lines


def test_handler_option() -> None:
    """--handler overrides feed the registry."""
    result = runner.invoke(
        cli.app,
        ["--handler", "ZZ=tests.fakes:ZZHandler", "format", "custom123", "-c", "zz"],
    )

    assert result.exit_code == 0
    assert result.output.strip() == "CUSTOM-123"


def test_handler_from_environment() -> None:
    result = runner.invoke(
        cli.app,
        ["countries"],
        env={HANDLERS_ENV_VAR: "ZZ=tests.fakes:ZZHandler"},
    )

    assert result.exit_code == 0
    assert "ZZ" in result.output.split()


def test_handler_option_beats_environment() -> None:
    result = runner.invoke(
        cli.app,
        ["-H", "PL=tests.fakes:AcceptAllHandler", "format", "1", "-c", "PL"],
        env={HANDLERS_ENV_VAR: "PL=tests.fakes:ZZHandler"},
    )

    assert result.exit_code == 0
    assert result.output.strip() == "1"


@pytest.mark.parametrize("value", ["ZZ", "ZZZ=tests.fakes:ZZHandler", "ZZ=tests.nowhere:X"])
def test_bad_handler_option(value: str) -> None:
    result = runner.invoke(cli.app, ["--handler", value, "countries"])

    assert result.exit_code == 2
