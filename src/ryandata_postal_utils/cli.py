from __future__ import annotations

import os
from typing import NoReturn, Optional

import typer

from ryandata_postal_utils.config import HANDLERS_ENV_VAR, PostalCodeSettings, parse_handler_overrides
from ryandata_postal_utils.core.errors import PostalCodeError, RyanDataPostalValidationError
from ryandata_postal_utils.core.normalizer import normalize_country
from ryandata_postal_utils.core.results import Valid
from ryandata_postal_utils.countries import countries_without_postal_codes
from ryandata_postal_utils.manager import PostalCodeManager

app = typer.Typer(help="Validate and format postal codes for ~170 countries.")


def build_settings(handler_options: list[str] | None) -> PostalCodeSettings:
    """Merge overrides from the environment and ``--handler`` options.

    Options given on the command line win over the environment.

    Raises:
        RyanDataPostalValidationError: If an override is malformed or cannot be imported.
    """
    try:
        handlers = parse_handler_overrides(os.getenv(HANDLERS_ENV_VAR, ""))
        for option in handler_options or []:
            handlers.update(parse_handler_overrides(option))
    except ValueError as exc:
        raise RyanDataPostalValidationError(exc) from exc

    try:
        return PostalCodeSettings(handlers=handlers)
    except ValueError as exc:
        raise RyanDataPostalValidationError.from_validation_error(exc) from exc


def _manager(ctx: typer.Context) -> PostalCodeManager:
    return ctx.ensure_object(dict)["manager"]


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


@app.callback()
def configure(
    ctx: typer.Context,
    handler: Optional[list[str]] = typer.Option(  # noqa: B008
        None,
        "--handler",
        "-H",
        help="Override a country's handler, as CC=module:attr. Repeatable.",
    ),
) -> None:
    """Load handler overrides before running a command."""
    try:
        settings = build_settings(handler)
    except RyanDataPostalValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="--handler") from exc
    ctx.ensure_object(dict)["manager"] = settings.build_manager()


@app.command()
def validate(
    ctx: typer.Context,
    postal_code: str = typer.Argument(..., help="Postal code to check."),
    country: str = typer.Option(..., "--country", "-c", help="ISO 3166-1 alpha-2 code."),
) -> None:
    """Check a postal code; exits 1 if it is invalid or the country is unknown."""
    outcome = _manager(ctx).check(postal_code, country)
    if isinstance(outcome, Valid):
        typer.echo(f"valid: {outcome.formatted}")
        return
    _fail(str(outcome.to_error()))


@app.command("format")
def format_(
    ctx: typer.Context,
    postal_code: str = typer.Argument(..., help="Postal code to format."),
    country: str = typer.Option(..., "--country", "-c", help="ISO 3166-1 alpha-2 code."),
) -> None:
    """Print a postal code in its country's display format."""
    try:
        typer.echo(_manager(ctx).format(postal_code, country))
    except PostalCodeError as exc:
        _fail(str(exc))


@app.command()
def hint(
    ctx: typer.Context,
    country: str = typer.Argument(..., help="ISO 3166-1 alpha-2 code."),
) -> None:
    """Describe the postal code format of a country."""
    manager = _manager(ctx)
    if not manager.is_supported_country(country):
        _fail(f"Unknown country: {normalize_country(country)}")
    typer.echo(manager.get_hint(country))


@app.command()
def countries(
    ctx: typer.Context,
    without_postal_codes: bool = typer.Option(  # noqa: B008
        False,
        "--without-postal-codes",
        help="List countries that have no postal code system instead.",
    ),
) -> None:
    """List supported countries, one per line."""
    if without_postal_codes:
        codes = countries_without_postal_codes()
    else:
        codes = _manager(ctx).supported_countries()
    for code in codes:
        typer.echo(code)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
