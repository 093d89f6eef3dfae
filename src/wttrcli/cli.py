"""Weather command-line application.

This module provides the command-line interface of the ``weather`` command:
it resolves the arguments into a RequestConfig, runs one lookup and reports
any failure.
"""

from __future__ import annotations

import logging
import sys
from typing import Final

import typer
from pydantic import ValidationError

from wttrcli.constants import APP_NAME, COMMAND_NAME, DEFAULT_BASE_URL, VERSION
from wttrcli.controller import WeatherReport
from wttrcli.settings import RequestConfig
from wttrcli.weather.errors import WeatherAPIError, format_cause_chain

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(
    name=COMMAND_NAME,
    help="Show the weather forecast for a location using wttr.in.",
    add_completion=False,
)

logger: Final = logging.getLogger(__name__)  # Will be "wttrcli.cli"

# Maps RequestConfig fields back to the command-line parameter that set them
PARAM_HINTS: Final = {"location": "'LOCATION'", "url": "'--url'", "base_url": "'--url'"}


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {VERSION}")
        raise typer.Exit()


LOCATION_ARGUMENT = typer.Argument(
    None, help="Location to look up (defaults to the location of your IP)", show_default=False
)
URL_OPTION = typer.Option(DEFAULT_BASE_URL, "--url", help="Base URL of the weather service")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
VERSION_OPTION = typer.Option(
    False,
    "--version",
    callback=version_callback,
    is_eager=True,
    help="Show the version and exit",
)


def resolve_config(location: str | None, url: str) -> RequestConfig:
    """Validate raw command-line values into a RequestConfig.

    Args:
        location: Positional location argument, if given
        url: Value of ``--url``

    Returns:
        Immutable request configuration

    Raises:
        typer.BadParameter: If a value fails validation
    """
    try:
        return RequestConfig.model_validate({"location": location, "url": url})
    except ValidationError as exc:
        err = exc.errors()[0]
        field = str(err["loc"][0]) if err["loc"] else ""
        raise typer.BadParameter(
            err["msg"], param_hint=PARAM_HINTS.get(field, field or None)
        ) from exc


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


@app.command()
def weather(
    location: str | None = LOCATION_ARGUMENT,
    url: str = URL_OPTION,
    debug: bool = DEBUG_OPTION,
    version: bool = VERSION_OPTION,
) -> None:
    """Show the daily forecast for LOCATION."""
    configure_logging(debug)
    config = resolve_config(location, url)

    try:
        output = WeatherReport(config).run()
    except WeatherAPIError as exc:
        logger.error("Weather lookup failed (%s): %s", exc.code, exc.message)
        typer.secho(format_cause_chain(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(output, nl=False)


def main() -> None:
    """Console-script entry point."""
    try:
        app(prog_name=COMMAND_NAME)
    except KeyboardInterrupt:
        sys.exit(130)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    main()
