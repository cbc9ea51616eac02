"""Main Typer CLI application for coordinate tools."""

import logging

import typer

app = typer.Typer(
    help="Parse and convert DD, DMS and DDM geographic coordinates",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    Coordinate parsing and conversion tools.

    Input starting with a minus sign must follow a `--` separator:

        coords convert -- "-33.8688, 151.2093"
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s:%(levelname)s: %(message)s",
    )


def _register_commands() -> None:
    """
    Import command modules to register commands with the app.

    Commands use the @app.command() decorator, which registers them when
    the module is imported.
    """
    from coordinate_search.cli import commands

    _ = commands


_register_commands()


if __name__ == "__main__":
    app()
