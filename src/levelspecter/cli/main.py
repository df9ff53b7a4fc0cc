"""
Main CLI entry point.
"""

import click
import logging


@click.command()
@click.argument("levelspec")
def main(levelspec):
    """Parse LEVELSPEC (e.g. DEV01.RD.0001) and print its levels."""
    from levelspecter.core import LevelSpec
    from levelspecter.grammar import ParseError

    # Setup logging
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        result = LevelSpec.parse(levelspec)
    except ParseError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(str(result))
    for level, token in result.levels():
        click.echo(f"{level}: {token!r}")


if __name__ == "__main__":
    main()
