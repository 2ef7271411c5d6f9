"""Entry point for ``python -m ghpr`` and the ``ghpr`` script."""

from ghpr.cli.commands.root import cli


def main() -> None:
    cli(prog_name="ghpr")


if __name__ == "__main__":
    main()
