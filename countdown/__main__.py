"""Run the countdown cli with ``python -m countdown``."""

from countdown.cli.main import cli

if __name__ == "__main__":
    cli()
