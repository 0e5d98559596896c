# uvws/main.py
"""Main entry point for the uvws CLI application."""

from uvws.cli.interface import main_cli


def entrypoint():
    """Function to be called by the script defined in pyproject.toml."""
    main_cli(prog_name="uvws")

if __name__ == '__main__':
    entrypoint()
