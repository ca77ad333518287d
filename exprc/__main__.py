"""Entry point for CLI.

Only for calling via `python -m exprc`, installed `exprc` executable is preferred.
"""

from exprc.cli.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
