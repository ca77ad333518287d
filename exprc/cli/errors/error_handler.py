import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from exprc.cli.output import cli_fatal_abort, cli_fatal_diagnostic, cli_message
from libexprc.exceptions import ExprcError


@contextmanager
def cli_exprc_error_handler(
    *,
    source: str,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, NoReturn]:
    """Wrap function to properly emit exprc internal errors.

    Errors with diagnostic are rendered against given source (input expression).
    """
    try:
        yield
    except ExprcError as ee:
        if not debug_user_friendly_errors:
            raise  # re-throw exception due to unfriendly flag set for debugging
        if (diagnostic := ee.diagnostic) is None:
            return cli_fatal_abort(repr(ee))
        return cli_fatal_diagnostic(diagnostic, source)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        return sys.exit(0)
    # This is unreachable but error wrapper must fail
    cli_fatal_abort("Bug in a CLI: error handler must has no-return")
