"""Goals for CLI (e.g compile, show version) as different goals that output different result."""

import sys
from time import perf_counter_ns
from typing import NoReturn

from exprc.cli.goals.ast import cli_perform_ast_goal
from exprc.cli.goals.compile import cli_perform_compile_goal
from exprc.cli.goals.tokens import cli_perform_tokens_goal
from exprc.cli.goals.version import cli_perform_version_goal
from exprc.cli.output import cli_message
from exprc.cli.parser.arguments import CLIArguments

NANOS_TO_SECONDS = 1_000_000_000


def perform_desired_toolchain_goal(args: CLIArguments) -> NoReturn:
    """Perform toolchain goal base on CLI arguments, by default fall into compile goal."""
    start = perf_counter_ns()
    try:
        if args.version:
            return cli_perform_version_goal(args)

        if args.tokens:
            return cli_perform_tokens_goal(args)

        if args.ast:
            return cli_perform_ast_goal(args)

        return cli_perform_compile_goal(args)
    except SystemExit as e:
        end = perf_counter_ns()
        time_taken = (end - start) / NANOS_TO_SECONDS
        cli_message(
            "INFO",
            f"Performing an goal took {time_taken:.4f} seconds!",
            verbose=args.verbose,
        )
        sys.exit(e.code)
