import sys
from importlib.metadata import PackageNotFoundError, version
from platform import platform, python_implementation, python_version
from typing import NoReturn

from exprc.cli.parser.arguments import CLIArguments


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and toolchain."""
    print(f"[exprc toolchain {_get_toolchain_version()}]")
    print("Toolchain target (may be unavailable on host machine):")
    print(f"\tTriplet: {args.target.triplet}")
    print(f"\tArchitecture: {args.target.architecture}")
    print(f"\tOS: {args.target.operating_system}")
    print(f"\tEntry point: {args.codegen_config.entry_point_name}")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    return sys.exit(0)


def _get_toolchain_version() -> str:
    try:
        return version("exprc")
    except PackageNotFoundError:
        return "(not installed)"
