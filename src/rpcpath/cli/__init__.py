"""rpcpath CLI — try templates against URLs and validate templates.

Entry point registered as ``rpcpath`` in ``pyproject.toml``::

    [project.scripts]
    rpcpath = "rpcpath.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``rpcpath`` command."""
    parser = argparse.ArgumentParser(
        prog="rpcpath",
        description="rpcpath — URL templates for HTTP-to-RPC transcoding.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- rpcpath match ----------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match a URL against a template")
    match_parser.add_argument("template", help="URL template (e.g. /v1/users/{user_id})")
    match_parser.add_argument("url", help="Request URL (e.g. /v1/users/42)")
    match_parser.add_argument(
        "--no-escape",
        action="store_true",
        help="Splice literal path text into the pattern unescaped",
    )

    # -- rpcpath check ----------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate template syntax")
    check_parser.add_argument("templates", nargs="+", help="URL templates to validate")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "match":
        from rpcpath.cli._match import run_match

        run_match(args)
    elif args.command == "check":
        from rpcpath.cli._check import run_check

        run_check(args)
