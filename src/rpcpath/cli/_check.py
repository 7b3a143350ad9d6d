"""``rpcpath check`` — template syntax validation command.

Strictly compiles each template and prints its pattern or its problems.
Exits with code 1 if any template is invalid.
"""

import argparse
import sys

from rpcpath.routing.compiler import compile_template


def run_check(args: argparse.Namespace) -> None:
    """Validate every template in ``args.templates``.

    Valid templates are reported on stdout, problems on stderr.
    """
    failed = 0
    for template in args.templates:
        result = compile_template(template)
        if result:
            print(f"ok: {template} -> {result.extractor}")
            continue
        failed += 1
        for error in result.errors:
            print(f"Error: {template}: {error}", file=sys.stderr)

    if failed:
        print(f"{failed} of {len(args.templates)} template(s) invalid", file=sys.stderr)
        raise SystemExit(1)
