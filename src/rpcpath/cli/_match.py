"""``rpcpath match`` — match one URL against one template.

Prints each extracted variable as ``name=value``. Exits with code 1 if
the URL does not match.
"""

import argparse
import sys

from rpcpath.config import CompileOptions
from rpcpath.routing.extractor import VariableExtractor


def run_match(args: argparse.Namespace) -> None:
    options = CompileOptions(escape_literals=not args.no_escape)
    extractor = VariableExtractor(args.template, options)

    if not extractor.matches(args.url):
        print(f"no match: {args.url!r} against {extractor}", file=sys.stderr)
        raise SystemExit(1)

    for variable in extractor.extract(args.url):
        print(variable)
