"""Compilation options.

CompileOptions is a frozen dataclass: immutable after creation and safe
to share between every extractor compiled from it.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CompileOptions:
    """Options controlling how a template compiles. Immutable after creation.

    The defaults suit HTTP-to-RPC transcoding rules::

        options = CompileOptions(escape_literals=False)

    Raises ``ValueError`` if *segment_pattern* is not a valid regex or has
    capture groups of its own.
    """

    # Escape literal path text so ``.`` in ``/v1/file.json`` matches only a dot.
    # False reproduces the historical behaviour of splicing literals unescaped.
    escape_literals: bool = True

    # Wildcard each ``{name}`` placeholder compiles to, wrapped in one capture group
    segment_pattern: str = r"[^/]+"

    def __post_init__(self) -> None:
        try:
            groups = re.compile(self.segment_pattern).groups
        except re.error as exc:
            msg = f"segment_pattern {self.segment_pattern!r} is not a valid regex: {exc}"
            raise ValueError(msg) from exc
        if groups:
            msg = (
                f"segment_pattern {self.segment_pattern!r} must not contain capture groups;"
                " use (?:...) instead"
            )
            raise ValueError(msg)
