"""Path template parsing and pattern assembly.

Turns the path half of a template into a regular expression with one
capture group per ``{field.path}`` placeholder::

    "/v1/users/{user_id}"  ->  r"/v1/users/([^/]+)", ("user_id",)
"""

import re

from rpcpath.config import CompileOptions

# {name} or {dotted.field.path}; anything else is literal text
VAR_PATTERN = re.compile(r"\{([\w.]+)\}", re.ASCII)


def build_path_pattern(
    path: str,
    options: CompileOptions,
    *,
    escape: bool | None = None,
) -> tuple[str, tuple[str, ...]]:
    """Assemble the regex source for *path* and the names of its groups.

    Group *i* (1-indexed) of the returned pattern captures the variable
    at index *i - 1* of the returned names. *escape* overrides
    ``options.escape_literals``.
    """
    if escape is None:
        escape = options.escape_literals
    segment = f"({options.segment_pattern})"

    parts: list[str] = []
    names: list[str] = []
    last = 0
    for match in VAR_PATTERN.finditer(path):
        literal = path[last : match.start()]
        parts.append(re.escape(literal) if escape else literal)
        parts.append(segment)
        names.append(match.group(1))
        last = match.end()

    tail = path[last:]
    parts.append(re.escape(tail) if escape else tail)
    return "".join(parts), tuple(names)
