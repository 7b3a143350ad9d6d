"""Strict template compilation.

``VariableExtractor`` accepts any string. The functions here let a
caller reject malformed templates at load time instead::

    result = compile_template("/v1/users/{user-id}")
    if not result:
        print(result.errors)   # ("invalid character in placeholder '{user-id}' at 10",)
"""

import logging
import re
from dataclasses import dataclass

from rpcpath.config import CompileOptions
from rpcpath.http.query import parse_query
from rpcpath.http.url import split_url
from rpcpath.routing.extractor import VariableExtractor
from rpcpath.routing.pattern import VAR_PATTERN

logger = logging.getLogger("rpcpath.routing")

_NAME_CHARS = re.compile(r"[\w.]+", re.ASCII)


def _check_name(name: str, where: str) -> str | None:
    if not name:
        return f"empty placeholder '{{}}' {where}"
    if _NAME_CHARS.fullmatch(name) is None:
        return f"invalid character in placeholder '{{{name}}}' {where}"
    if "" in name.split("."):
        return f"empty field name component in '{{{name}}}' {where}"
    return None


def check_path(path: str) -> list[str]:
    """Return the problems found in the path half of a template."""
    problems: list[str] = []
    start: int | None = None
    for index, char in enumerate(path):
        if char == "{":
            if start is not None:
                problems.append(f"nested '{{' at {index}")
                continue
            start = index
        elif char == "}":
            if start is None:
                problems.append(f"unmatched '}}' at {index}")
                continue
            problem = _check_name(path[start + 1 : index], f"at {start}")
            if problem:
                problems.append(problem)
            start = None
    if start is not None:
        problems.append(f"unclosed '{{' at {start}")
    return problems


def check_query(query: str) -> list[str]:
    """Return the problems found in the query half of a template."""
    problems: list[str] = []
    for key, value in parse_query(query):
        if not key:
            problems.append(f"query parameter with empty name '={value}'")
            continue
        if "{" in key or "}" in key:
            problems.append(f"placeholder in query parameter name '{key}'")
            continue
        if "{" not in value and "}" not in value:
            continue
        match = VAR_PATTERN.fullmatch(value)
        if match is None:
            problems.append(f"malformed query variable '{key}={value}'")
            continue
        problem = _check_name(match.group(1), f"in query parameter '{key}'")
        if problem:
            problems.append(problem)
    return problems


def check_template(template: str) -> list[str]:
    """Return every problem found in *template*; empty when it is well formed."""
    parts = split_url(template)
    return check_path(parts.path) + check_query(parts.query)


@dataclass(frozen=True, slots=True)
class CompileResult:
    """The outcome of strictly compiling a template.

    The result is falsy when the template was rejected::

        result = compile_template(template)
        if not result:
            raise SystemExit("; ".join(result.errors))
        extractor = result.extractor
    """

    template: str
    extractor: VariableExtractor | None = None
    errors: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True if the template compiled with no errors."""
        return self.extractor is not None and not self.errors

    def __bool__(self) -> bool:
        return self.is_valid


def compile_template(template: str, options: CompileOptions | None = None) -> CompileResult:
    """Validate and compile *template*.

    Never raises for template syntax problems; they are returned in
    ``CompileResult.errors``.
    """
    problems = check_template(template)
    if problems:
        logger.debug("Rejected template %r: %s", template, "; ".join(problems))
        return CompileResult(template=template, errors=tuple(problems))
    return CompileResult(template=template, extractor=VariableExtractor(template, options))
