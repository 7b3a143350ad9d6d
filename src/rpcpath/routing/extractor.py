"""VariableExtractor — a URL template compiled for matching and binding.

Built once per template, then shared by every request handler::

    extractor = VariableExtractor("/v1/users/{user_id}?view=full")
    extractor.matches("/v1/users/42?view=full")   # True
    extractor.extract("/v1/users/42?view=full")   # [Variable("user_id", "42")]

Instances are immutable, so ``matches`` and ``extract`` can be called
from any number of threads without locking.
"""

import logging
import re

from rpcpath.config import CompileOptions
from rpcpath.errors import TemplateSyntaxError
from rpcpath.http.query import QueryTemplate
from rpcpath.http.url import split_url
from rpcpath.routing.pattern import build_path_pattern
from rpcpath.routing.variable import Variable

logger = logging.getLogger("rpcpath.routing")

_DEFAULT_OPTIONS = CompileOptions()


def _compile_path(source: str, variables: int) -> re.Pattern[str] | None:
    """Compile *source*, or None if it is invalid or has a group count other than *variables*."""
    try:
        pattern = re.compile(source)
    except re.error:
        return None
    if pattern.groups != variables:
        return None
    return pattern


class VariableExtractor:
    """Matches URLs against a template and extracts the variables they bind.

    The path half of the template is compiled to a regex that must match
    the whole request path. Each ``{field.path}`` placeholder captures one
    path segment (no ``/``). The query half is a ``QueryTemplate``: fixed
    parameters gate matching, variable parameters are extracted.

    Construction never fails. Malformed placeholders (``{a-b}``, ``{x``)
    are treated as literal text; use ``strict()`` or
    ``compile_template()`` to reject them instead.
    """

    __slots__ = ("_options", "_path_variables", "_pattern", "_query", "_template")

    def __init__(self, template: str, options: CompileOptions | None = None) -> None:
        options = options or _DEFAULT_OPTIONS
        parts = split_url(template)

        source, names = build_path_pattern(parts.path, options)
        pattern = _compile_path(source, len(names))
        if pattern is None:
            # Escaped literals with a validated segment pattern always compile
            logger.warning(
                "Template %r has regex syntax or capture groups in its unescaped literals;"
                " escaping literals",
                template,
            )
            source, names = build_path_pattern(parts.path, options, escape=True)
            pattern = re.compile(source)

        self._template = template
        self._options = options
        self._pattern = pattern
        self._path_variables = names
        self._query = QueryTemplate(parts.query)
        logger.debug("Compiled template %r -> %s", template, source)

    @classmethod
    def strict(cls, template: str, options: CompileOptions | None = None) -> "VariableExtractor":
        """Compile *template*, raising ``TemplateSyntaxError`` if it is malformed."""
        from rpcpath.routing.compiler import check_template

        problems = check_template(template)
        if problems:
            raise TemplateSyntaxError(template=template, problems=tuple(problems))
        return cls(template, options)

    @property
    def template(self) -> str:
        return self._template

    @property
    def options(self) -> CompileOptions:
        return self._options

    @property
    def pattern(self) -> re.Pattern[str]:
        """The compiled path pattern."""
        return self._pattern

    @property
    def path_variables(self) -> tuple[str, ...]:
        """Path placeholder names, in template order (duplicates kept)."""
        return self._path_variables

    @property
    def query(self) -> QueryTemplate:
        return self._query

    @property
    def variable_names(self) -> tuple[str, ...]:
        """Every variable the template can bind: path names, then query names."""
        return self._path_variables + tuple(var.name for var in self._query.variables)

    def matches(self, url: str) -> bool:
        """True if *url*'s path matches in full and its query has every fixed parameter."""
        parts = split_url(url)
        if self._pattern.fullmatch(parts.path) is None:
            return False
        return self._query.contains_all(parts.query)

    def extract(self, url: str) -> list[Variable]:
        """Return the variables *url* binds: path variables first, then query.

        A path that does not match contributes nothing; query variables are
        still extracted. Never raises and never returns ``None``.
        """
        parts = split_url(url)
        result: list[Variable] = []

        match = self._pattern.fullmatch(parts.path)
        if match is not None:
            result.extend(
                Variable(name, match.group(index))
                for index, name in enumerate(self._path_variables, start=1)
            )

        result.extend(self._query.extract_vars(parts.query))
        return result

    def extract_dict(self, url: str) -> dict[str, str]:
        """``extract()`` as a mapping. Later bindings of a repeated name win."""
        return {var.name: var.value for var in self.extract(url)}

    def __str__(self) -> str:
        return self._pattern.pattern

    def __repr__(self) -> str:
        return f"VariableExtractor({self._template!r})"
