"""Query string parameters and query templates.

``QueryParams`` is an immutable view over a raw query string.
``QueryTemplate`` is the query half of a URL template: it separates
fixed parameters (``view=full``) from variable-bound ones
(``page={paging.page}``) and checks concrete query strings against them.

Keys and values are never percent-decoded, so extracted values are the
raw text the client sent.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from rpcpath.routing.pattern import VAR_PATTERN
from rpcpath.routing.variable import Variable


def parse_query(query: str) -> list[tuple[str, str]]:
    """Parse a raw query string into ``(key, value)`` pairs in input order.

    Empty pieces (``a=1&&b=2``) are skipped. A piece without ``=`` has an
    empty value.
    """
    pairs: list[tuple[str, str]] = []
    for piece in query.split("&"):
        if not piece:
            continue
        key, _, value = piece.partition("=")
        pairs.append((key, value))
    return pairs


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    Attributes:
        _pairs: Every ``(key, value)`` pair in input order.
        _data: Field name -> list of values.
        _raw: Raw query string.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.
    """

    _pairs: tuple[tuple[str, str], ...]
    _data: dict[str, list[str]]
    _raw: str

    __slots__ = ("_data", "_pairs", "_raw")

    def __init__(self, query_string: str = "") -> None:
        pairs = tuple(parse_query(query_string))
        data: dict[str, list[str]] = {}
        for key, value in pairs:
            data.setdefault(key, []).append(value)
        object.__setattr__(self, "_raw", query_string)
        object.__setattr__(self, "_pairs", pairs)
        object.__setattr__(self, "_data", data)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"QueryParams({{{items}}})"

    @property
    def raw(self) -> str:
        return self._raw

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._data.get(key, []))

    def items_list(self) -> list[tuple[str, str]]:
        """Return every ``(key, value)`` pair, repeats included, in input order."""
        return list(self._pairs)


@dataclass(frozen=True, slots=True)
class QueryVariable:
    """A template query parameter whose value binds to a field path.

    ``page={paging.page}`` -> ``QueryVariable(key="page", name="paging.page")``
    """

    key: str
    name: str


class QueryTemplate:
    """The query half of a URL template.

    Usage::

        query = QueryTemplate("view=full&page={paging.page}")
        query.contains_all("view=full&page=2")   # True
        query.extract_vars("view=full&page=2")   # [Variable("paging.page", "2")]

    Fixed parameters are required and must match exactly; variable
    parameters are optional and bind every value present for their key.
    Parameters in the input that the template does not declare are ignored.
    """

    __slots__ = ("_fixed", "_raw", "_variables")

    def __init__(self, query_template: str = "") -> None:
        fixed: list[tuple[str, str]] = []
        variables: list[QueryVariable] = []
        for key, value in parse_query(query_template):
            match = VAR_PATTERN.fullmatch(value)
            if match:
                variables.append(QueryVariable(key=key, name=match.group(1)))
            else:
                fixed.append((key, value))
        self._raw = query_template
        self._fixed = tuple(fixed)
        self._variables = tuple(variables)

    @property
    def fixed(self) -> tuple[tuple[str, str], ...]:
        """Required ``(key, value)`` pairs, in declaration order."""
        return self._fixed

    @property
    def variables(self) -> tuple[QueryVariable, ...]:
        """Variable-bound parameters, in declaration order."""
        return self._variables

    def contains_all(self, query: str) -> bool:
        """True if every fixed parameter appears in *query* with its exact value.

        Any one occurrence of a repeated key is enough.
        """
        if not self._fixed:
            return True
        params = QueryParams(query)
        return all(value in params.get_list(key) for key, value in self._fixed)

    def extract_vars(self, query: str) -> list[Variable]:
        """Bind variable parameters found in *query*.

        Variables come out in declaration order; a key repeated in the
        input yields one Variable per occurrence, in input order.
        """
        if not self._variables:
            return []
        params = QueryParams(query)
        return [
            Variable(var.name, value)
            for var in self._variables
            for value in params.get_list(var.key)
        ]

    def __bool__(self) -> bool:
        return bool(self._fixed or self._variables)

    def __str__(self) -> str:
        parts = [f"{key}={value}" if value else key for key, value in self._fixed]
        parts.extend(f"{var.key}={{{var.name}}}" for var in self._variables)
        return "&".join(parts)

    def __repr__(self) -> str:
        return f"QueryTemplate({self._raw!r})"
