"""Split a raw URL into its path and query components."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UrlPathAndQuery:
    """The path and raw query string of a URL or URL template.

    ``query`` never includes the leading ``?`` and is empty when the
    URL has none.
    """

    path: str
    query: str = ""

    def __str__(self) -> str:
        if self.query:
            return f"{self.path}?{self.query}"
        return self.path


def split_url(raw: str) -> UrlPathAndQuery:
    """Split *raw* at the first ``?``.

    Examples::

        "/users/42"           -> UrlPathAndQuery("/users/42", "")
        "/users/42?view=full" -> UrlPathAndQuery("/users/42", "view=full")
        "/search?q=a?b"       -> UrlPathAndQuery("/search", "q=a?b")
    """
    path, _, query = raw.partition("?")
    return UrlPathAndQuery(path=path, query=query)
