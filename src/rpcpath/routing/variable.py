"""Variable frozen dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Variable:
    """A named value bound by matching a URL against a template.

    ``name`` is a dotted field path (``user.id``). ``value`` is the raw,
    un-decoded text taken from the URL.
    """

    name: str
    value: str

    def __str__(self) -> str:
        return f"{self.name}={self.value}"
