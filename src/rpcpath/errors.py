"""rpcpath exception hierarchy.

Matching and extraction never raise; these are only used by strict
compilation and the CLI.
"""

from dataclasses import dataclass


class RpcPathError(Exception):
    """Base for all rpcpath-specific errors."""


@dataclass(frozen=True, slots=True)
class TemplateSyntaxError(RpcPathError):
    """A URL template failed strict validation.

    Raised by ``VariableExtractor.strict()``. The permissive constructor
    treats the same problems as literal text instead.
    """

    template: str
    problems: tuple[str, ...] = ()

    def __str__(self) -> str:
        if self.problems:
            return f"Invalid template {self.template!r}: {'; '.join(self.problems)}"
        return f"Invalid template {self.template!r}"
