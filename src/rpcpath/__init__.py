"""rpcpath — URL templates for HTTP-to-RPC transcoding.

Compiles templates such as ``/v1/users/{user_id}?view=full`` into
immutable matchers that test request URLs and extract the field values
they bind.

Basic usage::

    from rpcpath import VariableExtractor

    extractor = VariableExtractor("/v1/users/{user_id}/messages/{message_id}")
    if extractor.matches("/v1/users/42/messages/7"):
        extractor.extract("/v1/users/42/messages/7")
        # [Variable(name='user_id', value='42'), Variable(name='message_id', value='7')]

Strict loading::

    from rpcpath import compile_template

    result = compile_template("/v1/users/{user_id")
    if not result:
        print(result.errors)
"""

__version__ = "0.1.0"
__all__ = [
    "CompileOptions",
    "CompileResult",
    "QueryTemplate",
    "RpcPathError",
    "TemplateSyntaxError",
    "Variable",
    "VariableExtractor",
    "check_template",
    "compile_template",
    "split_url",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import rpcpath`` fast while providing a clean top-level API.
    """
    if name == "VariableExtractor":
        from rpcpath.routing.extractor import VariableExtractor

        return VariableExtractor

    if name == "Variable":
        from rpcpath.routing.variable import Variable

        return Variable

    if name in ("CompileResult", "check_template", "compile_template"):
        from rpcpath.routing import compiler as _compiler

        return getattr(_compiler, name)

    if name == "CompileOptions":
        from rpcpath.config import CompileOptions

        return CompileOptions

    if name == "QueryTemplate":
        from rpcpath.http.query import QueryTemplate

        return QueryTemplate

    if name == "split_url":
        from rpcpath.http.url import split_url

        return split_url

    if name in ("RpcPathError", "TemplateSyntaxError"):
        from rpcpath import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
