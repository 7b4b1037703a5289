"""Arity inspection and invocation of handler functions.

Handlers come in two shapes: ``handler(token)`` and ``handler(token, options)``.
The shape is read from the callable's signature at call time.
"""

import inspect
from collections.abc import Callable, Mapping
from typing import Any

from .errors import InvalidArityError

POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def arity(function: Callable[..., Any]) -> int | None:
    """Return the number of positional parameters ``function`` declares.

    Returns ``None`` when the count is not fixed: the callable takes ``*args``,
    has a keyword-only parameter without a default, or exposes no signature.
    """
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError):
        return None

    count = 0
    for param in signature.parameters.values():
        if param.kind in POSITIONAL_KINDS:
            count += 1
        elif param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        elif (
            param.kind is inspect.Parameter.KEYWORD_ONLY
            and param.default is inspect.Parameter.empty
        ):
            return None
    return count


def invoke(function: Callable[..., Any], token: Any, options: Mapping) -> Any:
    """Call ``function`` with ``(token)`` or ``(token, options)`` by its arity.

    Raises:
        InvalidArityError: If ``function`` does not take exactly one or two
            positional arguments.
    """
    n = arity(function)
    if n == 1:
        return function(token)
    if n == 2:
        return function(token, options)
    raise InvalidArityError(function)
