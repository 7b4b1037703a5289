"""The option dispatcher.

`resolve` decides whether and how to transform a token based on one named
option. Handlers are supplied either as a single callable, which runs whenever
the option is present, or as a table keyed by option value, where each value
listed in the option selects the handler to run.

Example:
    A context function exposing a ``filter`` keyword::

        def list_posts(opts=None):
            query = select(Post)
            query = resolve(
                query,
                opts,
                "filter",
                {"published": published, "featured": featured},
                {"defaults": {"filter": "published"}},
            )
            return session.scalars(query).all()

    ``list_posts({"filter": ["published", "featured"]})`` applies both
    filters, ``list_posts({"filter": []})`` or ``list_posts({"filter": None})``
    applies neither.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Mapping
from dataclasses import dataclass
from typing import Any

from .arity import invoke
from .config import DispatchConfig
from .errors import MissingRequiredOptionError, UnmappedOptionValueError
from .options import Options, merge_options, option_values

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods

type Handler = Callable[..., Any]


@dataclass(frozen=True)
class SingleHandler:
    """One handler run whenever the option is present.

    The option value itself is not consumed; the handler may read it from the
    merged options.
    """

    function: Handler

    def apply(  # pylint: disable=unused-argument
        self, token: Any, option_name: Hashable, value: Any, options: Mapping
    ) -> Any:
        """Run the handler once and return its result."""
        logger.debug("Option %r: applying %s", option_name, handler_name(self.function))
        return invoke(self.function, token, options)


@dataclass(frozen=True)
class HandlerTable:
    """Handlers keyed by option value, applied in the order the option lists them."""

    functions: Mapping[Hashable, Handler]

    def apply(
        self, token: Any, option_name: Hashable, value: Any, options: Mapping
    ) -> Any:
        """Fold the token through the handler of every listed value.

        Raises:
            UnmappedOptionValueError: If a listed value has no handler.
        """
        for symbol in option_values(value):
            try:
                function = self.functions[symbol]
            except KeyError:
                raise UnmappedOptionValueError(option_name, symbol) from None
            logger.debug(
                "Option %r=%r: applying %s", option_name, symbol, handler_name(function)
            )
            token = invoke(function, token, options)
        return token


def as_dispatch(
    function_or_functions: Handler | Mapping[Hashable, Handler],
) -> SingleHandler | HandlerTable:
    """Classify the caller's handler argument.

    Raises:
        TypeError: If the argument is neither a mapping nor a callable.
    """
    if isinstance(function_or_functions, Mapping):
        return HandlerTable(function_or_functions)
    if callable(function_or_functions):
        return SingleHandler(function_or_functions)
    raise TypeError(
        "expected a callable or a mapping of option values to callables, "
        f"got {type(function_or_functions).__name__}"
    )


def resolve(
    token: Any,
    options: Options,
    option_name: Hashable,
    function_or_functions: Handler | Mapping[Hashable, Handler],
    config: DispatchConfig | Mapping[str, Any] | None = None,
) -> Any:
    """Conditionally transform ``token`` based on the option ``option_name``.

    Args:
        token: Any value. It is only passed to handlers, never inspected.
        options: Caller options as a mapping, ``(key, value)`` pairs, or None.
        option_name: Key of the option that drives dispatch.
        function_or_functions: A handler, or a mapping from option value to
            handler. Handlers take ``(token)`` or ``(token, options)`` and
            return the new token.
        config: A `DispatchConfig` or a mapping with the keys ``defaults``
            and ``required``.

    Returns:
        The token returned by the last handler applied, or ``token`` itself
        when the option is absent or an empty sequence.

    Raises:
        MissingRequiredOptionError: If ``required`` is set and the option is
            absent after merging defaults.
        UnmappedOptionValueError: If a table dispatch meets a value with no
            handler.
        InvalidArityError: If a handler does not take one or two positional
            arguments.
        InvalidConfigError: If ``config`` is malformed.
    """
    dispatch = as_dispatch(function_or_functions)
    cfg = DispatchConfig.coerce(config)
    merged = merge_options(cfg.defaults, options)

    value = merged.get(option_name)
    if value is None:
        if cfg.required:
            raise MissingRequiredOptionError(option_name)
        logger.debug("Option %r absent; token unchanged", option_name)
        return token

    return dispatch.apply(token, option_name, value, merged)


def handler_name(fn: Handler) -> str:
    """Best-effort readable name of a handler for log messages."""
    if hasattr(fn, "__qualname__"):
        return fn.__qualname__
    if hasattr(fn, "func") and hasattr(fn.func, "__qualname__"):
        return fn.func.__qualname__
    return repr(fn)
