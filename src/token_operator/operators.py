"""Reusable, pre-configured dispatchers.

Wrapper authors usually bind an option name, its handlers and its defaults
once, then call the result from several public functions::

    maybe_filter = option_operator(
        "filter",
        {"published": published, "featured": featured},
        defaults={"filter": "published"},
    )
    maybe_paginate = option_operator(
        "paginate", paginate, defaults={"paginate": False, "page": 1, "page_size": 20}
    )
    query_for_collections = chain(maybe_filter, maybe_paginate)

    def list_posts(opts=None):
        return query_for_collections(select(Post), opts)
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from .config import DispatchConfig
from .dispatcher import Handler, as_dispatch, resolve
from .options import Options, as_options


@dataclass(frozen=True)
class OptionOperator:
    """A dispatcher bound to one option name, its handlers and its config.

    Calling the operator with ``(token, options)`` is equivalent to calling
    `resolve` with the bound arguments.
    """

    option_name: Hashable
    function_or_functions: Handler | Mapping[Hashable, Handler]
    config: DispatchConfig = field(default_factory=DispatchConfig)

    def __post_init__(self) -> None:
        # fail at definition time rather than on first call
        as_dispatch(self.function_or_functions)
        object.__setattr__(self, "config", DispatchConfig.coerce(self.config))

    def __call__(self, token: Any, options: Options = None) -> Any:
        return resolve(
            token, options, self.option_name, self.function_or_functions, self.config
        )

    def with_defaults(
        self, defaults: Options = None, /, **kwargs: Any
    ) -> OptionOperator:
        """Return a copy with extra defaults layered over the bound defaults.

        Defaults may be given as a mapping or pairs (for keys that are not
        identifiers), as keyword arguments, or both; keyword arguments win.
        """
        config = self.config.with_defaults(defaults).with_defaults(kwargs)
        return replace(self, config=config)

    def as_required(self, required: bool = True) -> OptionOperator:
        """Return a copy that requires the option to be present."""
        return replace(self, config=self.config.as_required(required))


def option_operator(
    option_name: Hashable,
    function_or_functions: Handler | Mapping[Hashable, Handler],
    *,
    defaults: Options = None,
    required: bool = False,
) -> OptionOperator:
    """Bind an option name, its handlers and its config into an `OptionOperator`."""
    return OptionOperator(
        option_name,
        function_or_functions,
        DispatchConfig(defaults=defaults, required=required),
    )


def chain(*operators: Callable[[Any, Options], Any]) -> Callable[[Any, Options], Any]:
    """Compose operators into one callable that applies them left to right.

    Every operator receives the same caller options and the token returned by
    its predecessor.
    """

    def run(token: Any, options: Options = None) -> Any:
        if options is not None and not isinstance(options, Mapping):
            # pairs may be a one-shot iterator
            options = as_options(options)
        for op in operators:
            token = op(token, options)
        return token

    return run
