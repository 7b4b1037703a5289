"""Errors raised by the option dispatcher.

All errors are fatal configuration or programming errors at the call site.
They are raised directly to the caller of `resolve` and are never caught,
retried, or wrapped by this package.
"""

from collections.abc import Callable, Hashable
from typing import Any

ARITY_MESSAGE = "Function must have an arity of either 1 or 2"


class TokenOperatorError(Exception):
    """Base class for all token operator errors."""


class MissingRequiredOptionError(TokenOperatorError, ValueError):
    """Raised when a required option is absent after defaults are merged."""

    def __init__(self, option_name: Hashable) -> None:
        self.option_name = option_name
        super().__init__(
            f"The {option_name!r} option must be present or have a default"
        )


class UnmappedOptionValueError(TokenOperatorError, LookupError):
    """Raised when an option value has no handler in the function table."""

    def __init__(self, option_name: Hashable, value: Hashable) -> None:
        self.option_name = option_name
        self.value = value
        super().__init__(
            f"No function registered for value {value!r} of option {option_name!r}"
        )


class InvalidArityError(TokenOperatorError, TypeError):
    """Raised when a handler does not accept exactly one or two positional arguments."""

    def __init__(self, function: Callable[..., Any]) -> None:
        self.function = function
        super().__init__(ARITY_MESSAGE)


class InvalidConfigError(TokenOperatorError, ValueError):
    """Raised when a dispatch config has unknown keys or malformed values."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid dispatch config: {reason}")
