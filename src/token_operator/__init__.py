"""token_operator

Conditional dispatch for keyword-style options. A token (a query, a
changeset, any value) is passed through the handlers selected by one named
option, after merging the caller's options over the wrapper author's defaults.
"""

from logging import NullHandler, getLogger

from .config import DispatchConfig
from .dispatcher import resolve
from .errors import (
    InvalidArityError,
    InvalidConfigError,
    MissingRequiredOptionError,
    TokenOperatorError,
    UnmappedOptionValueError,
)
from .logging import disable_dispatch_trace, dispatch_trace, enable_dispatch_trace
from .operators import OptionOperator, chain, option_operator

__all__ = [
    "DispatchConfig",
    "InvalidArityError",
    "InvalidConfigError",
    "MissingRequiredOptionError",
    "OptionOperator",
    "TokenOperatorError",
    "UnmappedOptionValueError",
    "__version__",
    "chain",
    "disable_dispatch_trace",
    "dispatch_trace",
    "enable_dispatch_trace",
    "option_operator",
    "resolve",
]
__version__ = "0.1.0"

getLogger(__name__).addHandler(NullHandler())
