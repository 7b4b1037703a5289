"""Option merging and option value normalization.

Options reach the dispatcher as a mapping, as an iterable of ``(key, value)``
pairs (the keyword-list form, where later pairs win), or as ``None``. They are
merged beneath nothing but the wrapper author's defaults and handed to
handlers as a read-only view.

An option value can take three shapes:

* ``None`` — absent; the dispatcher leaves the token alone.
* a single symbol — any hashable value. Strings, bytes and enum members are
  always treated as one symbol even though some of them are iterable.
* a ``list`` or ``tuple`` of symbols — applied in the order given.
"""

from collections.abc import Hashable, Iterable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

type Options = Mapping[Hashable, Any] | Iterable[tuple[Hashable, Any]] | None

SEQUENCE_TYPES = (list, tuple)
SCALAR_TYPES = (str, bytes, Enum)


def as_options(value: Options) -> dict[Hashable, Any]:
    """Copy options into a fresh dict.

    Args:
        value: A mapping, an iterable of ``(key, value)`` pairs, or ``None``.

    Returns:
        A new dict; the caller's structure is never shared.

    Raises:
        TypeError: If ``value`` is neither a mapping nor pairs.
    """
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, SCALAR_TYPES) or not isinstance(value, Iterable):
        raise TypeError(
            f"options must be a mapping or (key, value) pairs, "
            f"got {type(value).__name__}"
        )
    try:
        return dict(value)
    except (TypeError, ValueError) as e:
        raise TypeError(
            f"options must be a mapping or (key, value) pairs: {e}"
        ) from e


def merge_options(
    defaults: Options, options: Options
) -> MappingProxyType[Hashable, Any]:
    """Merge ``options`` over ``defaults``.

    Every key from either side is kept. Keys present in ``options`` win,
    including when their value is ``None``, which clears the default.

    Returns:
        A read-only view over a freshly built dict.
    """
    merged = as_options(defaults)
    merged.update(as_options(options))
    return MappingProxyType(merged)


def option_values(value: Any) -> tuple[Any, ...]:
    """Normalize an option value into an ordered tuple of symbols.

    ``None`` and empty sequences both yield an empty tuple.
    """
    if value is None:
        return ()
    if isinstance(value, SEQUENCE_TYPES) and not isinstance(value, SCALAR_TYPES):
        return tuple(value)
    return (value,)
