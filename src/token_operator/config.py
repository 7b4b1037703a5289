"""Per-call configuration for the option dispatcher.

A `DispatchConfig` carries the two settings a wrapper author fixes once per
call site: the ``defaults`` merged beneath caller options and whether the
dispatch-driving option is ``required``.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .errors import InvalidConfigError
from .options import Options, as_options

RECOGNIZED_KEYS = frozenset({"defaults", "required"})


@dataclass(frozen=True)
class DispatchConfig:
    """Immutable dispatch settings.

    Args:
        defaults: Options merged beneath the caller's options. Caller options
            win on key conflicts, including an explicit ``None``.
        required: When True, the dispatch-driving option must be present
            (not ``None``) after merging.

    Raises:
        InvalidConfigError: If ``defaults`` is neither a mapping nor (key, value)
            pairs, or if ``required`` is not a bool.
    """

    defaults: Mapping[Hashable, Any] = field(
        default_factory=lambda: MappingProxyType({})
    )
    required: bool = False

    def __post_init__(self) -> None:
        try:
            defaults = as_options(self.defaults)
        except TypeError as e:
            raise InvalidConfigError(str(e)) from e
        if not isinstance(self.required, bool):
            raise InvalidConfigError(
                f"required must be a bool, got {type(self.required).__name__}"
            )
        # frozen: bypass __setattr__ to detach from the caller's mapping
        object.__setattr__(self, "defaults", MappingProxyType(defaults))

    @classmethod
    def coerce(
        cls, value: DispatchConfig | Mapping[str, Any] | None
    ) -> DispatchConfig:
        """Build a `DispatchConfig` from whatever a caller passed as ``config``.

        Args:
            value: ``None`` (all defaults), an existing `DispatchConfig`, or a
                mapping using only the keys ``defaults`` and ``required``.

        Returns:
            The equivalent `DispatchConfig`.

        Raises:
            InvalidConfigError: If the mapping has unrecognized keys or the
                value is of an unsupported type.
        """
        if value is None:
            return cls()
        if isinstance(value, DispatchConfig):
            return value
        if not isinstance(value, Mapping):
            raise InvalidConfigError(
                f"expected a mapping or DispatchConfig, got {type(value).__name__}"
            )
        if unknown := set(value) - RECOGNIZED_KEYS:
            raise InvalidConfigError(
                f"unrecognized keys {sorted(map(str, unknown))}; "
                f"expected a subset of {sorted(RECOGNIZED_KEYS)}"
            )
        return cls(
            defaults=value.get("defaults"),
            required=value.get("required", False),
        )

    def with_defaults(self, defaults: Options) -> DispatchConfig:
        """Return a copy with ``defaults`` layered over the current defaults.

        Raises:
            InvalidConfigError: If ``defaults`` is neither a mapping nor pairs.
        """
        try:
            layered = as_options(defaults)
        except TypeError as e:
            raise InvalidConfigError(str(e)) from e
        return DispatchConfig(
            defaults={**self.defaults, **layered}, required=self.required
        )

    def as_required(self, required: bool = True) -> DispatchConfig:
        """Return a copy with the ``required`` flag set."""
        return DispatchConfig(defaults=self.defaults, required=required)
