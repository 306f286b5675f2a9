"""
Variable environment: the identifier -> integer store used by the evaluator.

The environment is owned by the caller and passed into every evaluation,
so independent environments never share state.
"""

from __future__ import annotations

from collections.abc import Mapping

from intcalc.core.errors import UnknownVariableError


class VariableEnvironment:
    """Mutable mapping of identifier to arbitrary-precision integer."""

    def __init__(self, initial: Mapping[str, int] | None = None) -> None:
        self._values: dict[str, int] = dict(initial or {})

    def get(self, name: str) -> int:
        try:
            return self._values[name]
        except KeyError:
            raise UnknownVariableError(name) from None

    def set(self, name: str, value: int) -> None:
        self._values[name] = value

    def contains(self, name: str) -> bool:
        return name in self._values

    def names(self) -> list[str]:
        return sorted(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        items = ", ".join(f"{k}={self._values[k]}" for k in self.names())
        return f"VariableEnvironment({items})"
