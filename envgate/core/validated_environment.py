"""Validated Environment — the immutable mapping handed to the rest of the application.

Invariants:
    - Read-only: no __setitem__, values held behind a MappingProxyType
    - server_keys and client_keys are disjoint and together cover every key
    - client_view() never exposes a server key; reading one raises
      ServerVariableAccessError instead of returning a value
    - validated is False only for environments built by the skip escape hatch

Design Decisions:
    - collections.abc.Mapping subclass: dict-like reads, equality with plain
      dicts, and no mutation API to forget about
    - Created once at startup and passed by dependency injection, never
      stored in module-level state
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Iterator

from envgate.core.errors import ServerVariableAccessError


class ValidatedEnvironment(Mapping):
    """Merged server + client variables, typed per their schemas."""

    __slots__ = ("_values", "_client_keys", "_server_keys", "_hidden", "prefix", "validated")

    def __init__(
        self,
        server_values: Mapping[str, Any],
        client_values: Mapping[str, Any],
        prefix: str,
        validated: bool = True,
        hidden: frozenset[str] = frozenset(),
    ):
        overlap = set(server_values) & set(client_values)
        if overlap:
            raise ValueError(
                f"Variables declared in both server and client schemas: "
                f"{sorted(overlap)}",
            )
        merged = dict(server_values)
        merged.update(client_values)
        self._values = MappingProxyType(merged)
        self._server_keys = frozenset(server_values)
        self._client_keys = frozenset(client_values)
        # Server keys a client view must refuse rather than report missing
        self._hidden = hidden
        self.prefix = prefix
        self.validated = validated

    def __getitem__(self, key: str) -> Any:
        if key in self._hidden:
            raise ServerVariableAccessError(key)
        return self._values[key]

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def get(self, key: str, default: Any = None) -> Any:
        # Mapping.get would swallow the access error as a KeyError
        if key in self._hidden:
            raise ServerVariableAccessError(key)
        return self._values.get(key, default)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        state = "validated" if self.validated else "unvalidated"
        return f"ValidatedEnvironment({state}, keys={sorted(self._values)})"

    @property
    def server_keys(self) -> frozenset[str]:
        return self._server_keys

    @property
    def client_keys(self) -> frozenset[str]:
        return self._client_keys

    @property
    def is_client_view(self) -> bool:
        return bool(self._hidden)

    def client_view(self) -> "ValidatedEnvironment":
        """Copy holding only client variables — safe to hand to browser-facing code."""
        return ValidatedEnvironment(
            {},
            {k: self._values[k] for k in self._client_keys},
            self.prefix,
            validated=self.validated,
            hidden=self._server_keys | self._hidden,
        )

    def to_dict(self) -> dict[str, Any]:
        return dict(self._values)
