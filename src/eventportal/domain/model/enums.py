"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class VersionState(IntEnum):
    """Lifecycle state of a catalog version, keyed by the remote ``stateId``."""

    UNKNOWN = 0
    DRAFT = 1
    RELEASED = 2
    DEPRECATED = 3
    RETIRED = 4

    @classmethod
    def from_state_id(cls, value: object) -> VersionState:
        """Map a remote state id (``"1"`` or ``1``) to a state; anything else is UNKNOWN."""

        if isinstance(value, str):
            return _STATES_BY_ID.get(value, cls.UNKNOWN)
        if isinstance(value, bool) or not isinstance(value, int):
            return cls.UNKNOWN
        return _STATES_BY_ID.get(str(int(value)), cls.UNKNOWN)

    @property
    def state_id(self) -> str:
        return str(int(self))

    @property
    def is_mutable(self) -> bool:
        return self is VersionState.DRAFT


_STATES_BY_ID = {
    state.state_id: state for state in VersionState if state is not VersionState.UNKNOWN
}

IMMUTABLE_STATES = frozenset(
    {VersionState.RELEASED, VersionState.DEPRECATED, VersionState.RETIRED}
)


class AddressLevelType(StrEnum):
    LITERAL = "literal"
    VARIABLE = "variable"
