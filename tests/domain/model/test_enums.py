from __future__ import annotations

import pytest

from eventportal.domain.model import IMMUTABLE_STATES, VersionState


@pytest.mark.parametrize(
    ("state_id", "expected"),
    [
        ("1", VersionState.DRAFT),
        ("2", VersionState.RELEASED),
        ("3", VersionState.DEPRECATED),
        ("4", VersionState.RETIRED),
        (1, VersionState.DRAFT),
        (4, VersionState.RETIRED),
        (" 1 ", VersionState.UNKNOWN),
        ("01", VersionState.UNKNOWN),
        ("\N{SUPERSCRIPT TWO}", VersionState.UNKNOWN),
        ("\N{ARABIC-INDIC DIGIT ONE}", VersionState.UNKNOWN),
        ("\N{ARABIC-INDIC DIGIT THREE}", VersionState.UNKNOWN),
        (VersionState.RELEASED, VersionState.RELEASED),
        (-1, VersionState.UNKNOWN),
        ("0", VersionState.UNKNOWN),
        ("5", VersionState.UNKNOWN),
        ("DRAFT", VersionState.UNKNOWN),
        ("", VersionState.UNKNOWN),
        (None, VersionState.UNKNOWN),
        (True, VersionState.UNKNOWN),
        (2.0, VersionState.UNKNOWN),
    ],
)
def test_from_state_id(state_id: object, expected: VersionState) -> None:
    assert VersionState.from_state_id(state_id) is expected
    assert VersionState.from_state_id(state_id) is VersionState.from_state_id(state_id)


def test_only_draft_is_mutable() -> None:
    assert [state for state in VersionState if state.is_mutable] == [VersionState.DRAFT]
    assert VersionState.DRAFT not in IMMUTABLE_STATES
    assert VersionState.UNKNOWN not in IMMUTABLE_STATES


def test_state_id_round_trips_for_known_states() -> None:
    for state in (VersionState.DRAFT, VersionState.RELEASED):
        assert VersionState.from_state_id(state.state_id) is state
