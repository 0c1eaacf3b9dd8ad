"""Daily punch state machine.

EMPTY -> HAS_MORNING_IN -> HAS_LUNCH_OUT -> HAS_LUNCH_IN -> HAS_EVENING_OUT (terminal)
"""
from __future__ import annotations

from typing import Optional, Tuple

from ..core.enums import Checkpoint, PunchState
from ..core.exceptions import AlreadyComplete
from .model import DailyPunchRecord

_STATES: Tuple[PunchState, ...] = tuple(PunchState)
_CHECKPOINTS: Tuple[Checkpoint, ...] = tuple(Checkpoint)

ACTION_LABELS = {
    Checkpoint.MORNING_IN: "Clock in",
    Checkpoint.LUNCH_OUT: "Start lunch break",
    Checkpoint.LUNCH_IN: "End lunch break",
    Checkpoint.EVENING_OUT: "Clock out",
}
DAY_COMPLETE_LABEL = "Day complete"


def state_of(record: Optional[DailyPunchRecord]) -> PunchState:
    if record is None:
        return PunchState.EMPTY
    return _STATES[len(record.filled())]


def is_terminal(state: PunchState) -> bool:
    return state == PunchState.HAS_EVENING_OUT


def advance(state: PunchState) -> Tuple[Checkpoint, PunchState]:
    """The checkpoint the next punch fills, and the state it leads to."""
    if is_terminal(state):
        raise AlreadyComplete("All punches for today have already been recorded")
    index = _STATES.index(state)
    return _CHECKPOINTS[index], _STATES[index + 1]


def next_checkpoint(record: Optional[DailyPunchRecord]) -> Optional[Checkpoint]:
    state = state_of(record)
    if is_terminal(state):
        return None
    return advance(state)[0]


def previous_checkpoint(checkpoint: Checkpoint) -> Optional[Checkpoint]:
    index = _CHECKPOINTS.index(checkpoint)
    return _CHECKPOINTS[index - 1] if index else None


def next_action_label(record: Optional[DailyPunchRecord]) -> str:
    checkpoint = next_checkpoint(record)
    return ACTION_LABELS[checkpoint] if checkpoint else DAY_COMPLETE_LABEL
