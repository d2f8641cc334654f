"""In-progress ballot state for a voter building their top three.

The state is an immutable value; ``reduce_selection`` returns a new state for
every action. Two rules apply on top of the plain updates:

* when exactly one location is selected it always holds 3 points;
* assigning a point value another location already holds swaps the two.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from locavote.services.voting.validation import MAX_SELECTIONS, canonical_points

VALID_POINTS = (1, 2, 3)


@dataclass(frozen=True)
class Choice:
    location_id: int
    points: Optional[int] = None
    comment: str = ""


@dataclass(frozen=True)
class SelectionState:
    choices: Tuple[Choice, ...] = ()

    @property
    def selected_ids(self):
        return [choice.location_id for choice in self.choices]

    @property
    def used_points(self):
        return {choice.points for choice in self.choices if choice.points is not None}

    @property
    def can_select_more(self):
        return len(self.choices) < MAX_SELECTIONS

    def find(self, location_id):
        for choice in self.choices:
            if choice.location_id == location_id:
                return choice
        return None


@dataclass(frozen=True)
class Toggle:
    location_id: int


@dataclass(frozen=True)
class AssignPoints:
    location_id: int
    points: int


@dataclass(frozen=True)
class SetComment:
    location_id: int
    comment: str


@dataclass(frozen=True)
class Reset:
    pass


def _toggle(state, location_id):
    if state.find(location_id) is not None:
        return SelectionState(
            tuple(c for c in state.choices if c.location_id != location_id)
        )
    if not state.can_select_more:
        return state
    return SelectionState(state.choices + (Choice(location_id),))


def _assign(state, location_id, points):
    target = state.find(location_id)
    if target is None or points not in VALID_POINTS:
        return state

    holder = next(
        (
            c
            for c in state.choices
            if c.points == points and c.location_id != location_id
        ),
        None,
    )

    choices = []
    for choice in state.choices:
        if choice.location_id == location_id:
            choices.append(replace(choice, points=points))
        elif holder is not None and choice.location_id == holder.location_id:
            choices.append(replace(choice, points=target.points))
        else:
            choices.append(choice)
    return SelectionState(tuple(choices))


def _set_comment(state, location_id, comment):
    if state.find(location_id) is None:
        return state
    return SelectionState(
        tuple(
            replace(c, comment=comment) if c.location_id == location_id else c
            for c in state.choices
        )
    )


def _auto_assign_single(state):
    if len(state.choices) == 1 and state.choices[0].points != 3:
        return SelectionState((replace(state.choices[0], points=3),))
    return state


def reduce_selection(state, action):
    if isinstance(action, Toggle):
        next_state = _toggle(state, action.location_id)
    elif isinstance(action, AssignPoints):
        next_state = _assign(state, action.location_id, action.points)
    elif isinstance(action, SetComment):
        next_state = _set_comment(state, action.location_id, action.comment)
    elif isinstance(action, Reset):
        next_state = SelectionState()
    else:
        raise TypeError(f"Unsupported selection action: {action!r}")
    return _auto_assign_single(next_state)


def local_error(state):
    """Pre-submit check the voting page runs; ``None`` when the state is sendable."""
    count = len(state.choices)
    if count < 1 or count > MAX_SELECTIONS:
        return "Choose 1, 2 or 3 locations."
    if any(choice.points is None for choice in state.choices):
        return "Assign points to every chosen location."
    expected = canonical_points(count)
    if sorted(choice.points for choice in state.choices) != expected:
        listed = ", ".join(str(value) for value in reversed(expected))
        return f"Use the points {listed} (each once)."
    return None


def build_payload(state):
    return {
        "selections": [
            {
                "locationId": choice.location_id,
                "points": choice.points,
                "comment": choice.comment,
            }
            for choice in state.choices
        ]
    }
