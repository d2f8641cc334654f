from dataclasses import dataclass
from typing import Optional

from locavote.services.errors import (
    DuplicateLocation,
    InvalidCount,
    InvalidPointAssignment,
    MalformedRequest,
)

MAX_SELECTIONS = 3

CANONICAL_POINTS = {
    1: [3],
    2: [2, 3],
    3: [1, 2, 3],
}


@dataclass(frozen=True)
class Selection:
    location_id: int
    points: int
    comment: Optional[str] = None


def canonical_points(count):
    return CANONICAL_POINTS.get(count)


def normalize_comment(comment):
    if comment is None:
        return None
    if not isinstance(comment, str):
        raise MalformedRequest("comment must be text.")
    return comment.strip() or None


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_entry(entry):
    if not isinstance(entry, dict):
        raise MalformedRequest("Each selection must be an object.")

    location_id = entry.get("locationId")
    if not _is_int(location_id):
        raise MalformedRequest("locationId must be an integer.")

    return Selection(
        location_id=location_id,
        points=entry.get("points"),
        comment=normalize_comment(entry.get("comment")),
    )


def validate_selections(raw_selections):
    """Check a submitted selection list and return it as ``Selection`` values.

    Checks run in a fixed order and the first failure is the only one
    reported: selection count, then unique locations, then the point set.
    The input list is left untouched.
    """
    if not isinstance(raw_selections, list):
        raise MalformedRequest("selections must be a list.")

    count = len(raw_selections)
    if count < 1 or count > MAX_SELECTIONS:
        raise InvalidCount("Choose 1, 2 or 3 locations.")

    selections = [_parse_entry(entry) for entry in raw_selections]

    location_ids = {selection.location_id for selection in selections}
    if len(location_ids) != count:
        raise DuplicateLocation("Each location can only be chosen once.")

    points = [selection.points for selection in selections]
    if not all(_is_int(value) for value in points) or sorted(points) != canonical_points(count):
        expected = ", ".join(str(value) for value in reversed(canonical_points(count)))
        raise InvalidPointAssignment(f"Assign the points {expected}, each exactly once.")

    return selections
