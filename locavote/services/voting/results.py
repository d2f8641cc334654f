from flask import current_app

from locavote.models import Location, Vote
from locavote.services.voting.catalog import event_scoping_enabled, get_active_event

RESULT_COLUMNS = [
    "positie",
    "locatie_id",
    "locatie",
    "artiest",
    "wegingsfactor",
    "stemmen_aantal",
    "punten_totaal",
    "aantal_3",
    "aantal_2",
    "aantal_1",
    "toelichting_bundel",
]

WEIGHTING_MODES = ("none", "multiply")


def weighted_total(points_sum, weight, mode):
    if mode == "none":
        return points_sum
    if mode == "multiply":
        return points_sum * weight
    raise ValueError(f"Unknown results weighting mode: {mode!r}")


def tally_location_results(votes, mode="none", separator=" | "):
    """Aggregate votes into ranked rows, one per location that got a vote.

    ``votes`` must be in insertion order; comments are joined in that order.
    Rows are ranked by total points descending, then by location id.
    """
    locations_by_id = {}
    counts = {}
    points_sums = {}
    level_counts = {}
    comments = {}

    for vote in votes:
        location_id = vote.location_id
        if location_id not in counts:
            locations_by_id[location_id] = vote.location
            counts[location_id] = 0
            points_sums[location_id] = 0
            level_counts[location_id] = {3: 0, 2: 0, 1: 0}
            comments[location_id] = []

        counts[location_id] += 1
        points_sums[location_id] += vote.points
        if vote.points in level_counts[location_id]:
            level_counts[location_id][vote.points] += 1
        if vote.comment is not None:
            comments[location_id].append(vote.comment)

    rows = []
    for location_id, location in locations_by_id.items():
        rows.append(
            {
                "locatie_id": location_id,
                "locatie": location.name,
                "artiest": location.artist,
                "wegingsfactor": location.weight,
                "stemmen_aantal": counts[location_id],
                "punten_totaal": weighted_total(
                    points_sums[location_id], location.weight, mode
                ),
                "aantal_3": level_counts[location_id][3],
                "aantal_2": level_counts[location_id][2],
                "aantal_1": level_counts[location_id][1],
                "toelichting_bundel": separator.join(comments[location_id]) or None,
            }
        )

    rows.sort(key=lambda row: (-row["punten_totaal"], row["locatie_id"]))

    return [
        {"positie": position, **row} for position, row in enumerate(rows, start=1)
    ]


def load_results():
    query = Vote.query.join(Location, Vote.location_id == Location.id)
    if event_scoping_enabled():
        event = get_active_event()
        if event is None:
            return []
        query = query.filter(Location.event_id == event.id)

    votes = query.order_by(Vote.id).all()
    return tally_location_results(
        votes,
        mode=current_app.config.get("RESULTS_WEIGHTING", "none"),
        separator=current_app.config.get("COMMENT_SEPARATOR", " | "),
    )
