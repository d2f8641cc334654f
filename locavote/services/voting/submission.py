from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from locavote.extensions import db
from locavote.models import Location, Submission, Vote
from locavote.services.errors import NoActiveEvent, StorageWriteFailure, UnknownLocation
from locavote.services.security import generate_submission_token
from locavote.services.voting.catalog import event_scoping_enabled, get_active_event


def _check_locations(selections, event):
    wanted = {selection.location_id for selection in selections}
    query = Location.query.filter(Location.id.in_(sorted(wanted)))
    if event is not None:
        query = query.filter(Location.event_id == event.id)
    found = {location.id for location in query.all()}

    missing = sorted(wanted - found)
    if missing:
        joined = ", ".join(str(location_id) for location_id in missing)
        raise UnknownLocation(f"Unknown location(s): {joined}.")


def record_submission(selections):
    """Store one Submission plus a Vote per validated selection."""
    event = None
    if event_scoping_enabled():
        event = get_active_event()
        if event is None:
            raise NoActiveEvent("There is no active event to vote for.")

    _check_locations(selections, event)

    submission = Submission(
        event_id=event.id if event is not None else None,
        submission_token=generate_submission_token(),
    )
    try:
        db.session.add(submission)
        db.session.flush()

        for selection in selections:
            db.session.add(
                Vote(
                    submission_id=submission.id,
                    location_id=selection.location_id,
                    points=selection.points,
                    comment=selection.comment,
                )
            )
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error("Storing submission failed: %s", exc)
        detail = getattr(exc, "orig", None) or exc
        raise StorageWriteFailure(str(detail)) from exc

    current_app.logger.info(
        "Recorded submission %s with %d vote(s)", submission.id, len(selections)
    )
    return submission
