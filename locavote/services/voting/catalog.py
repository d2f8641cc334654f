from flask import current_app

from locavote.models import Event, Location


def event_scoping_enabled():
    return bool(current_app.config.get("EVENT_SCOPING", True))


def get_active_event():
    return (
        Event.query.filter_by(active=True)
        .order_by(Event.id.desc())
        .first()
    )


def list_locations():
    """Votable locations ordered by id.

    With event scoping on, only the active event's locations are returned,
    and none at all while no event is active.
    """
    query = Location.query
    if event_scoping_enabled():
        event = get_active_event()
        if event is None:
            return []
        query = query.filter_by(event_id=event.id)
    return query.order_by(Location.id).all()
