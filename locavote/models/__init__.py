from locavote.models.event import Event
from locavote.models.location import Location
from locavote.models.submission import Submission
from locavote.models.vote import Vote

__all__ = [
    "Event",
    "Location",
    "Submission",
    "Vote",
]
