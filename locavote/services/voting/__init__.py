from locavote.services.voting.catalog import get_active_event, list_locations
from locavote.services.voting.results import load_results, tally_location_results
from locavote.services.voting.selection import build_payload, local_error, reduce_selection
from locavote.services.voting.submission import record_submission
from locavote.services.voting.validation import validate_selections

__all__ = [
    "build_payload",
    "get_active_event",
    "list_locations",
    "load_results",
    "local_error",
    "record_submission",
    "reduce_selection",
    "tally_location_results",
    "validate_selections",
]
