class VotingError(Exception):
    """Base class for errors reported to API callers as ``{ok: false, error}``."""

    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class MalformedRequest(VotingError):
    status_code = 400


class InvalidCount(VotingError):
    status_code = 400


class DuplicateLocation(VotingError):
    status_code = 400


class InvalidPointAssignment(VotingError):
    status_code = 400


class UnknownLocation(VotingError):
    status_code = 400


class NoActiveEvent(VotingError):
    status_code = 500


class StorageWriteFailure(VotingError):
    status_code = 500


class AccessDenied(VotingError):
    status_code = 401

    def __init__(self, message="access denied"):
        super().__init__(message)


class ResultsKeyNotConfigured(VotingError):
    status_code = 500

    def __init__(self, message="results key is not configured"):
        super().__init__(message)
