"""Error taxonomy for the transcription workflows."""


class TranscriberError(Exception):
    """Base class for all transcriber errors."""


class ValidationError(TranscriberError):
    """Input missing before an action; surfaced to the user, no state change."""


class SessionBusyError(ValidationError):
    """Another workflow already holds the session."""


class ServiceError(TranscriberError):
    """The generative service failed. The original exception is chained."""
