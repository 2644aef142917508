"""
Service Errors

Failures raised by the AI pipeline. Nothing here is retried; the HTTP layer
maps each type to a status code.
"""


class AIServiceError(Exception):
    """Base class for AI pipeline failures."""

    status_code: int = 500


class UpstreamUnavailable(AIServiceError):
    """The completion service or a context provider could not be reached."""

    status_code = 502


class MissingIdentityRecord(AIServiceError):
    """A context provider has no record for the requesting identity."""

    status_code = 404

    def __init__(self, identity: str):
        self.identity = identity
        super().__init__(f"User with ID {identity} not found")
