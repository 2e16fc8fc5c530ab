"""
Domain errors for the event service.

Workflows raise these; the API layer turns them into
``{"success": false, "message": ...}`` responses with ``status_code``.
"""


class EventHubError(Exception):
    """Base exception for all event service errors"""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"success": False, "message": self.message}


class ValidationError(EventHubError):
    """Malformed or missing input"""

    status_code = 400

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message)


class Unauthenticated(EventHubError):
    """Missing or invalid caller identity"""

    status_code = 401

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class Forbidden(EventHubError):
    """Authenticated, but role or ownership does not allow the action"""

    status_code = 403

    def __init__(self, message: str = "Not authorized to perform this action"):
        super().__init__(message)


class NotFound(EventHubError):
    status_code = 404

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class Conflict(EventHubError):
    """Request clashes with current state"""

    status_code = 400

    def __init__(self, message: str = "Conflict with current state"):
        super().__init__(message)


class InvalidState(Conflict):
    def __init__(self, message: str = "Cannot register for this event. Event is not approved."):
        super().__init__(message)


class CapacityExceeded(Conflict):
    def __init__(self, message: str = "Event is full. Registration capacity reached."):
        super().__init__(message)


class Duplicate(Conflict):
    def __init__(self, message: str = "You are already registered for this event"):
        super().__init__(message)


class InternalError(EventHubError):
    status_code = 500
