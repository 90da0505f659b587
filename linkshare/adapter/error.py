"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class EventBusClosedError(AdapterError):
    """Raised when subscribing to a bus that has been shut down."""

    pass
