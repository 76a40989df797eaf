class ResponderError(Exception):
    """Base class for errors raised while building responses."""


class ResourceKeyError(ResponderError):
    """No resource key could be resolved for a resource."""


class InvalidStatusCodeError(ResponderError, ValueError):
    """A success response was given a non-2xx status code."""

    def __init__(self, status: int):
        self.status = status
        super().__init__(f"{status} is not a valid success status code")
