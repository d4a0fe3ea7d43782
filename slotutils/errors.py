import logging


class CowinSlotsException(Exception):
    """Base class for exceptions in this module."""

    def __init__(self, message: str):
        self.message = message
        logging.getLogger(__name__).debug(f"{self.__class__.__name__}: {message}")
        super().__init__(self.message)


class NetworkError(CowinSlotsException):
    """Request could not be sent or its body could not be read."""
    pass


class DecodeError(CowinSlotsException):
    """Response body does not have the expected shape."""
    pass


class PromptCancelled(CowinSlotsException):
    """User aborted a selection."""
    pass


class NoCentersAvailable(CowinSlotsException):
    pass
