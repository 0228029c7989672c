# rfid_sim/utils/errors.py
"""Error types, error policies and response formatting utilities."""

import logging

logger = logging.getLogger(__name__)

class SimError(Exception):
    """Base class for simulator errors."""
    pass

class ValidationError(SimError):
    """Configuration or scenario validation errors."""
    pass

class TransformError(SimError):
    """A frame pose could not be looked up."""
    pass

class ErrorPolicy:
    """Decides what happens to a recoverable error raised inside a callback."""

    def handle(self, error, context=""):
        raise NotImplementedError("handle must be implemented by subclasses")

class LogAndContinue(ErrorPolicy):
    """Log the error and carry on with the previous state.

    Args:
        level: Logging level used for the message
        log: Logger to write to, defaults to this module's logger
    """

    def __init__(self, level=logging.DEBUG, log=None):
        self.level = level
        self.log = log or logger
        self.count = 0

    def handle(self, error, context=""):
        self.count += 1
        if context:
            self.log.log(self.level, f"{context}: {error}")
        else:
            self.log.log(self.level, str(error))

class RaiseErrors(ErrorPolicy):
    """Re-raise every error. Useful in tests and strict tooling."""

    def handle(self, error, context=""):
        raise error

def success_dict(message, **kwargs):
    """Create a success response dictionary.

    Args:
        message (str): Success message
        **kwargs: Additional fields to include in response

    Returns:
        dict: Success dictionary
    """
    result = {
        "ok": True,
        "status": message
    }
    result.update(kwargs)
    return result

def error_dict(error_type, message, **kwargs):
    """Create an error response dictionary.

    Args:
        error_type (str): Error type
        message (str): Error message
        **kwargs: Additional fields to include in response

    Returns:
        dict: Error dictionary
    """
    result = {
        "ok": False,
        "error": error_type,
        "message": message
    }
    result.update(kwargs)
    return result
