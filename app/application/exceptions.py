class LLMUpstreamError(RuntimeError):
    """Raised when LLM provider fails (timeouts, network errors, service unavailable)."""
    pass


class LLMContractError(RuntimeError):
    """Raised when LLM adapter violates contract (empty or malformed completion)."""
    pass


class AppointmentStorageError(RuntimeError):
    """Raised when the appointment store cannot read or write its backing file."""
    pass


class InvalidUploadError(ValueError):
    """Raised when an uploaded document is too large or is not readable text."""
    pass
