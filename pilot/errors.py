class ProtocolError(ValueError):
    """Malformed or truncated referee input."""

class ResourceError(RuntimeError):
    """A one-shot resource was consumed twice."""
