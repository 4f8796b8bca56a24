class ConsistencyError(Exception):
    """Base class for errors raised by the consistency linter."""


class ConfigurationError(ConsistencyError):
    """Options or configuration that cannot produce a meaningful report."""


class ContentRetrievalError(ConsistencyError):
    """A source file could not be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read '{path}': {reason}")
        self.path = path
        self.reason = reason
