"""
Exceptions for the MentorMatch response index and notes.
"""


class MentorMatchError(Exception):
    """Base exception for all application errors."""
    pass


class ConfigError(MentorMatchError):
    """
    Error in application configuration.

    Raised when:
    - A required credential (API key) is not set
    - A setting has an invalid value
    - A provider is missing from config/providers.yaml
    """
    pass


class EmbeddingError(MentorMatchError):
    """
    Error producing an embedding.

    Raised when the provider call fails or returns a vector whose
    length does not match the configured dimension.
    """

    def __init__(self, message: str, expected: int = None, actual: int = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class StoreError(MentorMatchError):
    """
    Error talking to the vector store.

    Raised for any failed store operation (list, create, upsert,
    fetch, query, delete).
    """

    def __init__(self, message: str, operation: str = None):
        super().__init__(message)
        self.operation = operation


class IndexNotFoundError(StoreError):
    """The target index or namespace does not exist."""
    pass


class InvalidArgumentError(MentorMatchError, ValueError):
    """
    A caller passed an invalid value.

    Raised when:
    - Vectors of different length are compared
    - Required metadata fields are empty
    - Metadata values have an unsupported type
    """
    pass


class NotFoundError(MentorMatchError, LookupError):
    """A requested record, note or journal entry does not exist."""
    pass
