"""Exception hierarchy for docstore.

Only configuration and precondition problems raise. Filesystem access
failures during listing or metadata reads degrade to empty/absent results
inside the storage layer and never surface as exceptions.
"""


class DocumentStoreError(Exception):
    """Base exception for all docstore errors."""

    pass


class ConfigurationError(DocumentStoreError, ValueError):
    """Raised when the store configuration is invalid or unreadable."""

    pass


class PlatformCapabilityError(ConfigurationError):
    """Raised at startup when a foundational directory capability is missing."""

    pass


class InvalidDocumentNameError(DocumentStoreError, ValueError):
    """Raised when a document name violates the naming preconditions."""

    pass
