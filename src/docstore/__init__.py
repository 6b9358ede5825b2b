"""
Docstore - storage location and document catalog for a text editor.

This package decides where the user's documents live (local sandbox folder
or cloud-synced folder), lists and sorts them, hands out collision-free
names and reads per-document metadata.
"""

__version__ = "0.1.0"

from docstore.errors import (
    ConfigurationError,
    DocumentStoreError,
    InvalidDocumentNameError,
    PlatformCapabilityError,
)
from docstore.storage import DocumentManager, SortOrder

__all__ = [
    "ConfigurationError",
    "DocumentManager",
    "DocumentStoreError",
    "InvalidDocumentNameError",
    "PlatformCapabilityError",
    "SortOrder",
]
