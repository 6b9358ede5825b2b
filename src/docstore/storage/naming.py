"""Collision-free document naming.

Names are compared case-insensitively against the current catalog. The
allocator takes one catalog snapshot per call and is not safe against a
concurrent writer creating the same name before the caller does; callers
should create files with exclusive-create semantics.
"""

import logging
import os
from typing import Optional, Set

from .catalog import Catalog
from .models import SortOrder
from .paths import validate_document_name

logger = logging.getLogger(__name__)


def strip_extension(file_name: str) -> str:
    """Return the file name without its final extension.

    Examples:
        >>> strip_extension("Notes.txt")
        'Notes'
        >>> strip_extension("a.b.txt")
        'a.b'
        >>> strip_extension("README")
        'README'
    """
    return os.path.splitext(file_name)[0]


def _fold(name: str) -> str:
    # Plain lowercasing: "Straße" and "strasse" are distinct names.
    return name.lower()


class NameAllocator:
    """Checks and allocates document names against the catalog."""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def _taken(self, cloud_available: Optional[bool] = None) -> Set[str]:
        # Every listed file ends with the managed suffix, which may itself contain dots.
        return {
            _fold(self.catalog.document_name(file_name))
            for file_name in self.catalog.file_list(SortOrder.BY_NAME, cloud_available)
        }

    def is_available(self, name: str, cloud_available: Optional[bool] = None) -> bool:
        """True iff no catalog entry has this extension-less name, ignoring case."""
        validate_document_name(name)
        return _fold(name) not in self._taken(cloud_available)

    def available_name(self, proposed: str, cloud_available: Optional[bool] = None) -> str:
        """Return ``proposed`` or the first free ``"<proposed> <n>"`` for n = 1, 2, ...

        The casing and spacing of ``proposed`` are kept in the result.
        """
        validate_document_name(proposed)
        taken = self._taken(cloud_available)

        candidate = proposed
        counter = 0
        while _fold(candidate) in taken:
            counter += 1
            candidate = f"{proposed} {counter}"

        if counter:
            logger.debug(f"Name {proposed!r} taken, allocated {candidate!r}")
        return candidate
