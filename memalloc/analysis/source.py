#!/usr/bin/env python3
"""
Object file abstraction consumed by the allocation analysis.

The analysis only needs symbols and sections with addresses, sizes,
alignments and names, so any binary format reader can back it.
"""

from abc import ABC, abstractmethod
from typing import List

from ..core.models import Section, Symbol


class ObjectSource(ABC):
    """Provides the symbols and sections of a linked image"""

    @abstractmethod
    def symbols(self) -> List[Symbol]:
        """Return all symbols of the image."""

    @abstractmethod
    def sections(self) -> List[Section]:
        """Return all sections of the image."""
