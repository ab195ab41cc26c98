"""
Index — Documentation index contract

A documentation index answers three questions:
- lookup(name): which class does this (simple or qualified) name refer to?
- get_class_info(name): same, in the classic "record or None" shape
- enumerate_known_classes(): every fully-qualified name it knows

Lookups are case-insensitive. A fully-qualified match always wins over
simple-name matches; several simple-name matches make the name ambiguous.
Ambiguity is a routine outcome, so lookup() returns it as a status.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Iterable

from ..errors import MultipleClassesFoundError
from .models import ClassInfo


logger = logging.getLogger(__name__)


class LookupStatus(Enum):
    """Lookup outcome."""
    FOUND = "found"
    AMBIGUOUS = "ambiguous"
    NOT_FOUND = "not_found"


@dataclass
class LookupResult:
    """Result of a class lookup."""
    status: LookupStatus
    info: Optional[ClassInfo] = None
    candidates: List[str] = field(default_factory=list)
    query: str = ""

    @classmethod
    def found(cls, info: ClassInfo, query: str = "") -> "LookupResult":
        return cls(status=LookupStatus.FOUND, info=info, query=query)

    @classmethod
    def ambiguous(cls, candidates: Iterable[str], query: str = "") -> "LookupResult":
        return cls(status=LookupStatus.AMBIGUOUS, candidates=list(candidates), query=query)

    @classmethod
    def not_found(cls, query: str = "") -> "LookupResult":
        return cls(status=LookupStatus.NOT_FOUND, query=query)


class DocumentationIndex(ABC):
    """
    Source of class documentation.

    Implementations may hit the disk or the network; I/O failures surface
    as DocumentationError.
    """

    @abstractmethod
    def lookup(self, name: str) -> LookupResult:
        """Resolve a simple or fully-qualified class name."""

    @abstractmethod
    def enumerate_known_classes(self) -> List[str]:
        """Fully-qualified names of every indexed class."""

    def get_class_info(self, name: str) -> Optional[ClassInfo]:
        """
        Resolve a class name to its record.

        Returns:
            The record, or None if the class is unknown

        Raises:
            MultipleClassesFoundError: if the name is ambiguous
        """
        result = self.lookup(name)
        if result.status == LookupStatus.AMBIGUOUS:
            raise MultipleClassesFoundError(result.candidates)
        return result.info


class NameTable:
    """
    Case-insensitive name resolution shared by index implementations.

    Maps lowercased fully-qualified and simple names to the fully-qualified
    names they denote. The first registration of a fully-qualified name
    wins; later duplicates are dropped.
    """

    def __init__(self):
        self._by_qualified: Dict[str, str] = {}
        self._by_simple: Dict[str, List[str]] = {}

    def add(self, fully_qualified: str, simple: str) -> bool:
        """Register a class. Returns False for a duplicate qualified name."""
        key = fully_qualified.lower()
        if key in self._by_qualified:
            logger.debug("Duplicate class %s ignored", fully_qualified)
            return False
        self._by_qualified[key] = fully_qualified
        self._by_simple.setdefault(simple.lower(), []).append(fully_qualified)
        return True

    def resolve(self, name: str) -> List[str]:
        """Fully-qualified names a query name refers to (possibly several)."""
        key = name.lower()
        qualified = self._by_qualified.get(key)
        if qualified is not None:
            return [qualified]
        return list(self._by_simple.get(key, []))

    def names(self) -> List[str]:
        return list(self._by_qualified.values())


class MemoryIndex(DocumentationIndex):
    """In-process index over ready-made records."""

    def __init__(self, classes: Iterable[ClassInfo] = ()):
        self._names = NameTable()
        self._classes: Dict[str, ClassInfo] = {}
        for info in classes:
            self.add(info)

    def add(self, info: ClassInfo):
        if self._names.add(info.name.fully_qualified, info.name.simple):
            self._classes[info.name.fully_qualified] = info

    def lookup(self, name: str) -> LookupResult:
        matches = self._names.resolve(name)
        if not matches:
            return LookupResult.not_found(name)
        if len(matches) > 1:
            return LookupResult.ambiguous(matches, name)
        return LookupResult.found(self._classes[matches[0]], name)

    def enumerate_known_classes(self) -> List[str]:
        return self._names.names()
