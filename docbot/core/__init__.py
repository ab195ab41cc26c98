"""
Core — Lookup engine for docbot

Contains:
- Models: read-only class / method records
- Query: free-text query parsing
- Index: documentation index contract and in-memory index
- Archive: zip-backed library archives
- Methods: hierarchy-wide method matching
- Resolver: class and method disambiguation
"""

from .models import ClassName, ParameterInfo, MethodInfo, LibraryInfo, ClassInfo
from .query import ClassReference, parse_query
from .index import DocumentationIndex, LookupStatus, LookupResult, MemoryIndex
from .archive import LibraryArchive, ArchiveIndex
from .methods import MatchSet, MethodResolver
from .resolver import AmbiguityResolver, Resolution, ResolutionKind, method_choice_label

__all__ = [
    'ClassName', 'ParameterInfo', 'MethodInfo', 'LibraryInfo', 'ClassInfo',
    'ClassReference', 'parse_query',
    'DocumentationIndex', 'LookupStatus', 'LookupResult', 'MemoryIndex',
    'LibraryArchive', 'ArchiveIndex',
    'MatchSet', 'MethodResolver',
    'AmbiguityResolver', 'Resolution', 'ResolutionKind', 'method_choice_label',
]
