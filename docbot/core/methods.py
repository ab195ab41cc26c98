"""
Methods — Method matching across a class hierarchy

A method query is matched against the class itself, its superclasses and
every interface reachable from them. Methods redeclared along the way
(overrides, interface implementations) are counted once, by signature.

Two kinds of matches are collected:
- name matches: same name, case-insensitive
- the exact match: same name and the same parameter types, compared by
  simple name ("[]" appended for arrays), case-insensitive, in order
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, List, Set

from .index import DocumentationIndex, LookupStatus
from .models import ClassInfo, ClassName, MethodInfo


logger = logging.getLogger(__name__)


@dataclass
class MatchSet:
    """Methods matching a query within one class hierarchy."""
    exact_signature: Optional[MethodInfo] = None
    matching_name: List[MethodInfo] = field(default_factory=list)

    def is_empty(self) -> bool:
        return self.exact_signature is None and not self.matching_name


class MethodResolver:
    """
    Walks class hierarchies to find methods by name and signature.

    Superclasses and interfaces are resolved through the index; ones the
    index does not know (or cannot pin down) are skipped.
    """

    def __init__(self, index: DocumentationIndex):
        self.index = index

    def match(
        self,
        info: ClassInfo,
        method_name: str,
        parameters: Optional[List[str]] = None
    ) -> MatchSet:
        """
        Find the methods of a class (and its ancestors) matching a query.

        Args:
            info: Class to start from
            method_name: Method name (case-insensitive)
            parameters: Parameter type names to match exactly, or None to
                match by name only

        Returns:
            MatchSet with name matches in walk order

        Raises:
            DocumentationError: if an ancestor cannot be read
        """
        matches = MatchSet()
        seen_signatures: Set[str] = set()
        visited: Set[str] = {info.name.fully_qualified.lower()}
        method_name_lower = method_name.lower()

        stack = [info]
        while stack:
            current = stack.pop()

            for method in current.methods:
                if method.name.lower() != method_name_lower:
                    continue

                signature = method.signature
                if signature in seen_signatures:
                    continue
                seen_signatures.add(signature)
                matches.matching_name.append(method)

                if parameters is not None and _parameters_match(method, parameters):
                    matches.exact_signature = method

            ancestors = []
            if current.superclass is not None:
                ancestors.append(current.superclass)
            ancestors.extend(current.interfaces)

            for ancestor in ancestors:
                key = ancestor.fully_qualified.lower()
                if key in visited:
                    continue
                visited.add(key)

                ancestor_info = self._load(ancestor)
                if ancestor_info is not None:
                    stack.append(ancestor_info)

        logger.debug(
            "%s#%s: %d name match(es), exact=%s",
            info.name.fully_qualified, method_name,
            len(matches.matching_name),
            matches.exact_signature.signature if matches.exact_signature else None
        )
        return matches

    def _load(self, name: ClassName) -> Optional[ClassInfo]:
        result = self.index.lookup(name.fully_qualified)
        if result.status != LookupStatus.FOUND:
            return None
        return result.info


def _parameters_match(method: MethodInfo, parameters: List[str]) -> bool:
    labels = method.parameter_labels
    if len(labels) != len(parameters):
        return False
    return all(a.lower() == b.lower() for a, b in zip(labels, parameters))
