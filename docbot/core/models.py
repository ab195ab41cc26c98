"""
Models — Read-only documentation records

Records are produced by a documentation index and never mutated by the
lookup engine:
- ClassName: fully-qualified / simple name pair
- ParameterInfo: one method parameter (type + array flag)
- MethodInfo: a method or constructor with derived signatures
- LibraryInfo: metadata of the library that owns a class
- ClassInfo: a class, interface, enum, annotation or exception
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, FrozenSet, Tuple


@dataclass(frozen=True)
class ClassName:
    """Fully-qualified and simple name of a class."""
    fully_qualified: str
    simple: str = ""

    def __post_init__(self):
        if not self.simple:
            dot = self.fully_qualified.rfind('.')
            object.__setattr__(self, 'simple', self.fully_qualified[dot + 1:])

    @property
    def package(self) -> str:
        """Package portion of the name ("" for the default package)."""
        dot = self.fully_qualified.rfind('.')
        return self.fully_qualified[:dot] if dot >= 0 else ""

    def __str__(self) -> str:
        return self.fully_qualified


@dataclass(frozen=True)
class ParameterInfo:
    """A method parameter."""
    type: ClassName
    name: str = ""
    array: bool = False

    @property
    def label(self) -> str:
        """Simple type name, with "[]" appended for arrays."""
        return self.type.simple + ("[]" if self.array else "")


@dataclass(frozen=True)
class MethodInfo:
    """
    A method (or constructor) of a class.

    The signature is used to recognise the same method redeclared further
    up a class hierarchy; it is independent of the declaring class.
    """
    name: str
    parameters: Tuple[ParameterInfo, ...] = ()
    modifiers: FrozenSet[str] = frozenset()
    deprecated: bool = False
    description: str = ""
    url_anchor: str = ""

    @property
    def signature(self) -> str:
        """Name plus ordered fully-qualified parameter types, e.g. "add(int, java.lang.Object)"."""
        types = [p.type.fully_qualified + ("[]" if p.array else "") for p in self.parameters]
        return f"{self.name}({', '.join(types)})"

    @property
    def parameter_labels(self) -> List[str]:
        return [p.label for p in self.parameters]

    @property
    def signature_string(self) -> str:
        """Display signature, e.g. "add(int, Object)"."""
        return f"{self.name}({', '.join(self.parameter_labels)})"


@dataclass(frozen=True)
class LibraryInfo:
    """Metadata of a documented library (one per archive)."""
    name: Optional[str] = None
    version: Optional[str] = None
    base_url: Optional[str] = None
    project_url: Optional[str] = None
    javadoc_url_pattern: Optional[str] = None

    def get_url(self, name: ClassName) -> Optional[str]:
        """URL of a class's documentation page, or None without a base URL."""
        path = name.fully_qualified.replace('.', '/')
        if self.javadoc_url_pattern:
            return self.javadoc_url_pattern.replace("{class}", path)
        if not self.base_url:
            return None
        return f"{self.base_url}{path}.html"

    def get_frame_url(self, name: ClassName) -> Optional[str]:
        """URL of a class's page inside the frameset."""
        path = name.fully_qualified.replace('.', '/')
        if self.javadoc_url_pattern:
            return self.javadoc_url_pattern.replace("{class}", path)
        if not self.base_url:
            return None
        return f"{self.base_url}index.html?{path}.html"


@dataclass(frozen=True)
class ClassInfo:
    """Documentation of a single class."""
    name: ClassName
    modifiers: FrozenSet[str] = frozenset()
    deprecated: bool = False
    superclass: Optional[ClassName] = None
    interfaces: Tuple[ClassName, ...] = ()
    methods: Tuple[MethodInfo, ...] = ()
    description: str = ""
    library: Optional[LibraryInfo] = field(default=None, compare=False)

    @property
    def url(self) -> Optional[str]:
        return self.library.get_url(self.name) if self.library else None

    @property
    def frame_url(self) -> Optional[str]:
        return self.library.get_frame_url(self.name) if self.library else None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], library: Optional[LibraryInfo] = None) -> "ClassInfo":
        """
        Build a record from its archive representation.

        Args:
            data: Decoded class document (see docbot.core.archive)
            library: Owning library, if any

        Returns:
            ClassInfo
        """
        superclass = data.get("superclass")
        return cls(
            name=_class_name(data["name"]),
            modifiers=frozenset(data.get("modifiers", [])),
            deprecated=bool(data.get("deprecated", False)),
            superclass=_class_name(superclass) if superclass else None,
            interfaces=tuple(_class_name(i) for i in data.get("interfaces", [])),
            methods=tuple(_method(m) for m in data.get("methods", [])),
            description=data.get("description", ""),
            library=library,
        )


def _class_name(value: Any) -> ClassName:
    """Accept "java.util.List" or {"fully_qualified": ..., "simple": ...}."""
    if isinstance(value, dict):
        return ClassName(value["fully_qualified"], value.get("simple", ""))
    return ClassName(str(value))


def _method(data: Dict[str, Any]) -> MethodInfo:
    parameters = tuple(
        ParameterInfo(
            type=_class_name(p["type"]),
            name=p.get("name", ""),
            array=bool(p.get("array", False)),
        )
        for p in data.get("parameters", [])
    )
    return MethodInfo(
        name=data["name"],
        parameters=parameters,
        modifiers=frozenset(data.get("modifiers", [])),
        deprecated=bool(data.get("deprecated", False)),
        description=data.get("description", ""),
        url_anchor=data.get("url_anchor", ""),
    )
