"""
Archive — Zip-backed documentation index

One archive per documented library:

    library.yaml                 (optional) name, version, base_url,
                                 project_url, javadoc_url_pattern
    java/util/List.json          one document per class
    java/util/Map.Entry.json     nested classes keep their dotted simple name

Class documents are decoded with orjson. Records are parsed lazily and
cached per archive; the class name table is built once on open.
"""

import logging
import zipfile
from pathlib import Path
from typing import Optional, List, Dict, Iterator, Iterable

import orjson
import yaml

from ..errors import DocumentationError, ArchiveFormatError
from .index import DocumentationIndex, LookupResult, NameTable
from .models import ClassInfo, ClassName, LibraryInfo


logger = logging.getLogger(__name__)

LIBRARY_INFO_FILE = "library.yaml"
CLASS_SUFFIX = ".json"


class LibraryArchive:
    """A documentation archive for a single library."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._cache: Dict[str, ClassInfo] = {}
        try:
            with zipfile.ZipFile(self.path) as zf:
                entries = zf.namelist()
                self.library = self._read_library_info(zf, entries)
        except (OSError, zipfile.BadZipFile) as e:
            raise DocumentationError(f"Cannot open archive {self.path}: {e}") from e

        self._entries: Dict[str, str] = {}
        for entry in entries:
            if not entry.endswith(CLASS_SUFFIX):
                continue
            fully_qualified = entry[:-len(CLASS_SUFFIX)].replace('/', '.')
            self._entries[fully_qualified] = entry

        logger.debug("Opened %s: %d classes", self.path.name, len(self._entries))

    def _read_library_info(self, zf: zipfile.ZipFile, entries: List[str]) -> LibraryInfo:
        if LIBRARY_INFO_FILE not in entries:
            return LibraryInfo()

        data = yaml.safe_load(zf.read(LIBRARY_INFO_FILE)) or {}
        if not isinstance(data, dict):
            raise ArchiveFormatError(f"{self.path}: {LIBRARY_INFO_FILE} is not a mapping")

        return LibraryInfo(
            name=_str_or_none(data.get("name")),
            version=_str_or_none(data.get("version")),
            base_url=_str_or_none(data.get("base_url")),
            project_url=_str_or_none(data.get("project_url")),
            javadoc_url_pattern=_str_or_none(data.get("javadoc_url_pattern")),
        )

    @property
    def name(self) -> Optional[str]:
        return self.library.name

    @property
    def version(self) -> Optional[str]:
        return self.library.version

    @property
    def base_url(self) -> Optional[str]:
        return self.library.base_url

    @property
    def project_url(self) -> Optional[str]:
        return self.library.project_url

    def get_url(self, info: ClassInfo) -> Optional[str]:
        return self.library.get_url(info.name)

    def get_frame_url(self, info: ClassInfo) -> Optional[str]:
        return self.library.get_frame_url(info.name)

    def iter_class_names(self) -> Iterator[ClassName]:
        """Every class in the archive."""
        for fully_qualified in self._entries:
            yield self._class_name(fully_qualified)

    def _class_name(self, fully_qualified: str) -> ClassName:
        # nested classes are stored as Outer.Inner.json under the package path
        entry = self._entries[fully_qualified]
        simple = entry.rsplit('/', 1)[-1][:-len(CLASS_SUFFIX)]
        return ClassName(fully_qualified, simple)

    def get_class_info(self, fully_qualified: str) -> Optional[ClassInfo]:
        """
        Load a class record.

        Args:
            fully_qualified: Exact fully-qualified name

        Returns:
            ClassInfo, or None if the archive does not document the class

        Raises:
            DocumentationError: if the archive cannot be read
        """
        cached = self._cache.get(fully_qualified)
        if cached is not None:
            return cached

        entry = self._entries.get(fully_qualified)
        if entry is None:
            return None

        try:
            with zipfile.ZipFile(self.path) as zf:
                raw = zf.read(entry)
        except (OSError, zipfile.BadZipFile, KeyError) as e:
            raise DocumentationError(f"Cannot read {entry} from {self.path}: {e}") from e

        try:
            data = orjson.loads(raw)
            data.setdefault("name", {"fully_qualified": fully_qualified,
                                     "simple": self._class_name(fully_qualified).simple})
            info = ClassInfo.from_dict(data, library=self.library)
        except (orjson.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
            raise ArchiveFormatError(f"Malformed class document {entry} in {self.path}: {e}") from e

        self._cache[fully_qualified] = info
        return info


class ArchiveIndex(DocumentationIndex):
    """
    Documentation index spanning several library archives.

    When two archives document the same fully-qualified class, the archive
    listed first wins.
    """

    def __init__(self, archives: Iterable[LibraryArchive]):
        self.archives = list(archives)
        self._names = NameTable()
        self._owners: Dict[str, LibraryArchive] = {}
        for archive in self.archives:
            for name in archive.iter_class_names():
                if self._names.add(name.fully_qualified, name.simple):
                    self._owners[name.fully_qualified] = archive

    @classmethod
    def from_directory(cls, directory: Path) -> "ArchiveIndex":
        """Open every *.zip in a directory, in file name order."""
        directory = Path(directory)
        if not directory.is_dir():
            raise DocumentationError(f"Archive directory not found: {directory}")

        archives = [LibraryArchive(p) for p in sorted(directory.glob("*.zip"))]
        logger.info("Loaded %d archive(s) from %s", len(archives), directory)
        return cls(archives)

    def lookup(self, name: str) -> LookupResult:
        matches = self._names.resolve(name)
        if not matches:
            return LookupResult.not_found(name)
        if len(matches) > 1:
            return LookupResult.ambiguous(matches, name)

        fully_qualified = matches[0]
        info = self._owners[fully_qualified].get_class_info(fully_qualified)
        if info is None:
            return LookupResult.not_found(name)
        return LookupResult.found(info, name)

    def enumerate_known_classes(self) -> List[str]:
        return self._names.names()


def _str_or_none(value) -> Optional[str]:
    return None if value is None else str(value)
