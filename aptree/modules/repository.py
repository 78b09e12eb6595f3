# aptree/modules/repository.py

from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Optional

from aptree.modules.control import ControlFileParser, PackageRecord


class Repository:
    """
    Package records indexed by name, in the order they were first seen.
    Adding a record whose name is already present replaces the old one
    in place. Looking up an unknown name returns None.
    """

    def __init__(self, records: Optional[Iterable[PackageRecord]] = None):
        self._records: Dict[str, PackageRecord] = {}
        for record in records or ():
            self.add(record)

    @classmethod
    def from_text(cls, text: str, parser: Optional[ControlFileParser] = None) -> "Repository":
        parser = parser or ControlFileParser()
        return cls(parser.parse(text))

    def add(self, record: PackageRecord):
        self._records[record.name] = record

    def get(self, name: str) -> Optional[PackageRecord]:
        return self._records.get(name)

    def names(self) -> List[str]:
        return list(self._records)

    def __contains__(self, name) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PackageRecord]:
        return iter(self._records.values())
