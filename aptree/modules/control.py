# aptree/modules/control.py
"""
control.py - reads Debian-style package indexes (``Packages`` files).

Records are separated by blank lines. Only two fields are modeled:

  Package: <name>
  Depends: <dependency list>, possibly folded onto
   continuation lines that start with whitespace

Everything else is skipped. The parser has no failure path: whatever the
input looks like, it returns the records it could make sense of.
"""

from __future__ import annotations
from typing import Iterator, List, NamedTuple, Optional, Tuple

from aptree.modules import logger as _logger
from aptree.modules.depends import parse_depends

PACKAGE_TAG = "Package:"
DEPENDS_TAG = "Depends:"


class PackageRecord(NamedTuple):
    name: str
    dependencies: Tuple[str, ...] = ()


class _PendingRecord:
    """Fields collected for the record currently being read."""

    def __init__(self):
        self.name: Optional[str] = None
        self.depends: Optional[str] = None
        # True while the last field seen was Depends, so folded lines belong to it
        self.depends_open = False

    def flush(self) -> Optional[PackageRecord]:
        if self.name is None:
            return None
        deps = parse_depends(self.depends) if self.depends is not None else []
        return PackageRecord(self.name, tuple(deps))


class ControlFileParser:
    def __init__(self, logger: Optional[_logger.Logger] = None):
        self.log = logger or _logger.get_logger("control")

    def iter_records(self, text: str) -> Iterator[PackageRecord]:
        pending = _PendingRecord()

        for line in (text or "").splitlines():
            if not line.strip():
                record = pending.flush()
                if record is not None:
                    yield record
                pending = _PendingRecord()
                continue

            if line.startswith(PACKAGE_TAG):
                # a second Package: without a separating blank line starts a new record
                if pending.name is not None:
                    record = pending.flush()
                    if record is not None:
                        yield record
                    pending = _PendingRecord()
                pending.name = line[len(PACKAGE_TAG):].strip()
                pending.depends_open = False
            elif line.startswith(DEPENDS_TAG):
                pending.depends = line[len(DEPENDS_TAG):].strip()
                pending.depends_open = True
            elif line[0] in " \t":
                if pending.depends_open and pending.depends is not None:
                    pending.depends += " " + line.strip()
            else:
                pending.depends_open = False

        record = pending.flush()
        if record is not None:
            yield record

    def parse(self, text: str) -> List[PackageRecord]:
        records = list(self.iter_records(text))
        self.log.debug(f"Parsed {len(records)} package records")
        return records


def parse_packages(text: str) -> List[PackageRecord]:
    return ControlFileParser().parse(text)
