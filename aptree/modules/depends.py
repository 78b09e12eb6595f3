# aptree/modules/depends.py
"""
Parser for the value of a control-file ``Depends:`` field.

    libc6 (>= 2.34), debconf (>= 0.5) | debconf-2.0, zlib1g

Terms separated by commas are all required; a term may hold ``|``
alternatives and a parenthesized version constraint. Versions are thrown
away and every alternative is kept as its own name, so the result is the
set of every package that could satisfy the field, in first-seen order.
"""

from __future__ import annotations
import re
from typing import List

_WHITESPACE = re.compile(r"\s+")
_VERSION = re.compile(r"\(.*?\)")


def normalize_field(raw: str) -> str:
    return _WHITESPACE.sub(" ", raw or "").strip()


def _term_names(term: str) -> List[str]:
    term = _VERSION.sub("", term).strip()
    if "|" in term:
        return [alt.strip() for alt in term.split("|")]
    return [term]


def parse_depends(raw: str) -> List[str]:
    """Return the ordered, duplicate-free dependency names of a Depends value."""
    out: List[str] = []
    line = normalize_field(raw)
    if not line:
        return out

    for term in line.split(","):
        term = term.strip()
        if not term:
            continue
        for name in _term_names(term):
            if name and name not in out:
                out.append(name)
    return out
