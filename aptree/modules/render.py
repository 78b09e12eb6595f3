# aptree/modules/render.py
"""
render.py - turns a DependencyGraph into text.

The tree view prints one line per node in depth-first pre-order:

  A
  └── B
      └── D
  └── C
      └── D

A package reached through two siblings (D above) is printed under each of
them. Only a package that shows up again among its own ancestors is a
cycle; it is printed once more and cut off with CYCLE_MARKER beneath it.
"""

from __future__ import annotations
import json
from typing import Iterator, List, Optional

import yaml

from aptree.modules import logger as _logger
from aptree.modules.graph import DependencyGraph, DependencyGraphBuilder
from aptree.modules.repository import Repository

CYCLE_MARKER = "(cyclic dependency)"
CONNECTOR = "└── "
INDENT = "    "

DUMP_FORMATS = ("yaml", "json")

_ENTER = 0
_EXIT = 1


class RenderError(Exception):
    pass


def indent_prefix(depth: int) -> str:
    if depth <= 0:
        return ""
    return INDENT * (depth - 1) + CONNECTOR


class TreeRenderer:
    def __init__(self, logger: Optional[_logger.Logger] = None):
        self.log = logger or _logger.get_logger("render")

    def render(self, root: str, graph: DependencyGraph) -> Iterator[str]:
        """Yield the tree lines for `root`. Iterative; the ancestor path is a push/pop stack."""
        ancestors = set()
        stack = [(_ENTER, root, 0)]

        while stack:
            action, name, depth = stack.pop()
            if action == _EXIT:
                ancestors.discard(name)
                continue

            yield indent_prefix(depth) + name

            if name in ancestors:
                self.log.debug(f"Cycle: {name} is its own ancestor")
                yield indent_prefix(depth + 1) + CYCLE_MARKER
                continue

            ancestors.add(name)
            stack.append((_EXIT, name, depth))
            for dep in reversed(graph.get(name, [])):
                stack.append((_ENTER, dep, depth + 1))


def render_tree(root: str, graph: DependencyGraph) -> List[str]:
    return list(TreeRenderer().render(root, graph))


def visualize(root: str, text: str, filter_substring: str = "") -> List[str]:
    """Control-file text in, tree lines out: parse, index, walk, render."""
    repository = Repository.from_text(text)
    graph = DependencyGraphBuilder().build(root, repository, filter_substring)
    return render_tree(root, graph)


def dump_graph(graph: DependencyGraph, fmt: str = "yaml") -> str:
    """Serialize the adjacency mapping, keeping traversal order."""
    data = graph.to_dict()
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False)
    raise RenderError(f"Unknown dump format: {fmt}")
