# aptree/modules/graph.py

from __future__ import annotations
from collections import deque
from typing import Dict, Iterator, List, Optional, Tuple

from aptree.modules import logger as _logger
from aptree.modules.repository import Repository

NOT_FOUND = "(package not found)"


class DependencyGraph:
    """
    Represents the dependency graph reachable from a root package.
    Each expanded package appears once, mapped to the names it depends on.
    """

    def __init__(self):
        self.graph: Dict[str, List[str]] = {}  # {package: [dependencies]}

    def add_package(self, package: str, dependencies):
        """Adds a package and its dependencies to the graph"""
        self.graph[package] = list(dependencies)

    def get(self, package: str, default=None) -> Optional[List[str]]:
        return self.graph.get(package, default)

    def items(self) -> Iterator[Tuple[str, List[str]]]:
        return iter(self.graph.items())

    def to_dict(self) -> Dict[str, List[str]]:
        return {name: list(deps) for name, deps in self.graph.items()}

    def __contains__(self, package) -> bool:
        return package in self.graph

    def __len__(self) -> int:
        return len(self.graph)

    def __iter__(self) -> Iterator[str]:
        return iter(self.graph)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DependencyGraph):
            return NotImplemented
        return list(self.graph.items()) == list(other.graph.items())

    def __repr__(self) -> str:
        return f"DependencyGraph({self.graph!r})"


class DependencyGraphBuilder:
    """
    Breadth-first walk of a Repository starting at a root package.

    `filter_substring` prunes the walk: a name containing it is never
    expanded, but it still shows up in its parent's dependency list.
    """

    def __init__(self, logger: Optional[_logger.Logger] = None):
        self.log = logger or _logger.get_logger("graph")

    @staticmethod
    def _filtered(name: str, filter_substring: str) -> bool:
        return bool(filter_substring) and filter_substring in name

    def build(self, root: str, repository: Repository, filter_substring: str = "") -> DependencyGraph:
        graph = DependencyGraph()
        queue = deque([root])
        visited = {root}

        while queue:
            current = queue.popleft()
            if self._filtered(current, filter_substring):
                self.log.debug(f"Skipping {current}: matches filter '{filter_substring}'")
                continue

            record = repository.get(current)
            if record is None:
                self.log.debug(f"{current} not in repository")
                graph.add_package(current, [NOT_FOUND])
                continue

            graph.add_package(current, record.dependencies)
            for dep in record.dependencies:
                if self._filtered(dep, filter_substring):
                    continue
                if dep not in visited:
                    visited.add(dep)
                    queue.append(dep)

        self.log.debug(f"Graph for {root}: {len(graph)} packages expanded")
        return graph


def build_graph(root: str, repository: Repository, filter_substring: str = "") -> DependencyGraph:
    return DependencyGraphBuilder().build(root, repository, filter_substring)
