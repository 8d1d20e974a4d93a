"""
Include Graph Builder for cppscan

This module constructs a NetworkX-based dependency graph where nodes
represent classes and edges represent quoted (project) includes.

Design Decisions:
    - Uses NetworkX DiGraph for directed include relationships
    - Stores Dependence objects as node attributes
    - Library includes are node attributes, not nodes: they are leaves the
      build only links against
    - A project header without its own translation unit still becomes a
      node, with no Dependence attached

Academic Context:
    Input: Dependence records from the include extractor
    Transformation: Graph construction with attribute storage
    Output: NetworkX DiGraph with traversal utilities
    Limitation: Names are matched by base name, not by include path

Graph Properties:
    - Directed: edges point from the including class to the included one
    - May have cycles (mutually including translation units)
    - Node IDs are class names
"""

from typing import Iterable, Iterator, Optional
import networkx as nx

from engine.errors import IncludeCycleError
from engine.models import Dependence


class IncludeGraph:
    """
    A graph representation of a project's include relationships.

    Wraps a NetworkX DiGraph to provide a clean interface for:
    - Adding Dependence records
    - Querying direct and transitive project dependencies
    - Collecting the libraries a class needs at link time
    - Ordering classes so dependencies come first

    Usage:
        graph = build_include_graph(result.dependency_set())
        for name in graph.build_order():
            print(name, sorted(graph.get_libraries(name, transitive=True)))
    """

    def __init__(self) -> None:
        """Initialize an empty include graph."""
        self._graph: nx.DiGraph = nx.DiGraph()

    @property
    def graph(self) -> nx.DiGraph:
        """Access the underlying NetworkX graph."""
        return self._graph

    @property
    def node_count(self) -> int:
        """Return the number of classes in the graph."""
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        """Return the number of project include edges."""
        return self._graph.number_of_edges()

    def add_dependence(self, dependence: Dependence) -> None:
        """
        Add a class and its project include edges.

        If the class is already present with a Dependence attached, it is
        replaced, matching NetworkX's add_node semantics.

        Args:
            dependence: The Dependence record to add
        """
        name = dependence.class_name
        self._graph.add_node(
            name,
            dependence=dependence,
            libraries=dependence.library_dependencies,
        )
        for target in dependence.project_dependencies:
            if target == name:
                # A translation unit including its own header
                continue
            if target not in self._graph:
                self._graph.add_node(target, dependence=None, libraries=frozenset())
            self._graph.add_edge(name, target)

    def get_dependence(self, name: str) -> Optional[Dependence]:
        """Return the Dependence recorded for a class, if any."""
        if name not in self._graph:
            return None
        return self._graph.nodes[name].get("dependence")

    def get_project_dependencies(self, name: str, transitive: bool = False) -> set[str]:
        """
        Get the project classes a class includes.

        Args:
            name: Class name
            transitive: Follow includes of includes

        Returns:
            Set of class names (empty for unknown classes)
        """
        if name not in self._graph:
            return set()
        if transitive:
            return set(nx.descendants(self._graph, name))
        return set(self._graph.successors(name))

    def get_dependents(self, name: str) -> Iterator[str]:
        """
        Get the classes that include the given class directly.

        Yields:
            Names of including classes (predecessors)
        """
        if name in self._graph:
            yield from self._graph.predecessors(name)

    def get_libraries(self, name: str, transitive: bool = False) -> set[str]:
        """
        Get the libraries a class includes.

        With transitive=True the libraries of every transitive project
        dependency are added as well.
        """
        if name not in self._graph:
            return set()
        names = {name}
        if transitive:
            names |= self.get_project_dependencies(name, transitive=True)
        libraries: set[str] = set()
        for node in names:
            libraries |= self._graph.nodes[node].get("libraries", frozenset())
        return libraries

    def find_cycles(self) -> list[list[str]]:
        """Return every elementary include cycle, each as a list of class names."""
        return [list(cycle) for cycle in nx.simple_cycles(self._graph)]

    def build_order(self) -> list[str]:
        """
        Order classes so that each comes after everything it includes.

        Raises:
            IncludeCycleError: If the project includes are cyclic
        """
        try:
            order = list(nx.topological_sort(self._graph))
        except nx.NetworkXUnfeasible:
            cycles = self.find_cycles()
            shown = " -> ".join(cycles[0]) if cycles else "?"
            raise IncludeCycleError(f"include cycle detected: {shown}") from None
        order.reverse()
        return order

    def clear(self) -> None:
        """Remove all nodes and edges from the graph."""
        self._graph.clear()


def build_include_graph(dependencies: Iterable[Dependence]) -> IncludeGraph:
    """
    Build an IncludeGraph from Dependence records.

    Args:
        dependencies: Records as produced by the batch driver

    Returns:
        An IncludeGraph with one node per class

    Example:
        >>> graph = build_include_graph(result.dependencies.values())
        >>> graph.get_project_dependencies("Main", transitive=True)
        {'Foo', 'Bar'}
    """
    graph = IncludeGraph()
    for dependence in dependencies:
        graph.add_dependence(dependence)
    return graph
