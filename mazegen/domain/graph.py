"""Adjacency-list graph and connected-component grouping."""

from typing import Dict, Generic, Hashable, Iterator, List, Tuple, TypeVar

from .disjoint_set import DisjointSet
from .geometry import next_point
from .types import Cell, Direction, Maze, Point

T = TypeVar("T", bound=Hashable)


class AdjacencyList(Generic[T]):
    """Graph stored as a mapping from each vertex to its list of neighbors."""

    def __init__(self):
        self._nodes: Dict[T, List[T]] = {}

    def add_vertex(self, value: T) -> List[T]:
        """Add ``value`` as a vertex and return its edge list."""
        return self._nodes.setdefault(value, [])

    def remove_vertex(self, value: T) -> None:
        """Remove ``value``. No-op if it is not a vertex."""
        self._nodes.pop(value, None)

    def find_vertex(self, value: T) -> T:
        """Return the stored vertex equal to ``value``."""
        for vertex in self._nodes:
            if vertex == value:
                return vertex
        raise KeyError(f"No such vertex: {value!r}")

    def contains(self, value: T) -> bool:
        return value in self._nodes

    __contains__ = contains

    def edges_of(self, vertex: T) -> List[T]:
        """Mutable list of neighbors of ``vertex``."""
        return self._nodes[vertex]

    def __iter__(self) -> Iterator[Tuple[T, List[T]]]:
        """Iterate ``(vertex, edges)`` pairs in sorted vertex order."""
        for vertex in sorted(self._nodes):
            yield vertex, self._nodes[vertex]

    def __len__(self) -> int:
        return len(self._nodes)


def add_undirected_edge(graph: AdjacencyList[T], a: T, b: T) -> None:
    """Connect ``a`` and ``b`` both ways, adding missing vertices."""
    graph.add_vertex(a).append(b)
    graph.add_vertex(b).append(a)


def add_directed_edge(graph: AdjacencyList[T], source: T, target: T) -> None:
    """Connect ``source`` to ``target``, adding missing vertices."""
    graph.add_vertex(target)
    graph.add_vertex(source).append(target)


def connected_components(graph: AdjacencyList[T]) -> DisjointSet[T]:
    """Group the vertices of ``graph`` into connected components."""
    components: DisjointSet[T] = DisjointSet()
    for vertex, _ in graph:
        components.make_set(vertex)
    for vertex, edges in graph:
        for neighbor in edges:
            components.merge(vertex, neighbor)
    return components


def same_component(components: DisjointSet[T], x: T, y: T) -> bool:
    """Check if ``x`` and ``y`` are in the same component."""
    return components.same_set(x, y)


def passage_graph(maze: Maze) -> AdjacencyList[Point]:
    """Undirected graph of passage cells joined to their passage neighbors."""
    graph: AdjacencyList[Point] = AdjacencyList()
    for p in maze.passages():
        graph.add_vertex(p)
        # East and south only, so every edge is added once
        for direction in (Direction.EAST, Direction.SOUTH):
            nxt = next_point(p, direction, maze.width, maze.height)
            if nxt is not None and maze.get(nxt) == Cell.PASSAGE:
                add_undirected_edge(graph, p, nxt)
    return graph
