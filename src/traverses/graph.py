"""
Directed graph over vertices 0..v-1, stored as adjacency lists.
"""
from typing import List, Tuple

from traverses.algorithms import dfs
from traverses.interfaces import GraphInterface, TreeTraverseVisitor, TraverseVisitorResult

Edge = Tuple[int, int]


class VertexOutOfRangeError(IndexError):
    def __init__(self, vertex, n_vertices: int):
        super().__init__(f"Vertex {vertex!r} is out of range [0, {n_vertices})")
        self.vertex = vertex
        self.n_vertices = n_vertices


class Graph(GraphInterface):
    """
    visited is shared by all dfs calls on the same instance and is never reset:
    a second dfs only walks vertices that the previous ones didn't reach.
    """

    def __init__(self, v: int):
        if not isinstance(v, int) or isinstance(v, bool) or v < 0:
            raise ValueError(f"Number of vertices must be a non-negative int, got {v!r}")
        self.visited: List[bool] = [False] * v
        self.adj_lists: List[List[int]] = [[] for _ in range(v)]

    def size(self) -> int:
        return len(self.adj_lists)

    def _check_vertex(self, vertex):
        # negative ids would silently wrap around in list indexing
        if not isinstance(vertex, int) or isinstance(vertex, bool) or not 0 <= vertex < self.size():
            raise VertexOutOfRangeError(vertex, self.size())

    def add_edge(self, src: int, dest: int):
        self._check_vertex(src)
        self._check_vertex(dest)
        self.adj_lists[src].append(dest)

    def get_outgoing_edges(self, node) -> List[Edge]:
        return [(node, dest) for dest in self.adj_lists[node]]

    def edge_destination(self, edge: Edge) -> int:
        frm, to = edge
        return to

    def dfs(self, vertex: int) -> List[int]:
        self._check_vertex(vertex)
        return dfs(vertex, self, _VisitedMarkingVisitor(self.visited))


class _VisitedMarkingVisitor(TreeTraverseVisitor):
    """
    Marks entered vertices, skips already marked ones, and collects visitation order.
    """

    def __init__(self, visited: List[bool]):
        self._visited = visited

    def on_enter(self, graph: GraphInterface, entered_node) -> TraverseVisitorResult:
        self._visited[entered_node] = True
        return TraverseVisitorResult()

    def on_discover(self, graph: GraphInterface, frm, discovered) -> TraverseVisitorResult:
        return TraverseVisitorResult(do_skip=self._visited[discovered])

    def on_exit(self, graph: GraphInterface, node_left, all_children_results, stage,
                suggested_result) -> TraverseVisitorResult:
        order = [node_left]
        for child_order in all_children_results:
            order.extend(child_order)
        return TraverseVisitorResult(what_return=order)
