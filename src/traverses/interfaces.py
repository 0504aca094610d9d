"""
Visitor protocol shared by the depth first traversals.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, List


@dataclass(init=True)
class TraverseVisitorResult:
    do_return: bool = False  # finish current node now, with what_return as its result
    what_return: Any = None  # result of the node (on_exit) or of the early exit
    do_skip: bool = False  # on_traveling_edge, on_discover: don't descend into this child
    stop_discovering_edges: bool = False  # don't look at remaining edges of current node
    do_overwrite_result: bool = False  # on_exit after an early exit: replace suggested result by what_return


class GraphInterface:
    """
    Anything that can hand out outgoing edges of a node and tell where an edge leads.
    """

    def edge_destination(self, edge):
        raise NotImplementedError

    def get_outgoing_edges(self, node) -> List:
        raise NotImplementedError


class TreeTraverseVisitor:
    """
    Default visitor: explores everything and produces None for every node.
    Subclasses override only the hooks they care about.
    """

    def on_enter(self, graph: GraphInterface,
                 entered_node) -> TraverseVisitorResult:
        return TraverseVisitorResult()

    def on_traveling_edge(self, graph: GraphInterface,
                          frm, edge) -> TraverseVisitorResult:
        return TraverseVisitorResult()

    def on_discover(self, graph: GraphInterface,
                    frm, discovered) -> TraverseVisitorResult:
        return TraverseVisitorResult()

    def on_got_result(self, graph: GraphInterface,
                      receiver_node, sender_node, result, siblings_results) -> TraverseVisitorResult:
        return TraverseVisitorResult()

    def on_exit(self, graph: GraphInterface,
                node_left, all_children_results, stage, suggested_result) -> TraverseVisitorResult:
        return TraverseVisitorResult()


class ExitStage(Enum):
    """Hook of DFS, from which the node was left"""
    ENTRANCE = auto()
    TRAVELING_EDGE = auto()
    NODE_DISCOVERED = auto()
    GOT_RESULT = auto()
    EXIT = auto()
