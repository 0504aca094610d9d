"""
Generic depth first traversal, driven by a visitor.
"""

from typing import Any, List

from traverses.interfaces import GraphInterface, TreeTraverseVisitor, ExitStage


def dfs(initial_node,
        graph: GraphInterface,
        visitor: TreeTraverseVisitor,
        ):
    """
    Recursive depth first search starting at initial_node.

    Edges are explored in the order get_outgoing_edges returns them. The algorithm
    doesn't remember visited nodes: on a graph with cycles the visitor has to skip
    already seen nodes in on_discover, otherwise recursion never stops.

    Returns the result of initial_node, as decided by visitor.on_exit.
    """
    all_children_results: List[Any] = []

    def at_exit(stage: ExitStage, suggested_result):
        vis_res = visitor.on_exit(graph=graph, node_left=initial_node,
                                  all_children_results=all_children_results,
                                  stage=stage, suggested_result=suggested_result)
        return vis_res.what_return if vis_res.do_overwrite_result or stage == ExitStage.EXIT else suggested_result

    vis_res = visitor.on_enter(graph=graph, entered_node=initial_node)
    if vis_res.do_return:
        return at_exit(ExitStage.ENTRANCE, vis_res.what_return)
    for edge in graph.get_outgoing_edges(initial_node):
        vis_res = visitor.on_traveling_edge(graph=graph, frm=initial_node, edge=edge)
        if vis_res.do_return:
            return at_exit(ExitStage.TRAVELING_EDGE, vis_res.what_return)
        if vis_res.stop_discovering_edges:
            break
        if vis_res.do_skip:
            continue

        child_node = graph.edge_destination(edge)
        vis_res = visitor.on_discover(graph=graph, frm=initial_node, discovered=child_node)
        if vis_res.do_return:
            return at_exit(ExitStage.NODE_DISCOVERED, vis_res.what_return)
        if vis_res.stop_discovering_edges:
            break
        if vis_res.do_skip:
            continue

        result = dfs(child_node, graph, visitor)
        all_children_results.append(result)
        vis_res = visitor.on_got_result(graph=graph, receiver_node=initial_node, sender_node=child_node,
                                        result=result, siblings_results=all_children_results)
        if vis_res.do_return:
            return at_exit(ExitStage.GOT_RESULT, vis_res.what_return)
        if vis_res.stop_discovering_edges:
            break
    return at_exit(ExitStage.EXIT, None)
