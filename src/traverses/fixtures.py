"""
Small structures the traversals are demonstrated and tested on.
"""
from traverses.binary_tree import Node
from traverses.graph import Graph


def mk_fixture_tree() -> Node[int]:
    """
              1
          /       \\
         2         3
       /   \\      / \\
      4     5    6   7
     / \\   / \\
    8   9 10  11
    """
    root = Node(1)
    node_2 = Node(2)
    node_3 = Node(3)
    node_4 = Node(4)
    node_5 = Node(5)

    node_3.set_left(Node(6))
    node_3.set_right(Node(7))

    node_4.set_left(Node(8))
    node_4.set_right(Node(9))

    node_5.set_left(Node(10))
    node_5.set_right(Node(11))

    node_2.set_left(node_4)
    node_2.set_right(node_5)

    root.set_left(node_2)
    root.set_right(node_3)
    return root


FIXTURE_EDGES = [(0, 1), (0, 2), (0, 3), (1, 2), (2, 4)]


def mk_fixture_graph() -> Graph:
    graph = Graph(5)
    for src, dest in FIXTURE_EDGES:
        graph.add_edge(src, dest)
    return graph
