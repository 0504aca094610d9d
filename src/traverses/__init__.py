"""
Binary tree traversals and depth first search over adjacency-list graphs.
"""
from traverses.binary_tree import Node, TreeStructureError, inorder, preorder, postorder
from traverses.graph import Graph, VertexOutOfRangeError
from traverses.algorithms import dfs
from traverses.interfaces import TraverseVisitorResult, GraphInterface, \
    TreeTraverseVisitor, ExitStage
