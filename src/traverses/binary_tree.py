"""
Binary tree and its three recursive traversals.

Every traversal takes an optional root. An absent root gives None ("nothing to
traverse"), a present one gives the list of all payloads of its subtree.
"""
from typing import Generic, List, Optional, TypeVar

T = TypeVar('T')


class TreeStructureError(ValueError):
    pass


class Node(Generic[T]):
    def __init__(self, data: T):
        self.data: T = data
        self.left: Optional['Node[T]'] = None
        self.right: Optional['Node[T]'] = None
        self._attached = False

    def set_left(self, node: 'Node[T]'):
        self._adopt(node, self.left)
        self.left = node

    def set_right(self, node: 'Node[T]'):
        self._adopt(node, self.right)
        self.right = node

    def _adopt(self, node: 'Node[T]', replaced: Optional['Node[T]']):
        if node is replaced:
            return
        if node._attached:
            raise TreeStructureError(f"Node {node.data!r} already has a parent")
        if _subtree_contains(node, self):
            raise TreeStructureError(f"Attaching {node.data!r} to {self.data!r} would make a cycle")
        if replaced is not None:
            replaced._attached = False
        node._attached = True

    def __repr__(self):
        return f"Node({self.data!r}, left={self.left!r}, right={self.right!r})"


def _subtree_contains(root: Optional[Node], target: Node) -> bool:
    if root is None:
        return False
    return root is target or _subtree_contains(root.left, target) or _subtree_contains(root.right, target)


def inorder(node: Optional[Node[T]]) -> Optional[List[T]]:
    """left subtree, node, right subtree"""
    if node is None:
        return None
    res: List[T] = []
    res.extend(inorder(node.left) or [])
    res.append(node.data)
    res.extend(inorder(node.right) or [])
    return res


def preorder(node: Optional[Node[T]]) -> Optional[List[T]]:
    """node, left subtree, right subtree"""
    if node is None:
        return None
    res: List[T] = [node.data]
    res.extend(preorder(node.left) or [])
    res.extend(preorder(node.right) or [])
    return res


def postorder(node: Optional[Node[T]]) -> Optional[List[T]]:
    """left subtree, right subtree, node"""
    if node is None:
        return None
    res: List[T] = []
    res.extend(postorder(node.left) or [])
    res.extend(postorder(node.right) or [])
    res.append(node.data)
    return res
