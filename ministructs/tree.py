"""A general tree whose nodes hold strings, with several traversals."""

from __future__ import annotations

from collections import deque


class TreeNode:
    """A tree node holding ``data`` and an ordered list of children."""

    def __init__(self, data: str) -> None:
        self.data = data
        self.children: list[TreeNode] = []

    def add_child(self, child: TreeNode) -> None:
        """Append ``child`` as the last child of this node."""
        self.children.append(child)

    def pre_order_recursive(self) -> list[str]:
        """Return node data in pre-order, computed recursively."""
        result = [self.data]
        for child in self.children:
            result.extend(child.pre_order_recursive())
        return result

    def pre_order_iterative(self) -> list[str]:
        """Return node data in pre-order, computed with an explicit stack."""
        result: list[str] = []
        stack = [self]
        while stack:
            node = stack.pop()
            result.append(node.data)
            stack.extend(reversed(node.children))
        return result

    def post_order_recursive(self) -> list[str]:
        """Return node data in post-order, computed recursively."""
        result: list[str] = []
        for child in self.children:
            result.extend(child.post_order_recursive())
        result.append(self.data)
        return result

    def post_order_iterative(self) -> list[str]:
        """Return node data in post-order, computed with two stacks."""
        pending = [self]
        visited: list[TreeNode] = []
        while pending:
            node = pending.pop()
            visited.append(node)
            pending.extend(node.children)
        return [node.data for node in reversed(visited)]

    def in_order_iterative(self) -> list[str]:
        """Return node data in in-order: each leaf is followed by its nearest pending parent."""
        pending = [self]
        parents: list[TreeNode] = []
        order: list[TreeNode] = []
        while pending:
            node = pending.pop()
            if node.children:
                parents.append(node)
                pending.extend(reversed(node.children))
            else:
                order.append(node)
                if parents:
                    order.append(parents.pop())
        order.extend(reversed(parents))
        return [node.data for node in order]

    def level_order(self) -> list[str]:
        """Return node data breadth first."""
        result: list[str] = []
        queue = deque([self])
        while queue:
            node = queue.popleft()
            result.append(node.data)
            queue.extend(node.children)
        return result