"""
sentc v0.1 - AST Node Definitions
A sentence is a flat tree: one "Sentence" root with a leaf per accepted token.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ASTNode:
    """One accepted grammar element. Each node owns its children."""
    label: str = ""
    children: List["ASTNode"] = field(default_factory=list)

    def add_child(self, child: "ASTNode") -> "ASTNode":
        self.children.append(child)
        return child


def level_order(root: Optional[ASTNode]) -> List[List[str]]:
    """Labels grouped by depth, breadth-first, root level first."""
    if root is None:
        return []

    levels = []
    queue = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.label)
            queue.extend(node.children)
        levels.append(level)
    return levels
