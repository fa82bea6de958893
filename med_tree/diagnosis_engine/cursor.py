"""
MedTree — Курсор сесії

Cursor — незмінне значення, яке драйвер отримує від движка
і передає назад при наступному виклику. Містить корінь дерева,
поточний вузол, батька, напрям ребра та стан машини станів.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from med_tree.tree import TreeNode


class SessionState(Enum):
    """Стан машини станів обходу"""
    ASKING = "asking"           # поточний вузол — питання
    CONFIRMING = "confirming"   # поточний вузол — діагноз, чекаємо підтвердження
    LEARNING = "learning"       # діагноз відхилено, збираємо нове піддерево
    DONE = "done"               # сесію завершено

    @classmethod
    def for_node(cls, node: TreeNode) -> "SessionState":
        return cls.CONFIRMING if node.is_leaf else cls.ASKING


@dataclass(frozen=True)
class Cursor:
    """
    Позиція сесії в дереві.

    root змінюється лише після learn() на корені,
    parent=None означає, що node є коренем.
    """
    root: TreeNode
    node: TreeNode
    parent: Optional[TreeNode] = None
    came_from_yes: Optional[bool] = None
    state: SessionState = SessionState.ASKING

    @classmethod
    def at_root(cls, root: TreeNode) -> "Cursor":
        return cls(root=root, node=root, state=SessionState.for_node(root))

    def with_state(self, state: SessionState) -> "Cursor":
        return replace(self, state=state)

    @property
    def is_done(self) -> bool:
        return self.state is SessionState.DONE

    def __repr__(self) -> str:
        edge = {True: "yes", False: "no", None: "-"}[self.came_from_yes]
        return (
            f"Cursor(state={self.state.value}, node={self.node.text!r}, "
            f"parent={self.parent.text if self.parent else None!r}, edge={edge})"
        )
