"""
MedTree — Вузол дерева діагностики

TreeNode — питання (внутрішній вузол) або діагноз (лист).
Роль визначається структурно: лист не має гілок,
питання має обидві. Рівно одна гілка — недопустимий стан.
"""

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """
    Вузол бінарного дерева рішень.

    Порівняння за замовчуванням — за ідентичністю (eq=False),
    структурне порівняння — через structurally_equal().

    Приклад:
        root = TreeNode.question(
            "Fever?",
            yes=TreeNode.leaf("Flu"),
            no=TreeNode.leaf("Cold"),
        )
        root.is_leaf            # False
        root.yes_branch.text    # "Flu"
    """
    text: str
    yes_branch: Optional["TreeNode"] = None
    no_branch: Optional["TreeNode"] = None

    @classmethod
    def leaf(cls, text: str) -> "TreeNode":
        """Створити лист (діагноз)"""
        return cls(text)

    @classmethod
    def question(cls, text: str, yes: "TreeNode", no: "TreeNode") -> "TreeNode":
        """Створити вузол-питання з обома гілками"""
        return cls(text, yes_branch=yes, no_branch=no)

    @property
    def is_leaf(self) -> bool:
        """Чи вузол є діагнозом"""
        return self.yes_branch is None and self.no_branch is None

    def is_valid(self) -> bool:
        """Перевірити правило «обидві або жодної» для всього піддерева"""
        for node in self.iter_preorder():
            if (node.yes_branch is None) != (node.no_branch is None):
                return False
        return True

    def iter_preorder(self) -> Iterator["TreeNode"]:
        """Обхід у прямому порядку: вузол, yes-піддерево, no-піддерево"""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.no_branch is not None:
                stack.append(node.no_branch)
            if node.yes_branch is not None:
                stack.append(node.yes_branch)

    def count_nodes(self) -> int:
        return sum(1 for _ in self.iter_preorder())

    def depth(self) -> int:
        """Кількість рівнів (лист = 1)"""
        children = [c for c in (self.yes_branch, self.no_branch) if c is not None]
        if not children:
            return 1
        return 1 + max(c.depth() for c in children)

    def structurally_equal(self, other: Optional["TreeNode"]) -> bool:
        """Та сама форма і той самий текст у кожній позиції"""
        if other is None:
            return False
        pairs = [(self, other)]
        while pairs:
            a, b = pairs.pop()
            if a.text != b.text or a.is_leaf != b.is_leaf:
                return False
            for x, y in ((a.yes_branch, b.yes_branch), (a.no_branch, b.no_branch)):
                if (x is None) != (y is None):
                    return False
                if x is not None:
                    pairs.append((x, y))
        return True

    def __repr__(self) -> str:
        kind = "A" if self.is_leaf else "Q"
        return f"TreeNode({kind}:{self.text!r})"
