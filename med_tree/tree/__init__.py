"""
MedTree — Модуль дерева (tree)

Компоненти:
- node.py: TreeNode — питання або діагноз
- codec.py: serialize/deserialize, load_tree/save_tree

Приклад використання:
    from med_tree.tree import TreeNode, serialize, deserialize

    root = TreeNode.question("Fever?", TreeNode.leaf("Flu"), TreeNode.leaf("Cold"))
    lines = serialize(root)   # ["Q:Fever?", "A:Flu", "A:Cold"]
    same = deserialize(lines)
"""

from .node import TreeNode
from .codec import (
    QUESTION_PREFIX,
    ANSWER_PREFIX,
    serialize,
    deserialize,
    load_tree,
    save_tree,
    load_or_seed,
)


__all__ = [
    "TreeNode",
    "QUESTION_PREFIX",
    "ANSWER_PREFIX",
    "serialize",
    "deserialize",
    "load_tree",
    "save_tree",
    "load_or_seed",
]
