"""
MedTree — Модуль схем даних (schemas)

Pydantic моделі для валідації введення користувача.

Приклад використання:
    from med_tree.schemas import Answer, TeachingInput

    Answer.parse("Так")      # Answer.YES
    Answer.parse("maybe")    # None
"""

from .teaching import (
    Answer,
    TeachingInput,
    TreeStats,
    tree_stats,
)


__all__ = [
    "Answer",
    "TeachingInput",
    "TreeStats",
    "tree_stats",
]
