"""
MedTree — Схеми відповідей та навчання

Pydantic моделі для:
- Answer: відповідь так/ні
- TeachingInput: дані для навчання дерева новому діагнозу
- TreeStats: статистика дерева
"""

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from med_tree.errors import InvalidInputError
from med_tree.tree import TreeNode


_YES_WORDS = {"yes", "y", "так", "т"}
_NO_WORDS = {"no", "n", "ні", "н"}


class Answer(str, Enum):
    """Відповідь на питання"""
    YES = "yes"
    NO = "no"

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional["Answer"]:
        """Розпізнати відповідь користувача (None якщо не так/ні)"""
        if text is None:
            return None
        word = text.strip().lower()
        if word in _YES_WORDS:
            return cls.YES
        if word in _NO_WORDS:
            return cls.NO
        return None

    @classmethod
    def from_bool(cls, value: bool) -> "Answer":
        return cls.YES if value else cls.NO

    @classmethod
    def coerce(cls, value: Union["Answer", bool, str]) -> "Answer":
        """
        Привести bool, Answer або текст так/ні до Answer.

        Raises:
            InvalidInputError: значення не є відповіддю так/ні
        """
        if isinstance(value, Answer):
            return value
        if isinstance(value, bool):
            return cls.from_bool(value)
        if isinstance(value, str):
            answer = cls.parse(value)
            if answer is not None:
                return answer
        raise InvalidInputError("answer", f"must be yes or no, got {value!r}")

    @property
    def as_bool(self) -> bool:
        return self is Answer.YES


class TeachingInput(BaseModel):
    """
    Дані для навчання: правильний діагноз та розрізняюче питання.

    Приклад:
        teaching = TeachingInput(
            correct_diagnosis="Cold",
            distinguishing_question="Do you have a fever?",
            answer_for_correct=Answer.NO,
        )
    """
    correct_diagnosis: str = Field(..., description="Правильний діагноз")
    distinguishing_question: str = Field(
        ...,
        description="Питання так/ні, що відрізняє новий діагноз від старого"
    )
    answer_for_correct: Answer = Field(
        ...,
        description="Відповідь на питання для правильного діагнозу"
    )

    @field_validator("correct_diagnosis", "distinguishing_question")
    @classmethod
    def strip_and_require(cls, v: str) -> str:
        """Прибрати пробіли, порожній рядок — помилка"""
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        if "\n" in v or "\r" in v:
            raise ValueError("must be a single line")
        return v


class TreeStats(BaseModel):
    """Статистика дерева діагностики"""
    n_questions: int = Field(..., ge=0, description="Кількість питань")
    n_diagnoses: int = Field(..., ge=1, description="Кількість діагнозів")
    depth: int = Field(..., ge=1, description="Глибина дерева")
    diagnoses: List[str] = Field(default_factory=list, description="Всі діагнози")


def tree_stats(root: TreeNode) -> TreeStats:
    """Підрахувати статистику дерева"""
    leaves = [n for n in root.iter_preorder() if n.is_leaf]
    return TreeStats(
        n_questions=root.count_nodes() - len(leaves),
        n_diagnoses=len(leaves),
        depth=root.depth(),
        diagnoses=[n.text for n in leaves],
    )
