"""
MedTree — Движок обходу дерева

TraversalEngine не зберігає стан між викликами: кожна операція
приймає Cursor і повертає новий. Дерево мутує лише learn().

Машина станів:
    ASKING --advance--> ASKING | CONFIRMING
    CONFIRMING --confirm(True)--> DONE
    CONFIRMING --confirm(False)--> LEARNING
    LEARNING --learn--> DONE
    * --reset--> ASKING | CONFIRMING
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from med_tree.errors import (
    EmptyInputError,
    InvalidInputError,
    InvalidTransition,
    TreeStorageError,
)
from med_tree.schemas import Answer, TeachingInput
from med_tree.tree import TreeNode, save_tree

from .cursor import Cursor, SessionState


AnswerLike = Union[Answer, bool, str]


@dataclass
class LearnResult:
    """Результат навчання"""
    cursor: Cursor
    branch: TreeNode                    # новий вузол-питання (корінь піддерева)
    saved: bool = False
    save_error: Optional[str] = None

    @property
    def root(self) -> TreeNode:
        return self.cursor.root


def _require(cursor: Cursor, operation: str, state: SessionState) -> None:
    if cursor.state is not state:
        raise InvalidTransition(operation, state, cursor.state)


class TraversalEngine:
    """
    Движок діагностики по бінарному дереву.

    Приклад використання:
        engine = TraversalEngine(tree_path="data/diagnosis_tree.txt")
        cursor = engine.start(root)

        while cursor.state is SessionState.ASKING:
            cursor = engine.advance(cursor, ask(cursor.node.text))

        cursor = engine.confirm(cursor, is_correct=False)
        result = engine.learn(cursor, "Cold", "Do you have a fever?", Answer.NO)
        cursor = engine.reset(result.cursor)
    """

    def __init__(
        self,
        tree_path: Optional[Union[str, Path]] = None,
        encoding: str = "utf-8",
        atomic_save: bool = True,
    ):
        """
        Args:
            tree_path: Файл дерева (None — без збереження)
            encoding: Кодування файлу
            atomic_save: Запис через тимчасовий файл + os.replace
        """
        self.tree_path = Path(tree_path) if tree_path is not None else None
        self.encoding = encoding
        self.atomic_save = atomic_save

    @classmethod
    def from_config(cls, config) -> "TraversalEngine":
        """Створити з MedTreeConfig"""
        return cls(
            tree_path=config.storage.tree_path,
            encoding=config.storage.encoding,
            atomic_save=config.storage.atomic_save,
        )

    def start(self, root: TreeNode) -> Cursor:
        """Почати сесію з кореня"""
        return Cursor.at_root(root)

    def advance(self, cursor: Cursor, answer: AnswerLike) -> Cursor:
        """
        Перейти по гілці yes/no.

        Raises:
            InvalidTransition: поточний вузол не є питанням
            InvalidInputError: відповідь не є так/ні
        """
        _require(cursor, "advance", SessionState.ASKING)
        is_yes = Answer.coerce(answer).as_bool
        node = cursor.node
        child = node.yes_branch if is_yes else node.no_branch
        return Cursor(
            root=cursor.root,
            node=child,
            parent=node,
            came_from_yes=is_yes,
            state=SessionState.for_node(child),
        )

    def confirm(self, cursor: Cursor, is_correct: bool) -> Cursor:
        """
        Підтвердити або відхилити діагноз.

        Raises:
            InvalidTransition: поточний вузол не очікує підтвердження
        """
        _require(cursor, "confirm", SessionState.CONFIRMING)
        if is_correct:
            return cursor.with_state(SessionState.DONE)
        return cursor.with_state(SessionState.LEARNING)

    def learn(
        self,
        cursor: Cursor,
        correct_diagnosis: str,
        distinguishing_question: str,
        answer_for_correct: AnswerLike,
    ) -> LearnResult:
        """
        Замінити хибний діагноз новим питанням з двома листами
        і одразу зберегти дерево.

        Старий лист не перевикористовується: його текст копіюється
        в новий вузол.

        Raises:
            InvalidTransition: сесія не в стані LEARNING
            EmptyInputError: порожній діагноз або питання (дерево не змінено)
            InvalidInputError: багаторядковий текст або відповідь не так/ні
        """
        _require(cursor, "learn", SessionState.LEARNING)

        if not (correct_diagnosis or "").strip():
            raise EmptyInputError("correct_diagnosis")
        if not (distinguishing_question or "").strip():
            raise EmptyInputError("distinguishing_question")

        answer = Answer.coerce(answer_for_correct)
        try:
            teaching = TeachingInput(
                correct_diagnosis=correct_diagnosis,
                distinguishing_question=distinguishing_question,
                answer_for_correct=answer,
            )
        except ValidationError as e:
            error = e.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else "teaching_input"
            reason = error["msg"].replace("Value error, ", "", 1)
            raise InvalidInputError(field, reason) from e

        new_leaf = TreeNode(teaching.correct_diagnosis)
        old_leaf = TreeNode(cursor.node.text)
        branch = TreeNode(teaching.distinguishing_question)

        if teaching.answer_for_correct is Answer.YES:
            branch.yes_branch, branch.no_branch = new_leaf, old_leaf
        else:
            branch.yes_branch, branch.no_branch = old_leaf, new_leaf

        root = cursor.root
        parent = cursor.parent
        if parent is None:
            root = branch
        elif cursor.came_from_yes:
            parent.yes_branch = branch
        else:
            parent.no_branch = branch

        result = LearnResult(
            cursor=Cursor(
                root=root,
                node=branch,
                parent=parent,
                came_from_yes=cursor.came_from_yes,
                state=SessionState.DONE,
            ),
            branch=branch,
        )

        if self.tree_path is not None:
            try:
                self.save(root)
                result.saved = True
            except TreeStorageError as e:
                result.save_error = str(e)

        return result

    def reset(self, cursor: Cursor) -> Cursor:
        """Повернутися до кореня, дерево не змінюється"""
        return Cursor.at_root(cursor.root)

    def save(self, root: TreeNode) -> None:
        """
        Зберегти дерево у налаштований файл.

        Raises:
            TreeStorageError: шлях не задано або запис не вдався
        """
        if self.tree_path is None:
            raise TreeStorageError("no tree path configured")
        save_tree(root, self.tree_path, encoding=self.encoding, atomic=self.atomic_save)

    def __repr__(self) -> str:
        return f"TraversalEngine(tree_path={str(self.tree_path) if self.tree_path else None!r})"
