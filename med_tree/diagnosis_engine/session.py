"""
MedTree — Сесія діагностики

DiagnosisSession тримає курсор між викликами движка для драйверів
(термінал, Streamlit) і веде історію питань та відповідей.
Сам движок стану не зберігає.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional
import uuid

from med_tree.schemas import Answer
from med_tree.tree import TreeNode, load_or_seed

from .cursor import Cursor, SessionState
from .engine import AnswerLike, LearnResult, TraversalEngine


class SessionStatus(Enum):
    """Статус сесії"""
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass
class QuestionAnswer:
    """Запис питання-відповідь"""
    question: str
    answer: Answer
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class DiagnosisSession:
    """
    Сесія діагностики.

    Приклад:
        session = DiagnosisSession.from_config(get_default_config())

        while session.state is SessionState.ASKING:
            session.answer(Answer.YES)

        if not session.confirm(False):
            result = session.teach("Cold", "Do you have a fever?", Answer.NO)

        session.restart()
    """
    engine: TraversalEngine
    cursor: Cursor

    session_id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])
    question_history: List[QuestionAnswer] = field(default_factory=list)
    status: SessionStatus = SessionStatus.ACTIVE

    # Лічильники
    rounds: int = 1
    learned_count: int = 0
    last_save_error: Optional[str] = None

    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def start(cls, engine: TraversalEngine, root: TreeNode) -> "DiagnosisSession":
        return cls(engine=engine, cursor=engine.start(root))

    @classmethod
    def from_config(cls, config) -> "DiagnosisSession":
        """
        Завантажити дерево за конфігурацією і почати сесію.

        Raises:
            TreeStorageError: файл не читається
            CorruptTreeFormat: файл пошкоджено
        """
        storage = config.storage
        root = load_or_seed(
            storage.tree_path,
            seed_diagnosis=storage.seed_diagnosis if storage.create_if_missing else None,
            encoding=storage.encoding,
        )
        return cls.start(TraversalEngine.from_config(config), root)

    # ------------------------------------------------------------------
    # Стан
    # ------------------------------------------------------------------

    @property
    def root(self) -> TreeNode:
        return self.cursor.root

    @property
    def state(self) -> SessionState:
        return self.cursor.state

    @property
    def current_text(self) -> str:
        """Поточне питання або діагноз"""
        return self.cursor.node.text

    @property
    def is_active(self) -> bool:
        return self.status == SessionStatus.ACTIVE

    @property
    def n_questions_asked(self) -> int:
        return len(self.question_history)

    # ------------------------------------------------------------------
    # Операції
    # ------------------------------------------------------------------

    def answer(self, answer: AnswerLike) -> Cursor:
        """Відповісти на поточне питання"""
        question = self.cursor.node.text
        answer = Answer.coerce(answer)
        self.cursor = self.engine.advance(self.cursor, answer)
        self.question_history.append(QuestionAnswer(question=question, answer=answer))
        self._touch()
        return self.cursor

    def confirm(self, is_correct: bool) -> bool:
        """
        Підтвердити діагноз.

        Returns:
            True якщо сесію завершено (діагноз правильний)
        """
        self.cursor = self.engine.confirm(self.cursor, is_correct)
        if self.cursor.is_done:
            self.status = SessionStatus.COMPLETED
        self._touch()
        return self.cursor.is_done

    def teach(
        self,
        correct_diagnosis: str,
        distinguishing_question: str,
        answer_for_correct: AnswerLike,
    ) -> LearnResult:
        """
        Навчити дерево новому діагнозу.

        Помилка збереження не перериває сесію: її текст
        доступний у result.save_error та last_save_error.
        """
        result = self.engine.learn(
            self.cursor, correct_diagnosis, distinguishing_question, answer_for_correct
        )
        self.cursor = result.cursor
        self.learned_count += 1
        self.last_save_error = result.save_error
        self.status = SessionStatus.COMPLETED
        self._touch()
        return result

    def not_sure(self) -> None:
        """Користувач не знає відповіді — раунд скасовано"""
        self.status = SessionStatus.CANCELLED
        self._touch()

    def restart(self) -> Cursor:
        """Почати новий раунд з кореня (дерево зберігається)"""
        self.cursor = self.engine.reset(self.cursor)
        self.question_history = []
        self.status = SessionStatus.ACTIVE
        self.rounds += 1
        self._touch()
        return self.cursor

    def _touch(self) -> None:
        self.updated_at = datetime.now()

    def summary(self) -> Dict[str, Any]:
        """Отримати підсумок сесії"""
        return {
            "session_id": self.session_id,
            "status": self.status.value,
            "state": self.state.value,
            "rounds": self.rounds,
            "questions_asked": self.n_questions_asked,
            "current": self.current_text,
            "learned": self.learned_count,
            "last_save_error": self.last_save_error,
            "history": [
                {"question": qa.question, "answer": qa.answer.value}
                for qa in self.question_history
            ],
        }

    def __repr__(self) -> str:
        return (
            f"DiagnosisSession("
            f"id={self.session_id}, "
            f"state={self.state.value}, "
            f"round={self.rounds}, "
            f"questions={self.n_questions_asked}, "
            f"learned={self.learned_count}"
            f")"
        )
