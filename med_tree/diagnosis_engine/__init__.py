"""
MedTree — Движок діагностики (Diagnosis Engine)

Компоненти:
- TraversalEngine: обхід дерева та навчання на помилках
- Cursor, SessionState: незмінний стан сесії між викликами
- DiagnosisSession: обгортка для драйверів з історією відповідей

Приклад використання:
    from med_tree.diagnosis_engine import TraversalEngine, SessionState
    from med_tree.schemas import Answer

    engine = TraversalEngine(tree_path="data/diagnosis_tree.txt")
    cursor = engine.start(root)

    while cursor.state is SessionState.ASKING:
        answer = input(f"{cursor.node.text} (yes/no) ")
        cursor = engine.advance(cursor, Answer.parse(answer) or Answer.NO)

    cursor = engine.confirm(cursor, is_correct=False)
    result = engine.learn(cursor, "Cold", "Do you have a fever?", Answer.NO)
    print(result.saved, result.save_error)
"""

from .cursor import Cursor, SessionState
from .engine import TraversalEngine, LearnResult
from .session import DiagnosisSession, SessionStatus, QuestionAnswer


__all__ = [
    # Engine
    "TraversalEngine",
    "LearnResult",

    # Cursor
    "Cursor",
    "SessionState",

    # Session
    "DiagnosisSession",
    "SessionStatus",
    "QuestionAnswer",
]
