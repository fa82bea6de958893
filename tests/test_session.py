"""
Тести для DiagnosisSession

Запуск: pytest tests/test_session.py -v
"""

import pytest


def _config(tmp_path, content=None):
    from med_tree.config import MedTreeConfig

    path = tmp_path / "diagnosis_tree.txt"
    if content is not None:
        path.write_text(content, encoding="utf-8")

    config = MedTreeConfig()
    config.storage.tree_path = str(path)
    return config


def test_session_seeds_missing_tree(tmp_path):
    """Тест створення дерева при відсутньому файлі"""
    from med_tree.diagnosis_engine import DiagnosisSession, SessionState, SessionStatus

    config = _config(tmp_path)
    session = DiagnosisSession.from_config(config)

    assert session.status == SessionStatus.ACTIVE
    assert session.state is SessionState.CONFIRMING
    assert session.current_text == "Common cold"
    assert (tmp_path / "diagnosis_tree.txt").exists()

    print(f"✓ Session created: {session}")


def test_session_missing_tree_without_seed(tmp_path):
    """Без create_if_missing відсутній файл — помилка"""
    from med_tree.diagnosis_engine import DiagnosisSession
    from med_tree.errors import TreeStorageError

    config = _config(tmp_path)
    config.storage.create_if_missing = False

    with pytest.raises(TreeStorageError):
        DiagnosisSession.from_config(config)


def test_session_corrupt_tree(tmp_path):
    """Пошкоджений файл — сесія не стартує"""
    from med_tree.diagnosis_engine import DiagnosisSession
    from med_tree.errors import CorruptTreeFormat

    config = _config(tmp_path, "Q:Fever?\nX:bad\nA:Cold\n")

    with pytest.raises(CorruptTreeFormat):
        DiagnosisSession.from_config(config)

    print("✓ Corrupt tree rejected")


def test_session_full_cycle(tmp_path):
    """Тест повного циклу: питання → відхилення → навчання → новий раунд"""
    from med_tree.diagnosis_engine import DiagnosisSession, SessionState, SessionStatus
    from med_tree.schemas import Answer
    from med_tree.tree import load_tree

    config = _config(tmp_path, "Q:Fever?\nA:Flu\nA:Cold\n")
    session = DiagnosisSession.from_config(config)

    session.answer(Answer.NO)
    assert session.state is SessionState.CONFIRMING
    assert session.current_text == "Cold"
    assert session.n_questions_asked == 1
    assert session.question_history[0].question == "Fever?"
    assert session.question_history[0].answer is Answer.NO

    assert session.confirm(False) is False
    assert session.state is SessionState.LEARNING

    result = session.teach("Allergies", "Itchy eyes?", Answer.YES)
    assert result.saved
    assert session.learned_count == 1
    assert session.last_save_error is None
    assert session.status == SessionStatus.COMPLETED

    saved = load_tree(config.storage.tree_path)
    assert saved.structurally_equal(session.root)

    session.restart()
    assert session.rounds == 2
    assert session.n_questions_asked == 0
    assert session.status == SessionStatus.ACTIVE
    assert session.current_text == "Fever?"

    session.answer(False)
    assert session.current_text == "Itchy eyes?"
    session.answer(True)
    assert session.current_text == "Allergies"
    assert session.confirm(True) is True
    assert session.status == SessionStatus.COMPLETED

    print(f"✓ Full cycle: {session.summary()}")


def test_session_teach_on_root_leaf(tmp_path):
    """Навчання на дереві з одного листа змінює корінь сесії"""
    from med_tree.diagnosis_engine import DiagnosisSession
    from med_tree.schemas import Answer

    session = DiagnosisSession.from_config(_config(tmp_path, "A:Flu\n"))
    old_root = session.root

    session.confirm(False)
    result = session.teach("Cold", "Do you have a fever?", Answer.NO)

    assert session.root is result.branch
    assert session.root is not old_root

    session.restart()
    assert session.current_text == "Do you have a fever?"


def test_session_not_sure(tmp_path):
    """Тест «не впевнений»"""
    from med_tree.diagnosis_engine import DiagnosisSession, SessionStatus

    session = DiagnosisSession.from_config(_config(tmp_path, "Q:Fever?\nA:Flu\nA:Cold\n"))

    session.not_sure()
    assert session.status == SessionStatus.CANCELLED
    assert not session.is_active

    session.restart()
    assert session.is_active


def test_session_summary(tmp_path):
    """Тест підсумку сесії"""
    from med_tree.diagnosis_engine import DiagnosisSession

    session = DiagnosisSession.from_config(_config(tmp_path, "Q:Fever?\nA:Flu\nA:Cold\n"))
    session.answer(True)
    summary = session.summary()

    assert summary["state"] == "confirming"
    assert summary["current"] == "Flu"
    assert summary["questions_asked"] == 1
    assert summary["history"] == [{"question": "Fever?", "answer": "yes"}]
    assert summary["rounds"] == 1

    print(f"✓ Summary: {summary}")


def test_session_text_answer_history(tmp_path):
    """Текстова відповідь записується в історію як є"""
    from med_tree.diagnosis_engine import DiagnosisSession
    from med_tree.errors import InvalidInputError
    from med_tree.schemas import Answer

    session = DiagnosisSession.from_config(_config(tmp_path, "Q:Fever?\nA:Flu\nA:Cold\n"))

    with pytest.raises(InvalidInputError):
        session.answer("maybe")
    assert session.n_questions_asked == 0

    session.answer("no")
    assert session.current_text == "Cold"
    assert session.question_history[0].answer is Answer.NO
