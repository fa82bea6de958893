"""
MedTree — Web UI (Streamlit)

Графічний інтерфейс асистента: кнопки Так / Ні / Не впевнений,
підтвердження діагнозу та форма навчання.

Запуск:
    streamlit run med_tree/web_ui/app.py

    або:

    python scripts/run_web.py
"""

import streamlit as st
import sys
from pathlib import Path

# Додаємо корінь проекту
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from med_tree.config import get_default_config
from med_tree.diagnosis_engine import DiagnosisSession, SessionState, SessionStatus
from med_tree.errors import CorruptTreeFormat, InvalidInputError, TreeStorageError
from med_tree.schemas import Answer, tree_stats


def init_state():
    """Ініціалізація session state"""
    if "config" not in st.session_state:
        st.session_state.config = get_default_config()
    if "diagnosis" not in st.session_state:
        st.session_state.diagnosis = DiagnosisSession.from_config(st.session_state.config)
    if "log" not in st.session_state:
        st.session_state.log = []
    if "notice" not in st.session_state:
        st.session_state.notice = None


def restart():
    st.session_state.diagnosis.restart()
    st.session_state.log = []


def handle_answer(is_yes: bool):
    session = st.session_state.diagnosis
    question = session.current_text
    session.answer(Answer.from_bool(is_yes))
    st.session_state.log.append(f"{question} → {'Так' if is_yes else 'Ні'}")


def render_sidebar(session: DiagnosisSession):
    with st.sidebar:
        st.title("🏥 MedTree")
        st.caption("Асистент медичної діагностики")

        st.divider()

        st.markdown("### 📊 Дерево")
        stats = tree_stats(session.root)
        col1, col2 = st.columns(2)
        col1.metric("Питань", stats.n_questions)
        col2.metric("Діагнозів", stats.n_diagnoses)
        st.caption(f"Глибина: {stats.depth}")
        st.caption(f"Файл: {st.session_state.config.storage.tree_path}")

        st.divider()

        if st.button("🔄 Почати спочатку", use_container_width=True):
            restart()
            st.rerun()


def render_learning(session: DiagnosisSession):
    st.info("Допоможіть мені навчитися!")

    with st.form("learn_form"):
        correct = st.text_input("Який правильний діагноз?")
        question = st.text_input(
            f'Яке питання так/ні відрізняє "{session.current_text}" від правильного діагнозу?'
        )
        is_yes = st.radio(
            "Для правильного діагнозу відповідь на питання:",
            ["Так", "Ні"],
            horizontal=True,
        )
        submitted = st.form_submit_button("💾 Навчити", type="primary")

    if submitted:
        try:
            result = session.teach(correct, question, Answer.from_bool(is_yes == "Так"))
        except InvalidInputError as e:
            st.error(f"❌ Некоректне поле {e.field}: {e.reason}")
            return

        if result.saved:
            st.session_state.notice = ("success", "✅ Дякую! Я навчився на цьому випадку.")
        else:
            st.session_state.notice = ("warning", f"⚠️ Помилка збереження дерева: {result.save_error}")
        restart()
        st.rerun()


def main():
    st.set_page_config(
        page_title="MedTree — Медична діагностика",
        page_icon="🏥",
        layout="centered",
    )

    try:
        init_state()
    except (TreeStorageError, CorruptTreeFormat) as e:
        st.error(f"❌ Помилка завантаження дерева: {e}")
        st.stop()

    session = st.session_state.diagnosis
    render_sidebar(session)

    st.title("🏥 Асистент медичної діагностики")
    config = st.session_state.config
    if config.session.show_disclaimer:
        st.warning(config.session.disclaimer)

    if st.session_state.notice:
        level, message = st.session_state.notice
        getattr(st, level)(message)
        st.session_state.notice = None

    for entry in st.session_state.log:
        st.markdown(f"- {entry}")

    if session.status is SessionStatus.CANCELLED:
        st.info("Нічого страшного! Діагностика — складна справа. Зверніться до медичного фахівця.")
        if st.button("🔄 Спробувати ще раз", type="primary"):
            restart()
            st.rerun()
        return

    if session.state is SessionState.ASKING:
        st.subheader(session.current_text)
        col1, col2, col3 = st.columns(3)
        if col1.button("✅ Так", use_container_width=True):
            handle_answer(True)
            st.rerun()
        if col2.button("❌ Ні", use_container_width=True):
            handle_answer(False)
            st.rerun()
        if col3.button("🤷 Не впевнений", use_container_width=True):
            session.not_sure()
            st.rerun()

    elif session.state is SessionState.CONFIRMING:
        st.subheader(f"🩺 Діагноз: {session.current_text}")
        st.markdown("Це правильно?")
        col1, col2 = st.columns(2)
        if col1.button("✅ Так", use_container_width=True):
            session.confirm(True)
            st.rerun()
        if col2.button("❌ Ні", use_container_width=True):
            session.confirm(False)
            st.rerun()

    elif session.state is SessionState.LEARNING:
        st.subheader(f"🩺 Діагноз: {session.current_text}")
        render_learning(session)

    else:
        st.success("✅ Чудово! Бережіть здоров'я!")
        if st.button("🔄 Нова діагностика", type="primary"):
            restart()
            st.rerun()


if __name__ == "__main__":
    main()
