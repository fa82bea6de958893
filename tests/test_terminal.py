"""
Тести для термінального драйвера

Запуск: pytest tests/test_terminal.py -v
"""

import io


FEVER_TREE = "Q:Fever?\nA:Flu\nA:Cold\n"


def _run(tmp_path, answers, content=FEVER_TREE):
    """Запустити драйвер зі сценарієм відповідей"""
    from med_tree.config import MedTreeConfig
    from med_tree.diagnosis_engine import DiagnosisSession
    from med_tree.drivers import run_terminal

    path = tmp_path / "diagnosis_tree.txt"
    path.write_text(content, encoding="utf-8")

    config = MedTreeConfig()
    config.storage.tree_path = str(path)

    session = DiagnosisSession.from_config(config)
    inputs = iter(answers)
    output = []

    run_terminal(
        session,
        config,
        input_fn=lambda prompt: next(inputs),
        output_fn=output.append,
    )
    return session, path, "\n".join(output)


def test_terminal_learning_flow(tmp_path):
    """Тест навчання через термінал"""
    from med_tree.tree import load_tree, serialize

    session, path, output = _run(tmp_path, [
        "maybe",          # не так/ні → повтор
        "no",             # Fever? → Cold
        "no",             # діагноз неправильний
        "",               # порожній діагноз → повтор
        "Allergies",
        "Itchy eyes?",
        "yes",            # для Allergies відповідь "так"
        "no",             # ще раз? — ні
    ])

    assert "Будь ласка, відповідайте yes або no." in output
    assert "Діагноз не може бути порожнім." in output
    assert "[Зміни збережено автоматично.]" in output
    assert session.learned_count == 1

    assert serialize(load_tree(path)) == [
        "Q:Fever?",
        "A:Flu",
        "Q:Itchy eyes?",
        "A:Allergies",
        "A:Cold",
    ]

    print(f"✓ Learning flow:\n{output}")


def test_terminal_correct_diagnosis(tmp_path):
    """Тест правильного діагнозу"""
    session, path, output = _run(tmp_path, ["так", "так", "ні"])

    assert "🩺 Діагноз: Flu" in output
    assert "Чудово" in output
    assert session.learned_count == 0
    assert path.read_text(encoding="utf-8") == FEVER_TREE


def test_terminal_not_sure(tmp_path):
    """Тест відповіді «не знаю»"""
    from med_tree.diagnosis_engine import SessionStatus

    session, _, output = _run(tmp_path, ["не знаю", "no"])

    assert "Зверніться до медичного фахівця" in output
    assert session.status == SessionStatus.CANCELLED


def test_terminal_several_rounds(tmp_path):
    """Тест кількох раундів"""
    session, _, output = _run(tmp_path, [
        "yes", "yes",     # раунд 1: Flu, правильно
        "yes",            # ще раз
        "no", "yes",      # раунд 2: Cold, правильно
        "no",
    ])

    assert session.rounds == 2
    assert "🩺 Діагноз: Cold" in output
    assert output.startswith("Застереження")


def test_terminal_save_error_is_reported(tmp_path):
    """Помилка збереження показується, сесія продовжується"""
    from med_tree.config import MedTreeConfig
    from med_tree.diagnosis_engine import DiagnosisSession, TraversalEngine
    from med_tree.drivers import run_terminal
    from med_tree.tree import deserialize

    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    engine = TraversalEngine(tree_path=blocker / "tree.txt")
    session = DiagnosisSession.start(engine, deserialize(FEVER_TREE.splitlines()))
    config = MedTreeConfig()
    config.session.show_disclaimer = False

    inputs = iter(["yes", "no", "Covid", "Lost sense of smell?", "yes", "no"])
    output = []
    run_terminal(session, config, input_fn=lambda _: next(inputs), output_fn=output.append)

    text = "\n".join(output)
    assert "⚠️ Не вдалося зберегти зміни" in text
    assert session.root.yes_branch.text == "Lost sense of smell?"
    assert session.last_save_error


def test_main_corrupt_tree(tmp_path, capsys):
    """main() повертає 1 для пошкодженого дерева"""
    from med_tree.drivers import main

    path = tmp_path / "tree.txt"
    path.write_text("X:bad\n", encoding="utf-8")

    assert main(["--tree", str(path)]) == 1
    assert "❌" in capsys.readouterr().out


def test_main_stops_on_eof(tmp_path, monkeypatch, capsys):
    """main() завершується коректно, коли введення закінчилось"""
    from med_tree.drivers import main

    path = tmp_path / "tree.txt"
    path.write_text(FEVER_TREE, encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    assert main(["--tree", str(path)]) == 0
    assert "🛑 Зупинено" in capsys.readouterr().out
