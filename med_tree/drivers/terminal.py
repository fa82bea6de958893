"""
MedTree — Термінальний інтерфейс

Тонкий цикл введення/виведення над DiagnosisSession:
питання так/ні → діагноз → підтвердження → навчання.

Запуск:
    med-tree
    python scripts/run_cli.py --tree data/diagnosis_tree.txt
"""

import argparse
import sys
from typing import Callable, List, Optional

from med_tree.config import MedTreeConfig, get_default_config, load_config
from med_tree.diagnosis_engine import DiagnosisSession, SessionState
from med_tree.errors import CorruptTreeFormat, InvalidInputError, TreeStorageError
from med_tree.schemas import Answer


InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class TerminalDriver:
    """
    Драйвер сесії для терміналу.

    input_fn/output_fn підміняються в тестах:
        answers = iter(["yes", "no", "yes"])
        driver = TerminalDriver(session, input_fn=lambda _: next(answers))
    """

    def __init__(
        self,
        session: DiagnosisSession,
        config: Optional[MedTreeConfig] = None,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ):
        self.session = session
        self.config = config or MedTreeConfig()
        self.input_fn = input_fn
        self.output_fn = output_fn
        self._unsure = {w.lower() for w in self.config.session.unsure_words}

    # ------------------------------------------------------------------
    # Введення
    # ------------------------------------------------------------------

    def _read(self, prompt: str) -> str:
        return self.input_fn(prompt + "\n> ").strip()

    def ask_yes_no(self, prompt: str, allow_unsure: bool = False) -> Optional[Answer]:
        """
        Питати, доки не буде так/ні.

        Returns:
            Answer або None, якщо користувач не впевнений (allow_unsure=True)
        """
        while True:
            response = self._read(f"{prompt} (yes/no)")
            answer = Answer.parse(response)
            if answer is not None:
                return answer
            if allow_unsure and response.lower() in self._unsure:
                return None
            self.output_fn("Будь ласка, відповідайте yes або no.")

    def ask_text(self, prompt: str, empty_message: str) -> str:
        """Питати, доки не буде непорожнього рядка"""
        while True:
            response = self._read(prompt)
            if response:
                return response
            self.output_fn(f"⚠️ {empty_message}")

    # ------------------------------------------------------------------
    # Раунд діагностики
    # ------------------------------------------------------------------

    def run_round(self) -> None:
        """Один прохід від кореня до діагнозу"""
        session = self.session

        while session.state is SessionState.ASKING:
            answer = self.ask_yes_no(session.current_text, allow_unsure=True)
            if answer is None:
                session.not_sure()
                self.output_fn(
                    "Нічого страшного! Діагностика — складна справа. "
                    "Зверніться до медичного фахівця."
                )
                return
            session.answer(answer)

        self.output_fn(f"\n🩺 Діагноз: {session.current_text}")
        if session.confirm(self.ask_yes_no("Це правильно?").as_bool):
            self.output_fn("✅ Чудово! Радий, що зміг допомогти.")
            return

        self.output_fn("Допоможіть мені навчитися!")
        self.learn()

    def learn(self) -> None:
        """Зібрати правильний діагноз і розрізняюче питання"""
        session = self.session
        old = session.current_text

        while True:
            correct = self.ask_text(
                "Який правильний діагноз?",
                "Діагноз не може бути порожнім.",
            )
            question = self.ask_text(
                f'Яке питання так/ні відрізняє "{old}" від "{correct}"?',
                "Питання не може бути порожнім.",
            )
            answer = self.ask_yes_no(f'Для "{correct}" яка відповідь на це питання?')
            try:
                result = session.teach(correct, question, answer)
                break
            except InvalidInputError as e:
                self.output_fn(f"⚠️ {e}")

        if result.saved:
            self.output_fn("[Зміни збережено автоматично.]")
        elif result.save_error:
            self.output_fn(f"⚠️ Не вдалося зберегти зміни: {result.save_error}")
        self.output_fn("Дякую! Я навчився на цьому випадку.")

    def run(self) -> None:
        """Раунди, доки користувач хоче продовжувати"""
        if self.config.session.show_disclaimer:
            self.output_fn(self.config.session.disclaimer)
            self.output_fn("")

        while True:
            self.run_round()
            again = self.ask_yes_no("\nСпробувати ще одну діагностику?")
            if not again.as_bool:
                self.output_fn("Дякуємо, що скористались асистентом. Бережіть себе!")
                return
            self.session.restart()
            self.output_fn("")


def run_terminal(
    session: DiagnosisSession,
    config: Optional[MedTreeConfig] = None,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> DiagnosisSession:
    """Запустити термінальну сесію і повернути її після завершення"""
    TerminalDriver(session, config, input_fn, output_fn).run()
    return session


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="MedTree — Medical Diagnosis Assistant")
    parser.add_argument("--tree", default=None, help="Tree file (default: data/diagnosis_tree.txt)")
    parser.add_argument("--config", default=None, help="YAML config file")
    args = parser.parse_args(argv)

    config = load_config(args.config) if args.config else get_default_config()
    if args.tree:
        config.storage.tree_path = args.tree

    try:
        session = DiagnosisSession.from_config(config)
    except (TreeStorageError, CorruptTreeFormat) as e:
        print(f"❌ Помилка завантаження дерева: {e}")
        return 1

    try:
        run_terminal(session, config)
    except (KeyboardInterrupt, EOFError):
        print("\n🛑 Зупинено")
    return 0


if __name__ == "__main__":
    sys.exit(main())
