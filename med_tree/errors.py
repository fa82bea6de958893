"""
MedTree — Помилки

Ієрархія винятків ядра:
- CorruptTreeFormat: файл дерева пошкоджено (невідомий префікс, обрізаний потік)
- InvalidInputError: некоректне введення (багаторядковий текст, невідома відповідь)
  - EmptyInputError: порожній діагноз або питання під час навчання
- TreeStorageError: сховище недоступне для читання/запису
- InvalidTransition: операцію викликано в неправильному стані сесії
"""

from typing import Optional


class MedTreeError(Exception):
    """Базовий виняток MedTree"""


class CorruptTreeFormat(MedTreeError, ValueError):
    """Рядок не відповідає формату Q:/A: або потік обірвався"""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class InvalidInputError(MedTreeError, ValueError):
    """Некоректне введення користувача (можна повторити введення)"""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field} {reason}")


class EmptyInputError(InvalidInputError):
    """Порожнє поле під час навчання"""

    def __init__(self, field: str):
        super().__init__(field, "must not be empty")


class TreeStorageError(MedTreeError, OSError):
    """Не вдалося прочитати або записати файл дерева"""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class InvalidTransition(MedTreeError, RuntimeError):
    """Порушення контракту машини станів"""

    def __init__(self, operation: str, expected, actual):
        self.operation = operation
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{operation}() requires state {expected.value}, got {actual.value}"
        )
