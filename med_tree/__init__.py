"""
MedTree — Асистент медичної діагностики на бінарному дереві рішень

Архітектура: дерево питань так/ні + навчання на помилках

Модулі:
- tree: Вузол дерева та текстовий кодек (Q:/A:)
- diagnosis_engine: Обхід дерева, підтвердження, навчання
- schemas: Валідація відповідей та даних навчання
- config: Конфігурація системи
- drivers: Термінальний інтерфейс
- web_ui: Веб-інтерфейс (Streamlit)
"""

__version__ = "1.0.0"
__author__ = "Oleksii Bychkov"

from .config import MedTreeConfig, get_default_config
from .errors import (
    MedTreeError,
    CorruptTreeFormat,
    InvalidInputError,
    EmptyInputError,
    TreeStorageError,
    InvalidTransition,
)
