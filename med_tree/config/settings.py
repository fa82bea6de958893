"""
MedTree — Налаштування системи

Всі параметри зібрані в dataclass-и для:
- Легкого доступу через config.storage.tree_path
- Серіалізації в YAML
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List
import os


TREE_PATH_ENV = "MEDTREE_TREE_PATH"


# =============================================================================
# STORAGE CONFIGURATION
# =============================================================================

@dataclass
class StorageConfig:
    """Параметри сховища дерева"""

    tree_path: str = "data/diagnosis_tree.txt"
    encoding: str = "utf-8"

    # Запис через тимчасовий файл + rename
    atomic_save: bool = True

    # Якщо файлу немає — створити дерево з одного діагнозу
    create_if_missing: bool = True
    seed_diagnosis: str = "Common cold"


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

@dataclass
class SessionConfig:
    """Параметри драйверів сесії"""

    unsure_words: List[str] = field(default_factory=lambda: [
        "?", "idk", "not sure", "не знаю",
    ])
    show_disclaimer: bool = True
    disclaimer: str = (
        "Застереження: ця програма не замінює професійну медичну консультацію.\n"
        "Для встановлення діагнозу зверніться до лікаря."
    )


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

def _known(cls, data: Dict[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in (data or {}).items() if k in names}


@dataclass
class MedTreeConfig:
    """
    Головна конфігурація MedTree

    Приклад використання:
        config = MedTreeConfig()
        print(config.storage.tree_path)   # data/diagnosis_tree.txt
    """

    # Метадані
    version: str = "1.0.0"
    project_name: str = "MedTree"

    # Компоненти
    storage: StorageConfig = field(default_factory=StorageConfig)
    session: SessionConfig = field(default_factory=SessionConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MedTreeConfig":
        """Створити з словника (невідомі ключі ігноруються)"""
        data = data or {}
        top = _known(cls, data)
        top["storage"] = StorageConfig(**_known(StorageConfig, data.get("storage", {})))
        top["session"] = SessionConfig(**_known(SessionConfig, data.get("session", {})))
        return cls(**top)

    @classmethod
    def from_env(cls, base: "MedTreeConfig" = None) -> "MedTreeConfig":
        """Застосувати змінну оточення MEDTREE_TREE_PATH"""
        config = base if base is not None else cls()
        tree_path = os.getenv(TREE_PATH_ENV)
        if tree_path:
            config.storage.tree_path = tree_path
        return config


# =============================================================================
# DEFAULT CONFIG INSTANCE
# =============================================================================

def get_default_config() -> MedTreeConfig:
    """Отримати конфігурацію за замовчуванням (з урахуванням оточення)"""
    return MedTreeConfig.from_env()
