"""MedTree — Модуль конфігурації"""
from .settings import (
    MedTreeConfig,
    get_default_config,
    StorageConfig,
    SessionConfig,
    TREE_PATH_ENV,
)
from .loader import save_config, load_config, save_yaml, load_yaml

__all__ = [
    "MedTreeConfig",
    "get_default_config",
    "StorageConfig",
    "SessionConfig",
    "TREE_PATH_ENV",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
]
