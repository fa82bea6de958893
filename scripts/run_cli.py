#!/usr/bin/env python3
"""
MedTree — Запуск термінального асистента

Запуск:
    python scripts/run_cli.py
    python scripts/run_cli.py --tree data/diagnosis_tree.txt
    python scripts/run_cli.py --config config.yaml

Змінна оточення MEDTREE_TREE_PATH задає файл дерева.
"""

import sys
from pathlib import Path

# Додаємо корінь проекту до path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from med_tree.drivers.terminal import main


if __name__ == "__main__":
    sys.exit(main())
