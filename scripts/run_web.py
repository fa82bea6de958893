#!/usr/bin/env python3
"""
MedTree — Запуск Web UI (Streamlit)

Запуск:
    python scripts/run_web.py
    python scripts/run_web.py --port 8501
    python scripts/run_web.py --tree data/diagnosis_tree.txt
"""

import os
import sys
import subprocess
import argparse
from pathlib import Path

# Шлях до проекту
project_root = Path(__file__).parent.parent
web_ui_path = project_root / "med_tree" / "web_ui" / "app.py"

sys.path.insert(0, str(project_root))

from med_tree.config import TREE_PATH_ENV


def main():
    parser = argparse.ArgumentParser(description='MedTree Web UI')
    parser.add_argument('--port', type=int, default=8501, help='Port (default: 8501)')
    parser.add_argument('--host', default='localhost', help='Host (default: localhost)')
    parser.add_argument('--tree', default=None, help='Tree file (default: data/diagnosis_tree.txt)')
    
    args = parser.parse_args()
    
    print("=" * 60)
    print("🏥 MedTree — Web UI (Streamlit)")
    print("=" * 60)
    print(f"   App: {web_ui_path}")
    print(f"   URL: http://{args.host}:{args.port}")
    if args.tree:
        print(f"   Tree: {args.tree}")
    print("=" * 60)
    
    # Перевіряємо чи є streamlit
    try:
        import streamlit
        print(f"✅ Streamlit version: {streamlit.__version__}")
    except ImportError:
        print("❌ Streamlit не встановлено!")
        print("   Встановіть: python -m pip install streamlit")
        sys.exit(1)
    
    # Перевіряємо чи існує файл
    if not web_ui_path.exists():
        print(f"❌ Файл не знайдено: {web_ui_path}")
        sys.exit(1)
    
    print()
    print("🚀 Запуск Streamlit...")
    print()
    
    env = os.environ.copy()
    if args.tree:
        env[TREE_PATH_ENV] = str(Path(args.tree).resolve())
    
    # Запускаємо Streamlit
    cmd = [
        sys.executable, "-m", "streamlit", "run",
        str(web_ui_path),
        "--server.port", str(args.port),
        "--server.address", args.host,
        "--browser.gatherUsageStats", "false",
    ]
    
    try:
        subprocess.run(cmd, env=env, cwd=str(project_root))
    except KeyboardInterrupt:
        print("\n🛑 Зупинено")


if __name__ == "__main__":
    main()
