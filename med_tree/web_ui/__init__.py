"""MedTree — Веб-інтерфейс (Streamlit)"""
