"""
MedTree — Кодек дерева

Рядковий текстовий формат, прямий обхід (pre-order):
    Q:Fever?
    A:Flu
    A:Cold

"Q:" — питання, за ним yes-піддерево, потім no-піддерево.
"A:" — діагноз (лист).
"""

import os
import tempfile
from pathlib import Path
from typing import IO, Iterable, List, Optional, Union

from med_tree.errors import CorruptTreeFormat, TreeStorageError
from .node import TreeNode


QUESTION_PREFIX = "Q:"
ANSWER_PREFIX = "A:"

PathLike = Union[str, Path]


class _LineReader:
    """Курсор по рядках, спільний для всіх рекурсивних викликів"""

    def __init__(self, lines: Iterable[str]):
        self._lines = iter(lines)
        self.line_number = 0

    def next_line(self) -> Optional[str]:
        for raw in self._lines:
            self.line_number += 1
            line = raw.rstrip("\r\n")
            if line.strip():
                return line
        return None


def serialize(root: Optional[TreeNode]) -> List[str]:
    """
    Серіалізувати дерево у список рядків.

    Args:
        root: Корінь дерева (None → порожній список)

    Returns:
        Рядки без символу нового рядка
    """
    if root is None:
        return []
    lines = []
    for node in root.iter_preorder():
        prefix = ANSWER_PREFIX if node.is_leaf else QUESTION_PREFIX
        lines.append(prefix + node.text)
    return lines


def deserialize(lines: Iterable[str]) -> Optional[TreeNode]:
    """
    Відновити дерево з рядків.

    Args:
        lines: Рядки у форматі Q:/A: (порожні рядки пропускаються)

    Returns:
        Корінь дерева або None для порожнього входу

    Raises:
        CorruptTreeFormat: невідомий префікс, обрізаний потік або зайві рядки
    """
    reader = _LineReader(lines)
    root = _read_subtree(reader, required=False)
    if root is None:
        return None

    extra = reader.next_line()
    if extra is not None:
        raise CorruptTreeFormat(
            "unexpected line after complete tree",
            line_number=reader.line_number,
            line=extra,
        )
    return root


def _read_subtree(reader: _LineReader, required: bool) -> Optional[TreeNode]:
    line = reader.next_line()
    if line is None:
        if required:
            raise CorruptTreeFormat(
                "unexpected end of input, question is missing a branch",
                line_number=reader.line_number,
            )
        return None

    if line.startswith(QUESTION_PREFIX):
        node = TreeNode(line[len(QUESTION_PREFIX):].strip())
        node.yes_branch = _read_subtree(reader, required=True)
        node.no_branch = _read_subtree(reader, required=True)
        return node

    if line.startswith(ANSWER_PREFIX):
        return TreeNode(line[len(ANSWER_PREFIX):].strip())

    raise CorruptTreeFormat(
        f"unrecognized prefix in {line!r}",
        line_number=reader.line_number,
        line=line,
    )


def load_tree(source: Union[PathLike, IO[str]], encoding: str = "utf-8") -> TreeNode:
    """
    Завантажити дерево з файлу або текстового потоку.

    Raises:
        TreeStorageError: файл відсутній або не читається
        CorruptTreeFormat: формат пошкоджено або файл порожній
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        try:
            with open(path, "r", encoding=encoding) as f:
                root = deserialize(f)
        except UnicodeDecodeError as e:
            raise CorruptTreeFormat(f"{path} is not valid {encoding}: {e}") from e
        except OSError as e:
            raise TreeStorageError(f"cannot read {path}: {e}", path=str(path)) from e
    else:
        try:
            root = deserialize(source)
        except UnicodeDecodeError as e:
            raise CorruptTreeFormat(f"stream is not valid {encoding}: {e}") from e
        except OSError as e:
            raise TreeStorageError(f"cannot read tree stream: {e}") from e

    if root is None:
        raise CorruptTreeFormat("tree store is empty")
    return root


def save_tree(
    root: TreeNode,
    sink: Union[PathLike, IO[str]],
    encoding: str = "utf-8",
    atomic: bool = True,
) -> None:
    """
    Зберегти дерево повним перезаписом.

    Для шляху з atomic=True запис іде у тимчасовий файл поруч,
    після чого він атомарно замінює цільовий (os.replace).

    Raises:
        TreeStorageError: запис не вдався
    """
    text = "".join(line + "\n" for line in serialize(root))

    if not isinstance(sink, (str, Path)):
        try:
            sink.write(text)
        except OSError as e:
            raise TreeStorageError(f"cannot write tree: {e}") from e
        return

    path = Path(sink)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if not atomic:
            with open(path, "w", encoding=encoding) as f:
                f.write(text)
            return

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent)
        )
        try:
            with os.fdopen(fd, "w", encoding=encoding) as f:
                f.write(text)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
    except OSError as e:
        raise TreeStorageError(f"cannot write {path}: {e}", path=str(path)) from e


def load_or_seed(
    path: PathLike,
    seed_diagnosis: Optional[str] = None,
    encoding: str = "utf-8",
) -> TreeNode:
    """
    Завантажити дерево, а якщо файлу немає — створити дерево
    з одного діагнозу і зберегти його.

    Args:
        path: Файл дерева
        seed_diagnosis: Діагноз для нового дерева (None — файл обов'язковий)
        encoding: Кодування файлу

    Raises:
        TreeStorageError: файл відсутній (без seed_diagnosis) або не читається
        CorruptTreeFormat: формат пошкоджено
    """
    path = Path(path)
    if not path.exists() and seed_diagnosis and seed_diagnosis.strip():
        root = TreeNode(seed_diagnosis.strip())
        save_tree(root, path, encoding=encoding)
        return root
    return load_tree(path, encoding=encoding)
