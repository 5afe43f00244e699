# site_distill/report/markdown_report.py
"""
Запись итогового Markdown-документа.
"""
from __future__ import annotations

from pathlib import Path
from typing import Union


def write_markdown(document: str, output_path: Union[Path, str]) -> Path:
    """Сохраняет документ в UTF-8 и возвращает путь к файлу."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document, encoding="utf-8")
    return output
