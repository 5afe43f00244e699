# File: site_distill/report/__init__.py
"""site_distill.report: Запись результатов обхода на диск (Markdown и JSON)."""

from __future__ import annotations

from site_distill.report.json_report import render_json
from site_distill.report.markdown_report import write_markdown

__all__ = ["render_json", "write_markdown"]
