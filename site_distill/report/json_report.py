# site_distill/report/json_report.py

"""
Генерация JSON-выгрузки страниц обхода.
"""
import json
from pathlib import Path

from site_distill.crawler.models import CrawlResult


def render_json(result: CrawlResult, output_path: Path | str, pretty: bool = True) -> Path:
    """
    Сохраняет страницы result в формате JSON по указанному пути.

    :param result: объект CrawlResult
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 вместо компактной записи
    :return: Path сохранённого файла

    Пример:
    ```python
    from site_distill.report.json_report import render_json
    report_path = render_json(result, 'reports/pages.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    data = [{'url': page.url, 'content': page.content} for page in result.pages]

    with output.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2 if pretty else None)

    return output
