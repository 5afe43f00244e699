# === FILE: site_distill/cli.py ===
#!/usr/bin/env python3
"""
Точка входа SiteDistill: обойти сайт и собрать его текст в один Markdown-файл.

Использование:
  site-distill SEED_URL [OUTPUT_FILE]

OUTPUT_FILE по умолчанию output.md.

Опции обхода:
  --config PATH               YAML/JSON с полями CrawlConfig (опции CLI важнее)
  --path-scoped/--host-scoped Ограничить обход префиксом пути стартового URL
  --strip-media/--keep-media  Строгий или мягкий профиль очистки
  --ignore-www/--exact-host   Считать www.example.com и example.com одним хостом
  --concurrency INT           Число параллельных воркеров
  --timeout SEC               Таймаут одного запроса
  --max-pages INT             Необязательный лимит по числу страниц
  --crawl-timeout SEC         Общий лимит времени (частичный результат)
  --title TEXT                Заголовок итогового документа
  --json PATH                 Дополнительно сохранить страницы в JSON

Логирование:
  --log-level LEVEL, --log-file PATH, --log-format FORMAT

Пример:
  site-distill https://example.com/docs/ docs.md --path-scoped -n 8
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from site_distill import __version__
from site_distill.aggregator import render
from site_distill.config import load_config
from site_distill.engine import start_crawl
from site_distill.logger import DEFAULT_FORMAT, init_logging
from site_distill.report import render_json, write_markdown

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteDistill, version %(version)s')
@click.argument('seed_url', required=False)
@click.argument(
    'output_file',
    required=False,
    default='output.md',
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML или JSON.'
)
@click.option('--path-scoped/--host-scoped', 'path_scoped', default=None,
              help='Обходить только пути под путём стартового URL.')
@click.option('--strip-media/--keep-media', 'strip_media', default=None,
              help='Удалять картинки, медиа и формы (строгий профиль).')
@click.option('--ignore-www/--exact-host', 'ignore_www', default=None,
              help='Сравнивать хосты без ведущего www.')
@click.option('--concurrency', '-n', type=click.IntRange(min=1), default=None,
              help='Число параллельных воркеров.')
@click.option('--timeout', type=float, default=None, help='Таймаут одного запроса (секунд).')
@click.option('--max-pages', type=click.IntRange(min=1), default=None,
              help='Остановиться после указанного числа страниц.')
@click.option('--crawl-timeout', 'crawl_timeout', type=float, default=None,
              help='Общий лимит времени обхода (секунд).')
@click.option('--title', default=None, help='Заголовок итогового документа.')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить страницы в JSON-файл.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option('--log-format', 'log_format', default=DEFAULT_FORMAT, help='Строка формата для логов')
@click.pass_context
def cli(ctx, seed_url, output_file, config_path, path_scoped, strip_media, ignore_www,
        concurrency, timeout, max_pages, crawl_timeout, title, json_output,
        log_level, log_file, log_format):
    """Обойти сайт начиная с SEED_URL и записать его содержимое в OUTPUT_FILE."""
    if seed_url is None and config_path is None:
        click.echo(ctx.get_usage(), err=True)
        click.echo('Error: missing SEED_URL.', err=True)
        sys.exit(1)

    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format,
    )

    try:
        cfg = load_config(
            config_path,
            seed_url=seed_url,
            path_scoped=path_scoped,
            strip_media=strip_media,
            ignore_www=ignore_www,
            concurrency=concurrency,
            timeout=timeout,
            max_pages=max_pages,
            title=title,
        )
    except ValidationError as e:
        click.echo(ctx.get_usage(), err=True)
        print_error(f'Некорректный URL или конфигурация: {e}')
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')

    try:
        result = asyncio.run(start_crawl(cfg, crawl_timeout=crawl_timeout))
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    try:
        saved = write_markdown(render(result.pages, cfg.title), output_file)
    except OSError as e:
        print_error(f'Ошибка при сохранении {output_file}: {e}')

    if json_output:
        try:
            saved_json = render_json(result, json_output)
            click.echo(f'JSON pages: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if result.failures:
        click.echo(f'{len(result.failures)} page(s) could not be fetched and were skipped.')
    click.echo(f'Crawling complete. Content written to {saved}')


main = cli

if __name__ == "__main__":
    cli()
