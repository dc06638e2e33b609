# File: html_grader/cli.py
"""
Точка входа HtmlGrader: проверяет HTML-документ на наличие элементов,
заданных CSS-селекторами, и печатает результат в JSON.

Опции:
  -c, --checks PATH   JSON-массив селекторов (default: checks.json)
  -f, --file PATH     Локальный HTML-файл
  -u, --url URL       URL документа (загружается одним GET-запросом)
  --config PATH       YAML/JSON с настройками по умолчанию (checks, timeout, user_agent)
  --timeout SEC       Общий таймаут HTTP-запроса (по умолчанию без таймаута)
  --user-agent STR    Заголовок User-Agent
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только stderr, если не указан)
  --log-format FORMAT Формат логирования

Пример:
  html-grader --checks checks.json --file index.html
"""
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from html_grader import __version__
from html_grader.config import DEFAULT_CHECKS, GraderConfig, GraderSettings, load_settings
from html_grader.engine import check_document
from html_grader.errors import DocumentReadError, FetchError, MissingFileError, SourceSelectionError
from html_grader.loader import load_document
from html_grader.logger import DEFAULT_FORMAT, init_logging, logger
from html_grader.report.json_report import render_json
from html_grader.utils import assert_file_exists

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _validate_checks(ctx, param, value):
    """Fail fast on a --checks path that does not exist."""
    if value is None:
        return None
    try:
        return assert_file_exists(value)
    except MissingFileError as e:
        print_error(str(e))


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='HtmlGrader, version %(version)s')
@click.option(
    '--checks', '-c', 'checks',
    default=None,
    callback=_validate_checks,
    metavar='CHECK_FILE',
    help=f'Путь к checks.json  [default: {DEFAULT_CHECKS}]'
)
@click.option(
    '--file', '-f', 'html_file',
    default=None,
    metavar='HTML_FILE',
    help='Путь к index.html'
)
@click.option(
    '--url', '-u', 'url',
    default=None,
    metavar='URL',
    help='Полный URL страницы'
)
@click.option(
    '--config', 'config_path',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Файл настроек YAML/JSON (checks, timeout, user_agent)'
)
@click.option(
    '--timeout', 'timeout',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Общий таймаут HTTP-запроса (секунд)'
)
@click.option(
    '--user-agent', 'user_agent',
    default=None,
    help='Заголовок User-Agent для HTTP-запроса'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (только stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, checks, html_file, url, config_path, timeout, user_agent, log_level, log_file, log_format):
    """Проверить HTML-документ по списку CSS-селекторов."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )

    settings = GraderSettings()
    if config_path is not None:
        try:
            settings = load_settings(config_path)
        except (OSError, ValueError, TypeError) as e:
            print_error(f'Ошибка загрузки настроек: {e}')

    checks_path = checks or settings.checks or DEFAULT_CHECKS
    overrides = {
        'timeout': timeout if timeout is not None else settings.timeout,
        'user_agent': user_agent or settings.user_agent,
    }
    try:
        cfg = GraderConfig(
            checks=checks_path,
            file=html_file,
            url=url,
            **{k: v for k, v in overrides.items() if v is not None},
        )
    except SourceSelectionError as e:
        click.secho(str(e), fg='red', err=True)
        click.echo(ctx.get_help(), err=True)
        ctx.exit(1)
    except ValidationError as e:
        print_error(f'Некорректные параметры: {e}')

    # checks path from the default or the settings file
    try:
        assert_file_exists(cfg.checks)
    except MissingFileError as e:
        print_error(str(e))

    try:
        document = load_document(cfg)
    except MissingFileError as e:
        print_error(str(e))
    except (FetchError, DocumentReadError) as e:
        # no output and no failure status, same as a completed run
        click.secho(f'Error: {e.message}', fg='red', err=True)
        return

    results = check_document(document, cfg.checks)
    render_json(results)
    logger.info("Reported %d checks", len(results))


if __name__ == "__main__":
    cli()
