"""
FeedSig command line interface.

Usage:
    feedsig --help
    feedsig signature --headline "Cats running" --text "The cat sat on the mat."
    feedsig signature --headline "Cats" --text-file article.html --json
    feedsig stopwords the cat
    feedsig check-config
"""

import json
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from .config.settings import get_settings
from .ingestion.content_cleaner import ContentCleaner
from .models.article import Article
from .processing.signature import get_word_frequencies, is_new
from .processing.stopwords import get_stopwords
from .processing.word_counter import WordCounter
from .utils.exceptions import FeedSigError, ProcessingError, handle_exception, get_user_friendly_message
from .utils.logging import configure_application_logging, get_logger_for_component

console = Console()
err_console = Console(stderr=True)
logger = get_logger_for_component("cli")

# Text given on the command line has no real article behind it.
PLACEHOLDER_URL = "https://localhost/article"


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, debug):
    """FeedSig - word-frequency signatures for news articles."""
    ctx.ensure_object(dict)

    try:
        settings = get_settings()
    except FeedSigError as e:
        err_console.print(f"[bold red]❌ {get_user_friendly_message(e)}[/bold red]")
        sys.exit(1)

    configure_application_logging(
        log_level="DEBUG" if debug else settings.get_effective_log_level(),
        log_file=settings.logging.file_path,
        enable_console=settings.logging.console_logging,
        structured_logging=settings.logging.structured_logging,
        max_file_size_mb=settings.logging.max_file_size_mb,
        backup_count=settings.logging.backup_count,
    )
    ctx.obj['settings'] = settings


@cli.command()
@click.option('--headline', '-H', default="", help='Article headline')
@click.option('--text', '-t', default=None, help='Article text (may contain HTML)')
@click.option('--text-file', '-f', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Read article text from a UTF-8 file')
@click.option('--url', default=PLACEHOLDER_URL, show_default=True, help='Article URL')
@click.option('--published', type=click.DateTime(formats=["%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]),
              help='Publication time (UTC) to report whether the article is new')
@click.option('--json', 'as_json', is_flag=True,
              help='Print JSON; with --published it also carries is_new')
@click.pass_context
def signature(ctx, headline, text, text_file, url, published, as_json):
    """Print the word-frequency signature of an article."""
    if text is not None and text_file is not None:
        raise click.UsageError("Use either --text or --text-file, not both")

    settings = ctx.obj['settings']

    try:
        if text_file is not None:
            text = _read_article_text(text_file)

        article = Article(headline=headline, text=text or "", url=url, date=published)
        frequencies = get_word_frequencies(article, counter=WordCounter(), normalizer=ContentCleaner())
    except Exception as e:
        error = handle_exception(e, logger, "signature")
        err_console.print(f"[bold red]❌ {get_user_friendly_message(error)}[/bold red]")
        sys.exit(1)

    ranked = dict(sorted(frequencies.items(), key=lambda item: (-item[1], item[0])))

    fresh = None
    if published is not None:
        window = timedelta(seconds=settings.text.new_article_window_seconds)
        fresh = is_new(article, datetime.now(timezone.utc), window)

    if as_json:
        payload = ranked if fresh is None else {"signature": ranked, "is_new": fresh}
        click.echo(json.dumps(payload, ensure_ascii=False))
        return

    table = Table(title=f"Signature: {headline or '(no headline)'}")
    table.add_column("Stem", style="cyan")
    table.add_column("Count", justify="right", style="green")
    for word, count in ranked.items():
        table.add_row(word, str(count))
    console.print(table)

    if fresh is not None:
        console.print("🆕 New article" if fresh else "Published more than "
                      f"{settings.text.new_article_window_seconds}s ago")


def _read_article_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ProcessingError(
            f"{path.name} is not valid UTF-8 ({e.reason} at byte {e.start})",
            source=str(path),
            user_message=f"Cannot read {path.name}: the file is not UTF-8 text",
        ) from e


@cli.command()
@click.argument('words', nargs=-1, required=True)
def stopwords(words):
    """Report which WORDS are on the low-value word list."""
    try:
        stopword_set = get_stopwords()
    except FeedSigError as e:
        handle_exception(e, logger, "stopwords")
        err_console.print(f"[bold red]❌ {get_user_friendly_message(e)}[/bold red]")
        sys.exit(1)

    for word in words:
        status = "low-value" if stopword_set.contains(word) else "counted"
        click.echo(f"{word}\t{status}")


@cli.command()
@click.pass_context
def check_config(ctx):
    """Show the effective configuration."""
    settings = ctx.obj['settings']

    table = Table(title="FeedSig Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Log level", settings.get_effective_log_level())
    table.add_row("Log file", settings.logging.file_path or "(console only)")
    table.add_row("Structured logging", str(settings.logging.structured_logging))
    table.add_row("New article window", f"{settings.text.new_article_window_seconds}s")

    try:
        table.add_row("Low-value words", str(len(get_stopwords())))
    except FeedSigError as e:
        table.add_row("Low-value words", f"❌ {e}")
        console.print(table)
        sys.exit(1)

    console.print(table)


if __name__ == '__main__':
    cli()
