"""
Blockdata CLI - Command line interface.

Usage:
    blockdata parse post.html --blocks post.blocks.json --registry blocks.yaml
    blockdata parse post.html -b post.blocks.json -r blocks.json --include core/image
"""

import json
import logging
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from blockdata.config import ParserConfig, debug_from_env
from blockdata.exceptions import ConfigurationError
from blockdata.logging import create_file_handler, get_logger, setup_logging
from blockdata.meta import InMemoryMetaStore
from blockdata.models import FilterOptions
from blockdata.parser import ContentParser
from blockdata.registry import BlockTypeRegistry
from blockdata.tokenizer import StaticTokenizer

# Load .env file if present
load_dotenv()

app = typer.Typer(
    name="blockdata",
    help="Extract structured attribute data from editor blocks",
    add_completion=False,
)

console = Console()
logger = get_logger("cli")


@app.callback()
def main() -> None:
    """Extract structured attribute data from editor blocks."""


@app.command()
def parse(
    content_file: Path = typer.Argument(..., help="Post content with block delimiters"),
    blocks: Path = typer.Option(..., "--blocks", "-b", help="Tokenized block tree (JSON)"),
    registry: Path = typer.Option(
        ..., "--registry", "-r", help="Block type definitions (JSON or YAML)"
    ),
    meta: Path | None = typer.Option(None, "--meta", help="Post metadata (JSON or YAML)"),
    post_id: int | None = typer.Option(None, "--post-id", "-p", help="Post ID"),
    include: list[str] | None = typer.Option(None, "--include", "-i", help="Block names to keep"),
    exclude: list[str] | None = typer.Option(None, "--exclude", "-e", help="Block names to drop"),
    debug: bool = typer.Option(False, "--debug", help="Include debug data in the output"),
    indent: int = typer.Option(2, "--indent", help="JSON indentation"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Also write JSON logs here"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Parse post content and print sourced blocks as JSON."""
    setup_logging(level="DEBUG" if verbose else "WARNING")
    if log_file:
        logging.getLogger("blockdata").addHandler(create_file_handler(log_file))

    try:
        content = content_file.read_text(encoding="utf-8")
        parser = ContentParser(
            registry=BlockTypeRegistry.from_file(registry),
            tokenizer=StaticTokenizer.from_file(blocks),
            meta_store=InMemoryMetaStore.from_file(meta) if meta else None,
            config=ParserConfig(debug=debug or debug_from_env()),
        )
    except (OSError, ConfigurationError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(2)

    result = parser.parse(
        content,
        post_id=post_id,
        filter_options=FilterOptions(include=include or None, exclude=exclude or None),
    )
    logger.debug(f"Parse finished: success={result.success}")

    typer.echo(json.dumps(result.to_dict(), indent=indent, ensure_ascii=False))

    if not result.success:
        raise typer.Exit(1)
