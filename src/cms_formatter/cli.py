"""CLI for CMS Formatter."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Annotated

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from cms_formatter import __version__
from cms_formatter.core.config import CmsConfig, CollectionConfig, load_config
from cms_formatter.core.errors import ConfigurationError
from cms_formatter.formatters import (
    DEFAULT_SLUG_TEMPLATE,
    CommitPayload,
    commit_message_formatter,
    slug_formatter,
)

# Configure structlog
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

app = typer.Typer(
    name="cms-formatter",
    help="CMS Formatter - Render commit messages and entry slugs from templates",
    add_completion=False,
)
console = Console(stderr=True)
output = Console(soft_wrap=True, highlight=False, emoji=False)

ConfigOption = Annotated[
    Path | None, typer.Option("--config", "-c", help="Path to CMS config YAML file")
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-V", help="Verbose output")]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        output.print(f"cms-formatter v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """CMS Formatter CLI."""


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _load(config_path: Path | None) -> CmsConfig:
    if config_path is None:
        return CmsConfig()
    return load_config(config_path)


def _find_collection(config: CmsConfig, name: str) -> CollectionConfig:
    collection = config.get_collection(name)
    if collection is None:
        raise ConfigurationError(
            f"Unknown collection '{name}'",
            "Use a collection name defined under `collections` in the config.",
        )
    return collection


def _parse_fields(values: list[str]) -> dict[str, str]:
    fields: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected NAME=VALUE, got '{item}'", param_hint="--field")
        fields[key] = value
    return fields


@app.command()
def slug(
    collection_name: Annotated[str, typer.Option("--collection", help="Collection name")],
    field: Annotated[
        list[str] | None, typer.Option("--field", "-f", help="Entry field as NAME=VALUE")
    ] = None,
    date: Annotated[
        datetime | None, typer.Option("--date", help="Reference date for date tokens")
    ] = None,
    config_path: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the slug for an entry.

    Args:
        collection_name: Collection the entry belongs to.
        field: Entry fields.
        date: Reference date (default: now).
        config_path: Path to YAML configuration file.
        verbose: Enable verbose logging.
    """
    _configure_logging(verbose)
    entry = _parse_fields(field or [])

    try:
        config = _load(config_path)
        collection = _find_collection(config, collection_name)
        result = slug_formatter(collection, entry, config.slug, now=date)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    except ConfigurationError as e:
        console.print(f"[red]{e}")
        raise typer.Exit(1) from e
    except ValidationError as e:
        console.print("[red]Invalid configuration:[/red]", escape(str(e)))
        raise typer.Exit(1) from e

    output.print(result, markup=False)


@app.command("commit-message")
def commit_message(
    action: Annotated[
        str, typer.Argument(help="create, update, delete, uploadMedia or deleteMedia")
    ],
    entry_slug: Annotated[str, typer.Option("--slug", help="Entry slug")] = "",
    path: Annotated[str, typer.Option("--path", help="File path")] = "",
    collection_name: Annotated[
        str | None, typer.Option("--collection", help="Collection name")
    ] = None,
    author_login: Annotated[
        str | None, typer.Option("--author-login", help="Open authoring contributor login")
    ] = None,
    author_name: Annotated[
        str | None, typer.Option("--author-name", help="Open authoring contributor name")
    ] = None,
    open_authoring: Annotated[
        bool, typer.Option("--open-authoring", help="Wrap in the open authoring template")
    ] = False,
    config_path: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the commit message for an action.

    Args:
        action: Commit action.
        entry_slug: Entry slug.
        path: File path.
        collection_name: Collection the entry belongs to.
        author_login: Contributor login.
        author_name: Contributor display name.
        open_authoring: Whether to apply the open authoring template.
        config_path: Path to YAML configuration file.
        verbose: Enable verbose logging.
    """
    _configure_logging(verbose)

    try:
        config = _load(config_path)
        payload = CommitPayload(
            slug=entry_slug,
            path=path,
            collection=_find_collection(config, collection_name) if collection_name else None,
            author_login=author_login,
            author_name=author_name,
        )
        result = commit_message_formatter(
            action,  # type: ignore[arg-type]
            config,
            payload,
            open_authoring,
        )
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    except ConfigurationError as e:
        console.print(f"[red]{e}")
        raise typer.Exit(1) from e
    except ValidationError as e:
        console.print("[red]Invalid configuration:[/red]", escape(str(e)))
        raise typer.Exit(1) from e

    output.print(result, markup=False)


@app.command()
def validate(
    config_path: Annotated[Path, typer.Argument(help="Path to CMS config YAML file")],
) -> None:
    """Validate a configuration file and list its templates.

    Args:
        config_path: Path to YAML configuration file.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    except ValidationError as e:
        console.print("[red]Invalid configuration:[/red]", escape(str(e)))
        raise typer.Exit(1) from e

    output.print("[green]Configuration is valid![/green]")
    output.print(f"  Backend: {config.backend.name}")
    output.print(f"  Slug encoding: {config.slug.encoding}")
    custom = config.get_in(["backend", "commit_messages"], {})
    output.print(f"  Custom commit messages: {', '.join(sorted(custom)) or 'none'}")
    for collection in config.collections:
        template = collection.slug or DEFAULT_SLUG_TEMPLATE
        output.print(f"  Collection {collection.name}: ", template, markup=False, sep="")


@app.command()
def info() -> None:
    """Show tool information and example commands."""
    output.print("[bold]CMS Formatter[/bold]")
    output.print(f"Version: {__version__}\n")

    output.print("[bold]Example Commands:[/bold]")
    output.print("  # Slug for a new post")
    output.print('  cms-formatter slug -c cms.yml --collection posts -f title="Post Title"\n')

    output.print("  # Commit message for an update")
    output.print(
        "  cms-formatter commit-message update -c cms.yml --collection posts --slug my-post\n"
    )

    output.print("  # Open authoring commit message")
    output.print(
        "  cms-formatter commit-message create --slug my-post --open-authoring "
        "--author-login octocat"
    )


if __name__ == "__main__":
    app()
