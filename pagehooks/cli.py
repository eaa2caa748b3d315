"""CLI entry point for pagehooks."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Annotated

import structlog
import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from pagehooks.config import PageHooksConfig, load_config
from pagehooks.config.loader import DEFAULT_CONFIG_TEMPLATE
from pagehooks.hooks import HOOKS, collect_nav, get_hook
from pagehooks.models import Payload, Resource
from pagehooks.transform import extract_committers, extract_last_modified
from pagehooks.vcs import CommitHistoryFetcher

app = typer.Typer(
    name="pagehooks",
    help="Pre-processing hooks for markdown content pipelines.",
)

config_app = typer.Typer(help="Manage pagehooks configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: PageHooksConfig | None = None

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


# Processors applied to stdlib records before JSON rendering
_JSON_PRE_CHAIN = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _json_formatter() -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_JSON_PRE_CHAIN,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
    )


def configure_logging(level: str, fmt: str) -> None:
    """Configure the root logger from config.log_level / config.log_format.

    ``json`` writes one JSON object per line through structlog; modules keep
    using ``logging.getLogger(__name__)``.
    """
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(_json_formatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    logging.basicConfig(level=_LOG_LEVELS.get(level, logging.INFO), handlers=[handler], force=True)


def _get_config() -> PageHooksConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to pagehooks.yaml")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log at debug level")
    ] = False,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    configure_logging("debug" if verbose else _config.log_level, _config.log_format)


def _validate_repo_id(repo_id: str) -> tuple[str, str]:
    """Validate and split a repo identifier into (owner, repo_name).

    Raises ValueError if format is invalid.
    """
    parts = repo_id.split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ValueError(f"Invalid repo identifier '{repo_id}': expected 'owner/repo'")
    return parts[0], parts[1]


@app.command()
def run(
    hook: str = typer.Argument(..., help=f"Hook to run: {', '.join(sorted(HOOKS))}"),
    payload_file: Path = typer.Argument(..., help="JSON file holding the payload"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write result JSON here"),
) -> None:
    """Run a hook over a payload and print the resulting payload."""
    cfg = _get_config()
    try:
        hook_fn = get_hook(hook)
        raw = json.loads(payload_file.read_text(encoding="utf-8"))
    except (ValueError, OSError) as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    result = asyncio.run(hook_fn(raw, cfg))
    if not result.ok:
        rprint(f"[red]Hook {hook} failed:[/red] {result.error_type}: {escape(result.error or '')}")
        raise typer.Exit(1)

    rendered = result.payload.model_dump_json(by_alias=True, indent=2)
    if output:
        output.write_text(rendered, encoding="utf-8")
        rprint(f"[green]Wrote:[/green] {output}")
    else:
        typer.echo(rendered)


@app.command()
def nav(
    repo: str = typer.Argument(..., help="owner/repo"),
    ref: str = typer.Option("main", "--ref", help="Branch, tag or sha"),
    context_path: str | None = typer.Option(
        None, "--context-path", help="Prefix for rewritten links"
    ),
) -> None:
    """Fetch SUMMARY.md and print the rewritten nav fragments."""
    cfg = _get_config()
    try:
        owner, repo_name = _validate_repo_id(repo)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    if not cfg.secrets.repo_raw_root:
        rprint("[red]Error:[/red] REPO_RAW_ROOT is not configured.")
        raise typer.Exit(1)

    payload = Payload(
        owner=owner,
        repo=repo_name,
        ref=ref,
        resource=Resource(context_path=context_path or cfg.context_path),
    )
    try:
        fragments = asyncio.run(collect_nav(payload, cfg))
    except Exception as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    for fragment in fragments:
        typer.echo(fragment, nl=False)
    typer.echo()


@app.command()
def commits(
    repo: str = typer.Argument(..., help="owner/repo"),
    path: str = typer.Argument(..., help="File path within the repository"),
    ref: str = typer.Option("main", "--ref", help="Branch, tag or sha"),
) -> None:
    """Show committers and last-modified date of a file."""
    cfg = _get_config()
    try:
        owner, repo_name = _validate_repo_id(repo)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    if not cfg.secrets.repo_api_root:
        rprint("[red]Error:[/red] REPO_API_ROOT is not configured.")
        raise typer.Exit(1)

    fetcher = CommitHistoryFetcher.from_config(cfg.secrets.repo_api_root, cfg)
    try:
        history = asyncio.run(fetcher.fetch(owner, repo_name, ref, path))
    except Exception as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    last_modified = extract_last_modified(history, cfg.last_modified_style)
    table = Table(title=f"Committers of {path} ({len(history)} commits)")
    table.add_column("Committer", style="cyan")
    table.add_column("Avatar", style="dim")
    for committer in extract_committers(history):
        table.add_row(committer.display, committer.avatar_url or "-")
    rprint(table)
    rprint(f"[bold]Last modified:[/bold] {last_modified.display}")


# ── config subcommands ───────────────────────────────────────────────


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a default pagehooks.yaml in the current directory."""
    dest = Path("pagehooks.yaml")
    if dest.exists() and not force:
        rprint(f"[yellow]{dest} already exists[/yellow] (use --force to overwrite)")
        raise typer.Exit(1)
    dest.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created:[/green] {dest}")


@config_app.command("show")
def config_show() -> None:
    """Print the effective configuration."""
    cfg = _get_config()
    dumped = yaml.safe_dump(cfg.model_dump(by_alias=True), sort_keys=False)
    rprint(Panel(Syntax(dumped, "yaml"), title="pagehooks config", border_style="blue"))
