from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import click

from envedit.domain.errors import ParseError
from envedit.services.config.app_config import AppConfig, build_app_config
from envedit.services.env_document import EnvDocument, load
from envedit.utils.constants import APP_NAME
from envedit.utils.log import configure_logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CliState:
    config: AppConfig
    path: Path
    strict: bool


def _load(path: Path, strict: bool) -> EnvDocument:
    try:
        return load(path, strict=strict)
    except ParseError as exc:
        raise click.ClickException(f"{path}: {exc}") from exc
    except OSError as exc:
        raise click.ClickException(f"Cannot read {path}: {exc.strerror or exc}") from exc


def _save(doc: EnvDocument) -> None:
    try:
        doc.save_if_modified()
    except OSError as exc:
        raise click.ClickException(f"Cannot write {doc.path}: {exc.strerror or exc}") from exc


@click.group()
@click.option(
    "--file", "-f", "env_file", type=click.Path(path_type=Path), default=None,
    help="Env file to edit (default from config, usually .env)",
)
@click.option("--config", "config_path", type=click.Path(path_type=Path), default=None, help="Explicit config.ini")
@click.option("--lenient", is_flag=True, help="Skip lines without '=' instead of failing")
@click.option("--verbose", "-v", is_flag=True, help="Log at INFO level")
@click.pass_context
def cli(ctx: click.Context, env_file: Path | None, config_path: Path | None, lenient: bool, verbose: bool) -> None:
    """Edit KEY=VALUE files while keeping comments, blank lines and order."""
    config = build_app_config(explicit_ini=config_path)
    configure_logging("INFO" if verbose else config.log_level())
    if config.loaded_from is not None:
        logger.info("Using config %s", config.loaded_from)
    ctx.obj = CliState(
        config=config,
        path=env_file or config.default_file(),
        strict=config.strict() and not lenient,
    )


@cli.command()
@click.argument("key")
@click.pass_obj
def get(state: CliState, key: str) -> None:
    """Print the value of KEY."""
    value = _load(state.path, state.strict).lookup(key)
    if value is None:
        click.echo(f"{state.path}: {key} not found", err=True)
        raise SystemExit(1)
    click.echo(value)


@cli.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_obj
def set_cmd(state: CliState, key: str, value: str) -> None:
    """Add KEY or update its value."""
    doc = _load(state.path, state.strict)
    try:
        change = doc.add(key, value)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    if change is not None:
        click.echo(str(change))
    _save(doc)


@cli.command()
@click.argument("key")
@click.pass_obj
def unset(state: CliState, key: str) -> None:
    """Remove every KEY=... line."""
    doc = _load(state.path, state.strict)
    change = doc.remove(key)
    if change is not None:
        click.echo(str(change))
    _save(doc)


@cli.command("list")
@click.pass_obj
def list_cmd(state: CliState) -> None:
    """Print every KEY=VALUE pair in file order."""
    for key, value in _load(state.path, state.strict):
        click.echo(f"{key}={value}")


@cli.command()
@click.argument("keys", nargs=-1)
@click.pass_obj
def check(state: CliState, keys: tuple[str, ...]) -> None:
    """Fail if any KEY (default: every key in the file) has no value."""
    doc = _load(state.path, state.strict)
    missing = [k for k in (keys or doc.keys()) if not doc.has_value(k)]
    for key in missing:
        click.echo(f"{state.path}: {key} has no value", err=True)
    if missing:
        raise SystemExit(1)


@cli.command()
@click.argument("template", type=click.Path(path_type=Path))
@click.option("--reorder", is_flag=True, help="Also reshape the file after TEMPLATE")
@click.pass_obj
def sync(state: CliState, template: Path, reorder: bool) -> None:
    """
    Bring the env file in line with TEMPLATE (e.g. .env.example).

    A missing env file is created as a copy of the template. Otherwise keys
    the file lacks are appended with the template's value; existing values
    are never changed.
    """
    tmpl = _load(template, state.strict)
    if not state.path.exists():
        doc = tmpl.clone_to_path(state.path)
        click.echo(f"{state.path}: Created from {template}")
        _save(doc)
        return

    doc = _load(state.path, state.strict)
    for key, value in tmpl:
        if not doc.has_key(key):
            change = doc.add(key, value)
            if change is not None:
                click.echo(str(change))
    if reorder:
        for change in doc.reorder_based_on(tmpl):
            click.echo(str(change))
    _save(doc)


@cli.command()
@click.pass_obj
def version(state: CliState) -> None:
    """Print the envedit version."""
    click.echo(state.config.get_version())


def run_cli(argv: Sequence[str]) -> int:
    """Run the command group and translate click's exit into a return code."""
    try:
        cli.main(args=list(argv), prog_name=APP_NAME)
    except SystemExit as exc:
        if exc.code is None:
            return 0
        return exc.code if isinstance(exc.code, int) else 1
    return 0
