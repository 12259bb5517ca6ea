"""Command line interface for managing presets and building the stylesheet."""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Any, Callable

import click

from formstyler.app import build_service, clear_logs, configure_logging, read_log_entries
from formstyler.config.settings import AppSettings
from formstyler.errors import ErrorCode, FormStylerError, format_error_for_user
from formstyler.styles.models import PresetValidationError
from formstyler.styles.service import StyleService
from formstyler.styles.templates import get_template, list_templates, preset_from_template
from formstyler.styles.transfer import export_filename


def _fail(message: str, code: int = 1) -> None:
    click.secho(message, fg="red", err=True)
    raise SystemExit(code)


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Turn project errors into a message and exit code 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (FormStylerError, PresetValidationError) as exc:
            _fail(format_error_for_user(exc))

    return wrapper


def _service(ctx: click.Context) -> StyleService:
    return ctx.obj["service"]


def _settings(ctx: click.Context) -> AppSettings:
    return ctx.obj["settings"]


def _parse_assignments(values: tuple[str, ...]) -> dict[str, str]:
    parsed: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected key=value, got {item!r}", param_hint="--set")
        parsed[key.strip()] = value.strip()
    return parsed


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.yaml [default: per-user config directory]",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """Build scoped form stylesheets from named style presets."""
    try:
        settings = AppSettings(config_path)
    except FormStylerError as exc:
        _fail(format_error_for_user(exc))
    configure_logging(settings)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["service"] = build_service(settings)


@cli.command("compile")
@click.option(
    "-o",
    "--output",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for the generated stylesheet",
)
@click.pass_context
@handle_errors
def compile_cmd(ctx: click.Context, output_dir: Path | None) -> None:
    """Compile every preset into the static stylesheet."""
    service = _service(ctx)
    if output_dir is not None:
        settings = _settings(ctx)
        service = StyleService(
            service.store,
            output_dir,
            css_filename=settings.css_filename,
            base_url=settings.css_base_url,
        )
    output = service.compiled()
    for item in output.skipped:
        click.secho(f"warning: {item.describe()}", fg="yellow", err=True)
    path = service.generate_css_file()
    if path is None:
        _fail(f"Failed to write stylesheet to {service.css_path}")
    click.echo(f"Compiled {len(service.presets())} presets to {path}")


@cli.command("fonts")
@click.pass_context
@handle_errors
def fonts_cmd(ctx: click.Context) -> None:
    """Print the Google Fonts URL the presets need."""
    if not _settings(ctx).load_google_fonts:
        click.echo("Google Fonts loading is disabled.")
        return
    url = _service(ctx).fonts_url()
    click.echo(url if url else "No web fonts needed.")


@cli.command("list")
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    """List stored presets."""
    presets = _service(ctx).presets()
    if not presets:
        click.echo("No style presets defined.")
        return
    for index, preset in enumerate(presets):
        count = len(preset.settings.to_dict())
        click.echo(f"{index}: {preset.title} (.{preset.css_class}, {count} settings)")


@cli.command("add")
@click.option("--title", required=True, help="Preset title")
@click.option("--class", "css_class", required=True, help="CSS class the preset styles")
@click.option("--template", "template_id", default=None, help="Start from a predesigned template")
@click.option("--set", "assignments", multiple=True, help="Setting as key=value (repeatable)")
@click.pass_context
@handle_errors
def add_cmd(
    ctx: click.Context,
    title: str,
    css_class: str,
    template_id: str | None,
    assignments: tuple[str, ...],
) -> None:
    """Add a style preset."""
    settings: dict[str, Any] = {}
    if template_id is not None:
        if get_template(template_id) is None:
            raise click.BadParameter(f"unknown template {template_id!r}", param_hint="--template")
        settings.update(preset_from_template(template_id, title, css_class).settings.to_dict())
    settings.update(_parse_assignments(assignments))
    index = _service(ctx).save_preset(
        {"title": title, "css_class": css_class, "settings": settings}
    )
    click.echo(f"Style added at {index}.")


@cli.command("edit")
@click.argument("index", type=int)
@click.option("--title", default=None, help="New preset title")
@click.option("--class", "css_class", default=None, help="New CSS class")
@click.option("--set", "assignments", multiple=True, help="Setting as key=value (repeatable)")
@click.pass_context
@handle_errors
def edit_cmd(
    ctx: click.Context,
    index: int,
    title: str | None,
    css_class: str | None,
    assignments: tuple[str, ...],
) -> None:
    """Change the preset at INDEX, keeping settings not given."""
    service = _service(ctx)
    current = service.store.get(index)
    settings = current.settings.to_dict()
    settings.update(_parse_assignments(assignments))
    service.update_preset(
        index,
        {
            "title": title if title is not None else current.title,
            "css_class": css_class if css_class is not None else current.css_class,
            "settings": settings,
        },
    )
    updated = service.store.get(index)
    click.echo(f"Updated {index}: {updated.title} (.{updated.css_class}).")


@cli.command("delete")
@click.argument("index", type=int)
@click.pass_context
@handle_errors
def delete_cmd(ctx: click.Context, index: int) -> None:
    """Delete the preset at INDEX."""
    removed = _service(ctx).delete_preset(index)
    click.echo(f"Deleted {removed.title} (.{removed.css_class}).")


@cli.command("duplicate")
@click.argument("index", type=int)
@click.pass_context
@handle_errors
def duplicate_cmd(ctx: click.Context, index: int) -> None:
    """Copy the preset at INDEX under a new class."""
    service = _service(ctx)
    new_index = service.duplicate_preset(index)
    copy = service.store.get(new_index)
    click.echo(f"Duplicated as {new_index}: {copy.title} (.{copy.css_class}).")


@cli.command("templates")
def templates_cmd() -> None:
    """List predesigned style templates."""
    for template in list_templates():
        click.echo(f"{template.template_id}: {template.name} - {template.description}")


@cli.command("export")
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Export file [default: formstyler-export-<timestamp>.json]",
)
@click.option("--site-url", default=None, help="Site URL recorded in the export")
@click.pass_context
@handle_errors
def export_cmd(ctx: click.Context, output_path: Path | None, site_url: str | None) -> None:
    """Export presets to a JSON file."""
    path = output_path or Path(export_filename())
    text = _service(ctx).export_text(site_url=site_url)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        _fail(f"Failed to write {path}: {exc}")
    click.echo(f"Exported {len(_service(ctx).presets())} presets to {path}")


@cli.command("import")
@click.argument("file_path", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
@handle_errors
def import_cmd(ctx: click.Context, file_path: Path) -> None:
    """Merge presets from an export FILE."""
    if not file_path.exists():
        _fail(f"File not found: {file_path}", code=2)
    if file_path.suffix.lower() != ".json":
        _fail("Please provide a valid JSON file.")
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FormStylerError(
            ErrorCode.IMPORT_INVALID_FILE,
            path=file_path,
            details={"error": str(exc)},
        ) from exc
    result = _service(ctx).import_text(text)
    click.echo(result.summary())


@cli.command("clear-cache")
@click.pass_context
@handle_errors
def clear_cache_cmd(ctx: click.Context) -> None:
    """Drop cached output and regenerate the stylesheet."""
    path = _service(ctx).clear_cache()
    if path is None:
        _fail("Cache cleared but the stylesheet could not be written.")
    click.echo(f"Cache cleared; stylesheet regenerated at {path}")


@cli.command("logs")
@click.option("--limit", type=click.IntRange(min=1), default=100, show_default=True)
@click.option("--clear", "clear", is_flag=True, help="Clear the log file")
@click.pass_context
def logs_cmd(ctx: click.Context, limit: int, clear: bool) -> None:
    """Show recent log entries, newest first."""
    settings = _settings(ctx)
    if clear:
        clear_logs(settings)
        click.echo("Logs cleared.")
        return
    entries = read_log_entries(settings, limit)
    if not entries:
        click.echo("No log entries.")
        return
    for line in entries:
        click.echo(line)


@cli.command("purge")
@click.option("--yes", is_flag=True, help="Confirm removal without prompting")
@click.pass_context
@handle_errors
def purge_cmd(ctx: click.Context, yes: bool) -> None:
    """Remove all presets and generated files."""
    if not yes:
        click.confirm("Remove all presets and generated stylesheets?", abort=True)
    service = _service(ctx)
    service.purge()
    click.echo("All presets and generated files removed.")


def main() -> None:
    cli(obj={})


