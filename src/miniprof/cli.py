"""miniprof CLI: render saved profiling sessions from the terminal."""

import json
from pathlib import Path
from uuid import UUID

import typer
from pydantic import ValidationError
from rich.console import Console

from miniprof import __version__

from .config import load_config, write_config_template
from .constants import CONFIG_FILE
from .core import RenderCoordinator, parse_client_timings, render_html, render_plain_text
from .errors import ConfigError, SessionLoadError
from .logging import configure_logging
from .models import RenderOptions, RenderPosition, Session
from .output import OutputContext, get_output_context, set_output_context
from .services import InMemoryStorage


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"miniprof {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="miniprof",
    help="Render completed profiling sessions and client timings",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """miniprof - profiling session renderer."""
    configure_logging(verbosity=verbose, quiet=quiet, no_color=no_color)
    set_output_context(OutputContext(console=Console(no_color=no_color), json_mode=json_output))


def load_session(path: Path) -> Session:
    """Read a session saved as JSON.

    Raises:
        SessionLoadError: If the file is missing or not a valid session
    """
    if not path.exists():
        raise SessionLoadError(f"Session file not found: {path}")
    try:
        return Session.model_validate_json(path.read_text())
    except ValidationError as e:
        raise SessionLoadError(f"Invalid session in {path}: {e.error_count()} error(s)") from e


def _load_session_or_exit(ctx: OutputContext, path: Path) -> Session:
    try:
        return load_session(path)
    except SessionLoadError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None


# ============================================================================
# miniprof init
# ============================================================================


@app.command()
def init(
    directory: Path = typer.Option(Path("."), "--dir", "-d", help="Directory for the config"),
) -> None:
    """Write a miniprof.toml template."""
    ctx = get_output_context()
    config_path = directory / CONFIG_FILE
    if config_path.exists():
        ctx.print(f"[yellow]Config already exists:[/yellow] {config_path}")
        return
    write_config_template(directory)
    ctx.success(f"Created config template: {config_path}")


# ============================================================================
# miniprof render
# ============================================================================


@app.command()
def render(
    session_file: Path = typer.Argument(..., help="Session saved as JSON"),
    html: bool = typer.Option(False, "--html", help="HTML-escape names and host"),
) -> None:
    """Print a session as an indented text report.

    Session files go through pydantic JSON parsing and serialization, which
    stop at roughly 200 levels of nesting. Deeper trees render through the
    Python API (render_plain_text) but cannot round-trip as JSON files.
    """
    ctx = get_output_context()
    session = _load_session_or_exit(ctx, session_file)
    text = render_html(session) if html else render_plain_text(session)
    ctx.report(text, {"session_id": str(session.id), "report": text})


# ============================================================================
# miniprof includes
# ============================================================================


@app.command()
def includes(
    session_file: Path = typer.Argument(..., help="Session saved as JSON"),
    unviewed: list[str] = typer.Option(
        [], "--unviewed", "-u", help="Session id not yet seen by the user (repeatable)"
    ),
    unauthorized: bool = typer.Option(
        False, "--unauthorized", help="Render as a caller who may not see other results"
    ),
    position: RenderPosition | None = typer.Option(None, "--position", "-p"),
    show_trivial: bool | None = typer.Option(None, "--show-trivial/--hide-trivial"),
    show_time_with_children: bool | None = typer.Option(
        None, "--show-time-with-children/--hide-time-with-children"
    ),
    max_traces: int | None = typer.Option(None, "--max-traces", min=1),
    show_controls: bool | None = typer.Option(None, "--show-controls/--hide-controls"),
    start_hidden: bool | None = typer.Option(None, "--start-hidden/--start-visible"),
    config: Path = typer.Option(Path("."), "--config", "-c", help="Config file or directory"),
) -> None:
    """Print the payload that bootstraps the results UI."""
    ctx = get_output_context()
    session = _load_session_or_exit(ctx, session_file)

    try:
        settings = load_config(config)
    except ConfigError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None

    storage = InMemoryStorage()
    for raw_id in unviewed:
        try:
            storage.set_unviewed(session.user, UUID(raw_id))
        except ValueError:
            ctx.error(f"Not a session id: {raw_id}")
            raise typer.Exit(1) from None

    coordinator = RenderCoordinator(
        storage,
        settings=settings,
        authorize=(lambda request: False) if unauthorized else None,
    )
    options = RenderOptions(
        position=position,
        show_trivial=show_trivial,
        show_time_with_children=show_time_with_children,
        max_traces_to_show=max_traces,
        show_controls=show_controls,
        start_hidden=start_hidden,
    )
    payload = coordinator.build_render_payload(session, options)
    assert payload is not None
    ctx.result(payload.to_dict())


# ============================================================================
# miniprof client-timings
# ============================================================================


@app.command("client-timings")
def client_timings(
    form_file: Path = typer.Argument(..., help="JSON object of submitted form fields"),
) -> None:
    """Parse browser-submitted timing fields."""
    ctx = get_output_context()
    if not form_file.exists():
        ctx.error(f"Form file not found: {form_file}")
        raise typer.Exit(1)
    try:
        form = json.loads(form_file.read_text())
    except json.JSONDecodeError as e:
        ctx.error(f"Invalid JSON in {form_file}: {e}")
        raise typer.Exit(1) from None
    if not isinstance(form, dict):
        ctx.error("Form file must contain a JSON object")
        raise typer.Exit(1)

    parsed = parse_client_timings({str(k): str(v) for k, v in form.items()})
    ctx.result(parsed.model_dump(mode="json"))
