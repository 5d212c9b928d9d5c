from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from domstub.app import DomStubApp
from domstub.common import CliRenderer, bus
from domstub.spec import ConfigError, DomStubError

nexus = bus.render_to_string

app = typer.Typer(
    name="domstub",
    help=nexus("cli.app.help"),
    no_args_is_help=True,
)


class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@app.callback()
def main(
    loglevel: LogLevel = typer.Option(
        LogLevel.INFO,
        "--loglevel",
        case_sensitive=False,
        help=nexus("cli.option.loglevel.help"),
    ),
):
    bus.set_renderer(CliRenderer(loglevel=loglevel.value))


def make_app() -> DomStubApp:
    return DomStubApp(root_path=Path.cwd())


@contextmanager
def reported_errors(path: Optional[Path] = None):
    try:
        yield
    except OSError as e:
        bus.error("error.io", path=e.filename or path, error=e.strerror or e)
        raise typer.Exit(code=1)
    except ConfigError as e:
        bus.error("error.config.invalid", error=str(e))
        raise typer.Exit(code=1)
    except DomStubError as e:
        bus.error("error.generic", error=str(e))
        raise typer.Exit(code=1)


@app.command(name="generate", help=nexus("cli.command.generate.help"))
def generate_command(
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help=nexus("cli.option.output.help")
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help=nexus("cli.option.dry_run.help")
    ),
):
    with reported_errors(output):
        make_app().run_generate(output=output, dry_run=dry_run)


@app.command(name="check", help=nexus("cli.command.check.help"))
def check_command(
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help=nexus("cli.option.output.help")
    ),
):
    with reported_errors(output):
        up_to_date = make_app().run_check(output=output)

    if not up_to_date:
        raise typer.Exit(code=1)


@app.command(name="interfaces", help=nexus("cli.command.interfaces.help"))
def interfaces_command():
    with reported_errors():
        resolved = make_app().build_generator().resolve_all()

    for iface in resolved:
        extends = f": {iface.supertype}" if iface.supertype else ""
        typer.echo(f"{iface.name}{extends} ({len(iface.methods)} methods)")
