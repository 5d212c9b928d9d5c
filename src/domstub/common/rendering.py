import typer

from .messaging import LEVELS, protocols


class CliRenderer(protocols.Renderer):
    """
    Renders messages to the command line using Typer for colored output.
    """

    def __init__(self, loglevel: str = "info"):
        self.threshold = LEVELS.get(loglevel, LEVELS["info"])

    def render(self, message: str, level: str) -> None:
        if LEVELS.get(level, LEVELS["info"]) < self.threshold:
            return

        color = None
        if level == "success":
            color = typer.colors.GREEN
        elif level == "warning":
            color = typer.colors.YELLOW
        elif level == "error":
            color = typer.colors.RED

        typer.secho(message, fg=color)
