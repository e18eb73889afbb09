from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv

from .config import AppConfig
from .container import Container
from .cli_formatter import format_classification_result, format_pipeline_error
from ..core.domain.exceptions import InvalidResponseError, PipelineError
from ..core.domain.models import ClassificationResult, Intent, Params, RawResponse

load_dotenv()

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _read_input(path: Path | None) -> str:
    if path is None or str(path) == "-":
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


@app.command()
def parse(
    path: Path | None = typer.Argument(None, help="File with the raw model output ('-' or omitted reads stdin)"),
    role: str | None = typer.Option(None, "--role", help="Speaker role (defaults to config)"),
    message_json: bool = typer.Option(False, "--message-json", help='Input is a {"role", "content"} chat message'),
    json_output: bool = typer.Option(False, "--json", help="Output result as canonical JSON"),
    display: bool = typer.Option(False, "--display", help="Print canonical JSON, or the raw text if parsing fails"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Log level", case_sensitive=False),
):
    """Extract the intent classification from a model response."""
    # Configure basic logging for internal debugging
    level = logging._nameToLevel.get(log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s', force=True)

    try:
        text = _read_input(path)
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Error: cannot read input: {e}", err=True)
        raise typer.Exit(code=2)

    config = AppConfig()
    if message_json:
        try:
            response = RawResponse.from_json(text)
        except InvalidResponseError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=2)
    else:
        response = RawResponse(role=role or config.response.default_role, content=text)

    # Create container and execute
    container = Container()
    container.config.from_pydantic(config)
    container.init_resources()

    uc = container.classify_uc()
    try:
        if display:
            typer.echo(uc.display(response=response))
            return

        result = uc.execute(response=response)
        if json_output:
            typer.echo(container.decoder().encode(result))
        else:
            typer.echo(format_classification_result(result))

    except PipelineError as e:
        typer.echo(format_pipeline_error(e), err=True)
        raise typer.Exit(code=1)

    finally:
        # Always shutdown resources to close file handles
        container.shutdown_resources()


@app.command()
def encode(
    intent: str = typer.Option(..., "--intent", help="Intent name: SendEmail, ScheduleMeeting or NoAction"),
    recipient: str | None = typer.Option(None, "--recipient", help="Recipient (omitted = null)"),
    message: str | None = typer.Option(None, "--message", help="Message (omitted = null)"),
):
    """Print the canonical JSON for a classification built from options."""
    try:
        parsed_intent = Intent(intent)
    except ValueError:
        names = ", ".join(i.value for i in Intent)
        typer.echo(f"Error: unknown intent '{intent}' (expected one of: {names})", err=True)
        raise typer.Exit(code=2)

    config = AppConfig()
    container = Container()
    container.config.from_pydantic(config)
    container.init_resources()

    try:
        result = ClassificationResult(
            intent=parsed_intent,
            params=Params(recipient=recipient, message=message),
        )
        typer.echo(container.decoder().encode(result))
    finally:
        container.shutdown_resources()


if __name__ == "__main__":
    app()
