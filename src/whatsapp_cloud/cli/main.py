"""
WhatsApp Cloud CLI

Command-line interface for quick Cloud API administration.
Credentials come from WA_* environment variables.

Commands:
- send-text: Send a text message
- upload-media: Upload a local file and print its media ID
- templates: List message templates
- profile: Show the business profile
- sign: Compute the X-Hub-Signature-256 value for a raw body file
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Optional, TypeVar

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from whatsapp_cloud.client import WhatsAppClient
from whatsapp_cloud.config import load_config_from_env
from whatsapp_cloud.errors import ApiError, ConfigurationError, MediaFileNotFoundError
from whatsapp_cloud.webhooks.verifier import WebhookVerifier

T = TypeVar("T")

app = typer.Typer(
    name="whatsapp-cloud",
    help="WhatsApp Cloud API CLI",
)

console = Console()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_client() -> WhatsAppClient:
    """Client configured from the environment."""
    return WhatsAppClient(load_config_from_env())


def _run(call: Callable[[WhatsAppClient], Awaitable[T]]) -> T:
    """Run one API call, mapping library errors to a red message and exit code 1."""
    try:
        client = get_client()
    except ConfigurationError as e:
        rprint(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    async def runner() -> T:
        async with client:
            return await call(client)

    try:
        return asyncio.run(runner())
    except ApiError as e:
        rprint(f"[red]{escape(str(e))}[/red]")
        if e.user_message:
            rprint(f"  {escape(e.user_title or 'Details')}: {escape(e.user_message)}")
        raise typer.Exit(1)
    except MediaFileNotFoundError as e:
        rprint(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def send_text(
    to: str = typer.Argument(..., help="Recipient phone number (e.g., +15551234567)"),
    body: str = typer.Argument(..., help="Message text"),
    preview_url: bool = typer.Option(False, help="Render a link preview"),
):
    """
    Send a text message.
    """
    response = _run(lambda client: client.messages.send_text(to, body, preview_url=preview_url))
    rprint(f"[green]Message sent:[/green] {response.message_id}")


@app.command()
def upload_media(
    path: Path = typer.Argument(..., help="File to upload"),
    mime_type: Optional[str] = typer.Option(None, help="MIME type (guessed from extension if omitted)"),
):
    """
    Upload a file and print its media ID.
    """
    response = _run(lambda client: client.media.upload_media(path, mime_type=mime_type))
    rprint(f"[green]Uploaded:[/green] {response.id}")


@app.command()
def templates(
    limit: int = typer.Option(25, help="Maximum templates to list"),
):
    """
    List message templates of the business account.
    """
    response = _run(lambda client: client.templates.get_templates(limit=limit))

    if not response.data:
        rprint("[yellow]No templates found[/yellow]")
        raise typer.Exit(0)

    table = Table(title="Message Templates")
    table.add_column("Name")
    table.add_column("Language")
    table.add_column("Status")
    table.add_column("Category")
    table.add_column("ID", style="dim")

    for template in response.data:
        table.add_row(
            template.name,
            template.language or "-",
            template.status or "-",
            template.category or "-",
            template.id,
        )

    console.print(table)


@app.command()
def profile():
    """
    Show the business profile of the configured phone number.
    """
    response = _run(lambda client: client.profile.get_profile())

    table = Table(title="Business Profile")
    table.add_column("Field", style="bold")
    table.add_column("Value")

    for field, value in response.model_dump(exclude_none=True).items():
        table.add_row(field, ", ".join(map(str, value)) if isinstance(value, list) else str(value))

    console.print(table)


@app.command()
def sign(
    payload_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Raw webhook body"),
):
    """
    Print the X-Hub-Signature-256 header value for a raw body.

    Useful for replaying webhook fixtures against a local endpoint.
    """
    try:
        verifier = WebhookVerifier(load_config_from_env())
    except ConfigurationError as e:
        rprint(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    typer.echo(verifier.compute_signature(payload_file.read_bytes()))


if __name__ == "__main__":
    app()
