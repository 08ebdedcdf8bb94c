#!/usr/bin/env python3
"""
MindScope CLI
Interactive chat, classification and server management built on Typer
"""

import asyncio
from typing import Optional

import requests
import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from mindscope import __version__
from mindscope.adapters.ai.openai import OpenAICompatibleAdapter
from mindscope.core.config import get_settings
from mindscope.core.logging import MindScopeLogger
from mindscope.domain.models import ConversationHistory, TherapistResponse
from mindscope.domain.services.router import MessageRouter
from mindscope.localization import Language, get_language_config

app = typer.Typer(
    name="mindscope",
    help="MindScope - conversational response engine for a mental-health companion",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()

EXIT_WORDS = {"exit", "quit", "bye"}

_LEVEL_STYLES = {
    "low": "green",
    "medium": "yellow",
    "high": "red",
    "critical": "bold red",
}


def _build_router(offline: bool = False) -> MessageRouter:
    settings = get_settings()
    MindScopeLogger.configure("WARNING")
    provider = None if offline else OpenAICompatibleAdapter.from_settings(settings.ai)
    return MessageRouter(ai_provider=provider, settings=settings.ai)


def _print_response(response: TherapistResponse) -> None:
    style = _LEVEL_STYLES.get(response.crisis_level.value, "white")
    subtitle = f"{response.conversation_type.value} · {response.emotion} · [{style}]{response.crisis_level.value}[/{style}]"
    console.print(Panel(
        escape(response.message),
        title="MindScope",
        subtitle=subtitle,
        border_style="red" if response.is_crisis else "blue",
    ))
    if response.therapeutic_technique:
        console.print(f"[dim]Technique: {response.therapeutic_technique}[/dim]")
    for suggestion in response.follow_up_suggestions:
        console.print(f"  • {suggestion}")


@app.command()
def chat(
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Language code (en, hi, ...)"),
    offline: bool = typer.Option(False, help="Never call the LLM; templates only"),
):
    """
    Start an interactive chat session

    The history lives only for the session.
    """
    router = _build_router(offline)
    lang = Language.parse(language or get_settings().default_language)
    config = get_language_config(lang)
    history = ConversationHistory()

    status = router.status()
    mode = f"LLM ({status.model})" if status.configured else "template mode"
    console.print(Panel(
        f"[bold blue]MindScope[/bold blue] v{__version__}\n"
        f"Language: {config.name} ({config.native_name}) · {mode}\n"
        f"Crisis line: {config.emergency_numbers.suicide} · Emergency: {config.emergency_numbers.emergency}\n"
        f"Type [bold]exit[/bold] to leave.",
        title="Chat session",
    ))

    while True:
        try:
            message = console.input("[bold cyan]You:[/bold cyan] ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if message.strip().lower() in EXIT_WORDS:
            break

        response = asyncio.run(router.route(message, history, lang))
        history.add_user(message)
        history.add_assistant(response.message, emotion=response.emotion)
        _print_response(response)

    console.print("[dim]Take care of yourself. 💙[/dim]")


@app.command()
def classify(
    message: str = typer.Argument(..., help="Message to classify"),
):
    """
    Show how a message would be classified
    """
    result = _build_router(offline=True).classify(message)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    for field, value in result.to_dict().items():
        shown = "-" if value is None else str(value)
        if field == "crisis_level":
            style = _LEVEL_STYLES.get(shown, "white")
            shown = f"[{style}]{shown}[/{style}]"
        table.add_row(field, shown)

    console.print(table)


@app.command()
def respond(
    message: str = typer.Argument(..., help="Message to answer"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Language code"),
    offline: bool = typer.Option(False, help="Never call the LLM; templates only"),
):
    """
    Route a single message and print the response
    """
    router = _build_router(offline)
    response = asyncio.run(router.route(message, None, language or get_settings().default_language))
    _print_response(response)


@app.command()
def status():
    """
    Show LLM configuration status
    """
    router_status = _build_router().status()

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("configured", "✅" if router_status.configured else "❌")
    table.add_row("model", router_status.model)
    table.add_row("fallback_mode", str(router_status.fallback_mode))

    console.print(table)


@app.command()
def server(
    host: Optional[str] = typer.Option(None, help="Host address (default from settings)"),
    port: Optional[int] = typer.Option(None, help="Port (default from settings)"),
    reload: bool = typer.Option(False, help="Auto-reload for development"),
):
    """
    Start the FastAPI server
    """
    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    console.print(Panel(
        f"[bold blue]MindScope API Server[/bold blue]\n"
        f"🚀 http://{host}:{port}\n"
        f"📚 Docs: http://{host}:{port}/docs",
        title="Server",
    ))

    import uvicorn

    uvicorn.run(
        "mindscope.api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        access_log=True,
    )


@app.command()
def health(
    url: str = typer.Option("http://127.0.0.1:8000", help="API base URL"),
):
    """
    Check a running API server
    """
    try:
        response = requests.get(f"{url}/v1/health", timeout=5)
    except requests.exceptions.RequestException as e:
        console.print(Panel(
            f"[red]❌ Cannot reach the API server[/red]\n"
            f"Error: {e}\n"
            f"💡 Start it with 'mindscope server'",
            title="Connection error",
            border_style="red",
        ))
        raise typer.Exit(1)

    if response.status_code != 200:
        console.print(f"[red]❌ API server error: {response.status_code}[/red]")
        raise typer.Exit(1)

    data = response.json()
    console.print(Panel(
        f"[bold green]✅ API server is running[/bold green]\n"
        f"📊 Status: {data['status']}\n"
        f"🏷️  Version: {data['version']}\n"
        f"🧩 Components: {', '.join(f'{k}={v}' for k, v in data['components'].items())}",
        title="Health check",
    ))


@app.command()
def version():
    """
    Show version information
    """
    console.print(Panel(
        f"[bold blue]MindScope CLI[/bold blue] v{__version__}\n"
        f"🔧 Built with [bold]Typer[/bold]\n"
        f"🚀 Powered by [bold]FastAPI[/bold]",
        title="Version",
    ))


if __name__ == "__main__":
    app()
