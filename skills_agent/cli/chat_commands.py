"""Interactive chat and scripted demo commands."""

import asyncio
import logging

import typer
from rich.console import Console
from rich.panel import Panel

from skills_agent.core import Orchestrator
from skills_agent.log import setup_logging

console = Console()

QUIT_COMMANDS = {"/quit", "quit", "exit"}
SKILLS_COMMANDS = {"/skills", "skills"}
CLEAR_COMMANDS = {"/clear", "clear"}

DEMO_MESSAGES = [
    "I'm wondering where I could go for a walk today, I live in New York...",
    "Will the weather be nice this afternoon?",
    "How much does the bus cost to get there?",
    (
        "Hmm I only have $10 left but I owe $3.50 to Marcel & $2.10 to Jacques... "
        "Will I have enough for a round-trip bus and a coffee?"
    ),
]


def _build_orchestrator() -> Orchestrator:
    """Create an orchestrator from settings, exiting on bad configuration."""
    from skills_agent.dependencies import create_orchestrator
    from skills_agent.llm import LLMFactoryError

    try:
        return create_orchestrator()
    except (LLMFactoryError, ValueError) as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)


def _describe_configuration() -> str:
    from skills_agent.config import get_settings
    from skills_agent.dependencies import get_llm_provider, get_router_model_name

    settings = get_settings()
    provider = get_llm_provider()
    return "\n".join([
        f"[dim]Provider:[/dim] {settings.llm_provider}",
        f"[dim]Model:[/dim]    {provider.model_name}",
        f"[dim]Router:[/dim]   {get_router_model_name()}",
        "[dim]Mode:[/dim]     Progressive Disclosure",
    ])


def _skills_suffix(orchestrator: Orchestrator) -> str:
    loaded = orchestrator.get_loaded_skills()
    return f" [dim][{', '.join(loaded)}][/dim]" if loaded else ""


async def _chat_loop(orchestrator: Orchestrator) -> None:
    with console.status("Initializing agent..."):
        await orchestrator.initialize()
    console.print("[green]Orchestrator ready![/green]")

    skills_list = "\n".join(
        f"  [cyan]•[/cyan] {skill['name']} - [dim]{skill['description']}[/dim]"
        for skill in orchestrator.get_available_skills()
    )
    console.print(Panel(skills_list, title="Available Skills"))
    console.print("[dim]Commands:[/dim] [yellow]/quit[/yellow] [yellow]/skills[/yellow] [yellow]/clear[/yellow]")

    try:
        while True:
            try:
                user_input = await asyncio.to_thread(console.input, "[bold green]You:[/bold green] ")
            except (EOFError, KeyboardInterrupt):
                break

            command = user_input.strip().lower()
            if command in QUIT_COMMANDS:
                break
            if not command:
                continue

            if command in SKILLS_COMMANDS:
                loaded = orchestrator.get_loaded_skills()
                if loaded:
                    console.print(f"Loaded: [cyan]{', '.join(loaded)}[/cyan]")
                else:
                    console.print("No skills loaded yet")
                continue

            if command in CLEAR_COMMANDS:
                orchestrator.clear_history()
                console.print("[green]History cleared[/green]")
                continue

            try:
                with console.status("Thinking..."):
                    response = await orchestrator.run(user_input)
            except Exception as e:
                console.print(f"[red]Error: {e}[/red]")
                continue

            console.print(f"[blue]Agent:[/blue] {response}{_skills_suffix(orchestrator)}")
    finally:
        await orchestrator.shutdown()

    console.print("[cyan]Bye![/cyan]")


async def _run_demo(orchestrator: Orchestrator, messages: list[str]) -> None:
    with console.status("Initializing agent..."):
        await orchestrator.initialize()

    try:
        for message in messages:
            console.print(f"[green]User:[/green] {message}")
            try:
                with console.status("Thinking..."):
                    response = await orchestrator.run(message)
            except Exception as e:
                console.print(f"[red]Error: {e}[/red]")
                continue

            console.print(f"[blue]Agent:[/blue] {response}{_skills_suffix(orchestrator)}")
    finally:
        await orchestrator.shutdown()

    console.print(f"[green]Skills used:[/green] {', '.join(orchestrator.get_loaded_skills()) or 'none'}")


def chat(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show application logs"),
):
    """Start an interactive chat session."""
    setup_logging(logging.DEBUG if verbose else logging.CRITICAL)

    orchestrator = _build_orchestrator()
    console.print(Panel(_describe_configuration(), title="Skills Agent"))
    asyncio.run(_chat_loop(orchestrator))


def demo(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show application logs"),
):
    """Run a scripted conversation that loads skills along the way."""
    setup_logging(logging.DEBUG if verbose else logging.ERROR)

    orchestrator = _build_orchestrator()
    console.print(Panel(_describe_configuration(), title="Test Conversation"))
    asyncio.run(_run_demo(orchestrator, DEMO_MESSAGES))
