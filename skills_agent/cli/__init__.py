"""Skills Agent CLI application."""

import typer

from skills_agent.cli.chat_commands import chat, demo
from skills_agent.cli.skill_commands import skill_app

app = typer.Typer(
    name="skills-agent",
    help="Skills Agent - on-demand skill loading CLI",
    no_args_is_help=True,
)

# Register sub-commands
app.add_typer(skill_app, name="skill", help="Browse skills")
app.command()(chat)
app.command()(demo)


@app.command()
def version():
    """Show version information."""
    from skills_agent.config import get_settings

    settings = get_settings()
    typer.echo(f"Skills Agent v{settings.app_version}")


@app.command()
def info():
    """Show application information."""
    from skills_agent.config import get_settings

    settings = get_settings()

    typer.echo(f"Application: {settings.app_name} v{settings.app_version}")
    typer.echo(f"Environment: {settings.env}")
    typer.echo(f"LLM Provider: {settings.llm_provider}")
    typer.echo(f"Router Model: {settings.router_model or 'same as chat model'}")


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", help="Bind port"),
):
    """Run the HTTP API."""
    import uvicorn

    from skills_agent.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    app()
