"""CLI commands for browsing skills."""

import json

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

skill_app = typer.Typer(help="Skill catalog commands")
console = Console()


@skill_app.command("list")
def list_skills(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed info"),
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, json"),
):
    """List all built-in skills."""
    from skills_agent.skills import builtin_skills

    skills = builtin_skills()

    if format == "json":
        skill_data = [
            {
                "name": skill.metadata.name,
                "description": skill.metadata.description,
                "version": skill.metadata.version,
                "tags": sorted(skill.metadata.tags),
                "tools": len(skill.tools),
            }
            for skill in skills
        ]
        console.print_json(json.dumps(skill_data, indent=2))
        return

    table = Table(title="Available Skills")
    table.add_column("Name", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Tools", justify="right", style="green")

    if verbose:
        table.add_column("Version", style="blue")
        table.add_column("Tags", style="magenta")

    for skill in skills:
        metadata = skill.metadata
        row = [metadata.name, metadata.description, str(len(skill.tools))]
        if verbose:
            row.append(metadata.version)
            row.append(", ".join(sorted(metadata.tags)) or "-")
        table.add_row(*row)

    console.print(table)


@skill_app.command("info")
def skill_info(
    skill_name: str = typer.Argument(..., help="Name of the skill"),
):
    """Show a skill's metadata and tools."""
    from skills_agent.skills import builtin_skills

    skill = next((s for s in builtin_skills() if s.metadata.name == skill_name), None)
    if skill is None:
        console.print(f"[red]Skill '{skill_name}' not found[/red]")
        raise typer.Exit(1)

    metadata = skill.metadata
    info_lines = [
        f"[bold]Name:[/bold] {metadata.name}",
        f"[bold]Description:[/bold] {metadata.description}",
        f"[bold]Version:[/bold] {metadata.version}",
    ]
    if metadata.author:
        info_lines.append(f"[bold]Author:[/bold] {metadata.author}")
    if metadata.tags:
        info_lines.append(f"[bold]Tags:[/bold] {', '.join(sorted(metadata.tags))}")
    info_lines.append(f"[bold]Tools:[/bold] {len(skill.tools)}")

    console.print(Panel("\n".join(info_lines), title=f"Skill: {skill_name}"))

    tools_table = Table(title="Tools")
    tools_table.add_column("Name", style="cyan")
    tools_table.add_column("Description", style="white")
    tools_table.add_column("Parameters", style="green")

    for tool in skill.tools:
        params = tool.input_schema.model_json_schema().get("properties", {})
        tools_table.add_row(tool.name, tool.description, ", ".join(params) or "-")

    console.print(tools_table)
