"""CLI interface for the portfolio backend."""

import json
import logging
import subprocess
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.panel import Panel
from rich import box

from . import __version__
from .config import Settings
from .github.importer import GitHubImporter, GitHubImportError
from .github.store import NotImported, load_repos, top_languages
from .scanner.detector import WorkspaceScanner


console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """Folio - portfolio backend and workspace project scanner."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )
    ctx.obj = Settings.from_env()


@main.command()
@click.argument("root", type=click.Path(), required=False)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def scan(settings: Settings, root: Optional[str], as_json: bool):
    """Scan a workspace directory for projects."""
    root_path = Path(root) if root else settings.workspace_dir
    scanner = WorkspaceScanner(root_path, exclude=settings.exclude)

    try:
        projects = scanner.scan()
    except OSError as e:
        if as_json:
            click.echo(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Cannot scan {root_path}: {e}[/red]")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps({
            "root": str(root_path),
            "count": len(projects),
            "projects": [p.to_dict() for p in projects],
        }, indent=2))
        return

    if not projects:
        console.print(f"[yellow]No projects found in {scanner.root}[/yellow]")
        return

    table = Table(title=f"Projects in {scanner.root}", box=box.ROUNDED)
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Docker", justify="center")
    table.add_column("README", justify="center")

    for p in projects:
        table.add_row(
            p.name,
            p.type,
            "[green]✓[/green]" if p.docker else "",
            "[green]✓[/green]" if p.readme else "",
        )

    console.print(table)
    console.print(f"\n[dim]{len(projects)} projects[/dim]")


@main.command("import-github")
@click.option("--username", "-u", help="GitHub username (default: GITHUB_USERNAME)")
@click.option("--token", help="GitHub token (default: GITHUB_TOKEN)")
@click.option("--out", "out_dir", type=click.Path(), help="Output directory (default: FOLIO_DATA_DIR)")
@click.pass_obj
def import_github(settings: Settings, username: Optional[str], token: Optional[str], out_dir: Optional[str]):
    """Import GitHub profile and repos to local JSON files."""
    username = username or settings.github_username
    out_path = Path(out_dir) if out_dir else settings.data_dir

    try:
        with GitHubImporter(username, token=token or settings.github_token) as importer:
            console.print(f"[bold blue]Importing[/bold blue] GitHub data for {username}")
            profile_path, repos_path = importer.run(out_path)
    except GitHubImportError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    console.print(Panel(
        f"[green]✓[/green] {profile_path}\n"
        f"[green]✓[/green] {repos_path}",
        title="Import Complete",
        border_style="green",
    ))


@main.command()
@click.pass_obj
def languages(settings: Settings):
    """Show top languages across imported repos."""
    try:
        repos = load_repos(settings.data_dir)
    except NotImported:
        console.print("[yellow]No GitHub data. Run `folio import-github` first.[/yellow]")
        sys.exit(1)

    ranked = top_languages(repos)
    table = Table(title="Top Languages", box=box.SIMPLE)
    table.add_column("Language", style="cyan")
    table.add_column("Repos", justify="right")
    for entry in ranked:
        table.add_row(entry["language"], str(entry["count"]))

    console.print(table)


@main.command()
@click.option("--host", help="Bind address (default: HOST)")
@click.option("--port", "-p", type=int, help="Port (default: PORT)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
@click.pass_obj
def serve(settings: Settings, host: Optional[str], port: Optional[int], reload: bool):
    """Run the portfolio API server."""
    import uvicorn

    host = host or settings.host
    port = port or settings.port
    console.print(f"[bold blue]Portfolio backend running[/bold blue] on http://{host}:{port}")
    uvicorn.run("folio.api.app:app", host=host, port=port, reload=reload)


@main.command()
@click.option("--port", "-p", default=8501, help="Dashboard port")
def dashboard(port: int):
    """Launch the Streamlit dashboard."""
    dashboard_path = Path(__file__).parent.parent / "dashboard" / "app.py"

    if not dashboard_path.exists():
        console.print("[red]Dashboard not found. Create dashboard/app.py first.[/red]")
        return

    console.print(f"[bold blue]Launching dashboard[/bold blue] on port {port}")
    subprocess.run([sys.executable, "-m", "streamlit", "run", str(dashboard_path), "--server.port", str(port)])


if __name__ == "__main__":
    main()
