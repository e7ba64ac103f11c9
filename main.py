#!/usr/bin/env python3
"""
Asana Backup Agent - Main Entry Point
"""
import sys
import asyncio
import click
from rich.console import Console
from rich.table import Table

console = Console()


def check_port_available(port: int, host: str = '0.0.0.0') -> bool:
    """Return True if ``host:port`` can be bound."""
    import socket

    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        return True
    except OSError:
        return False
    finally:
        sock.close()


def print_summary(summary) -> None:
    """Render a BackupSummary as a table."""
    table = Table(title=f"Backup {summary.timestamp}")
    table.add_column("Project")
    table.add_column("Status")
    table.add_column("Tasks", justify="right")
    table.add_column("Spreadsheet / Error")

    for result in summary.results:
        if result.status == "success":
            table.add_row(
                result.project or "",
                "[green]success[/green]",
                str(result.tasks_count),
                result.spreadsheet_id or ""
            )
        else:
            table.add_row(result.project or "", "[red]failed[/red]", "", result.error or "")

    console.print(table)
    console.print(
        f"Total: {summary.total_projects}  "
        f"[green]Successful: {summary.successful}[/green]  "
        f"[red]Failed: {summary.failed}[/red]"
    )


@click.group()
def cli():
    """Asana Backup Agent"""


@cli.command()
@click.option('--port', default=None, type=int, help='Port to run server on (default: PORT or 3000)')
@click.option('--host', default=None, help='Host to bind to (default: HOST or 0.0.0.0)')
@click.option('--reload', is_flag=True, help='Enable auto-reload')
def serve(port, host, reload: bool):
    """
    Start the HTTP API (POST /backup-asana, GET /health, GET /test)
    """
    import uvicorn
    from src.utils.config import load_config

    config = load_config()
    port = port or config.server.port
    host = host or config.server.host

    if not check_port_available(port, host):
        console.print(f"[bold red]Port {port} is already in use[/bold red]")
        console.print(f"  Use a different port: [bold]python main.py serve --port {port + 1}[/bold]")
        sys.exit(1)

    console.print("[bold blue]Starting Asana Backup Agent API[/bold blue]")
    console.print(f"Server: http://{host}:{port}")
    console.print(f"Docs: http://{host}:{port}/docs")
    console.print("[bold]Press Ctrl+C to stop[/bold]\n")

    uvicorn.run(
        "api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info"
    )


@cli.command()
@click.option('--workspace', default=None, help='Asana workspace ID (default: ASANA_WORKSPACE_ID)')
@click.option('--folder', default=None, help='Root Drive folder ID (default: GOOGLE_DRIVE_FOLDER_ID)')
def backup(workspace, folder):
    """
    Run one backup now and print the summary
    """
    from src.utils.config import load_config
    from src.utils.logger import configure_logging
    from src.services.backup import BackupService

    config = load_config()
    configure_logging(config.logging.level)

    async def _run():
        service = BackupService.from_config(config)
        try:
            return await service.run_backup(workspace_id=workspace, root_folder_id=folder)
        finally:
            await service.close()

    try:
        summary = asyncio.run(_run())
    except Exception as e:
        console.print(f"[bold red]Backup failed: {e}[/bold red]")
        sys.exit(1)

    print_summary(summary)
    if summary.failed:
        sys.exit(1)


if __name__ == "__main__":
    cli()
