"""WeTransfer CLI - Main commands."""
import asyncio
import tempfile
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.table import Table

app = typer.Typer(
    name="wetransfer",
    help="WeTransfer upload CLI",
    add_completion=False
)
board_app = typer.Typer(help="Manage boards")
app.add_typer(board_app, name="board")
console = Console()

API_KEY_OPTION = typer.Option(..., "--api-key", "-k", envvar="WETRANSFER_API_KEY", help="API key")
USER_OPTION = typer.Option(..., "--user", "-u", envvar="WETRANSFER_USER", help="User identifier")


# Token path: ~/.config/wetransferpy/token.session
def get_config_dir() -> Path:
    config_dir = Path.home() / ".config" / "wetransferpy"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_session_path() -> Path:
    return get_config_dir() / "token.session"


def run_async(coro):
    """Run async function."""
    return asyncio.run(coro)


def parse_link(value: str):
    """Parse 'URL' or 'URL TITLE'; URLs never contain unescaped whitespace."""
    from wetransferpy import LinkRequest

    fields = value.strip().split(None, 1)
    if not fields:
        raise typer.BadParameter(f"Invalid link: {value!r}")
    title = fields[1].strip() if len(fields) > 1 else None
    return LinkRequest(url=fields[0], title=title)


def make_client(api_key: str, chunk_directory: Path):
    from wetransferpy import WeTransferClient

    try:
        return WeTransferClient(api_key, chunk_directory, session=get_session_path())
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


async def run_upload(client, description: str, start):
    """Run an upload under a rich progress bar and print its outcome."""
    from wetransferpy import CallbackProgressSink

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console
    ) as progress:
        task = progress.add_task(description, total=100)

        def on_progress(report):
            progress.update(task, completed=report.percentage, description=report.message)

        try:
            outcome = await start(CallbackProgressSink(on_progress))
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    if not outcome.success:
        console.print(f"[red]{outcome.result.value} at {outcome.stage.label}:[/red] {outcome.message}")
        raise typer.Exit(1)

    console.print(f"[green]{outcome.message}[/green]")
    if outcome.download_url:
        console.print(f"Download: {outcome.download_url}")


@app.command()
def upload(
    paths: List[Path] = typer.Argument(..., help="Local files to upload"),
    name: str = typer.Option(..., "--name", "-n", help="Transfer message"),
    user: str = USER_OPTION,
    api_key: str = API_KEY_OPTION,
):
    """Upload files as a new transfer."""

    async def do_upload():
        with tempfile.TemporaryDirectory(prefix="wetransfer-") as chunk_dir:
            async with make_client(api_key, Path(chunk_dir)) as wt:
                await run_upload(
                    wt,
                    f"Uploading {len(paths)} file(s)",
                    lambda sink: wt.upload_files(paths, name, user, sink)
                )

    run_async(do_upload())


@app.command()
def logout():
    """Delete the persisted token."""
    from wetransferpy import SQLiteTokenStore

    session_file = get_session_path()
    if not session_file.exists():
        console.print("[yellow]No persisted token[/yellow]")
        return

    store = SQLiteTokenStore(session_file)
    had_token = store.load() is not None
    store.delete_file()
    if had_token:
        console.print("[green]Token cleared[/green]")
    else:
        console.print("[yellow]No persisted token[/yellow]")


@board_app.command("create")
def board_create(
    name: str = typer.Argument(..., help="Board name"),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="Board description"),
    user: str = USER_OPTION,
    api_key: str = API_KEY_OPTION,
):
    """Create an empty board."""

    async def do_create():
        async with make_client(api_key, get_config_dir()) as wt:
            response = await wt.create_board(name, user, description)

        if not response.success:
            console.print(f"[red]Board could not be created: {response.message}[/red]")
            raise typer.Exit(1)

        console.print(f"[green]Board created:[/green] {response.name}")
        console.print(f"ID: {response.id}")
        if response.board_url:
            console.print(f"URL: {response.board_url}")

    run_async(do_create())


@board_app.command("upload")
def board_upload(
    board_id: str = typer.Argument(..., help="Board ID"),
    paths: List[Path] = typer.Argument(..., help="Local files to upload"),
    user: str = USER_OPTION,
    api_key: str = API_KEY_OPTION,
):
    """Upload files to an existing board."""

    async def do_upload():
        with tempfile.TemporaryDirectory(prefix="wetransfer-") as chunk_dir:
            async with make_client(api_key, Path(chunk_dir)) as wt:
                await run_upload(
                    wt,
                    f"Uploading {len(paths)} file(s) to board",
                    lambda sink: wt.upload_files_to_board(board_id, paths, user, sink)
                )

    run_async(do_upload())


@board_app.command("links")
def board_links(
    board_id: str = typer.Argument(..., help="Board ID"),
    links: List[str] = typer.Argument(..., help="Links as 'URL' or 'URL TITLE'"),
    user: str = USER_OPTION,
    api_key: str = API_KEY_OPTION,
):
    """Add web links to a board."""
    requests = [parse_link(link) for link in links]

    async def do_links():
        async with make_client(api_key, get_config_dir()) as wt:
            response = await wt.add_links(board_id, requests, user)

        if not response.success:
            console.print(f"[red]Links could not be added: {response.message}[/red]")
            raise typer.Exit(1)

        for item in response.links:
            status = "[green]added[/green]" if item.success else "[red]failed[/red]"
            console.print(f"{item.url} {status}")

    run_async(do_links())


@board_app.command("info")
def board_info(
    board_id: str = typer.Argument(..., help="Board ID"),
    user: str = USER_OPTION,
    api_key: str = API_KEY_OPTION,
):
    """Show a board and its items."""

    async def show_info():
        async with make_client(api_key, get_config_dir()) as wt:
            response = await wt.get_board_info(board_id, user)

        if not response.success:
            console.print(f"[red]Board not found: {response.message}[/red]")
            raise typer.Exit(1)

        console.print(f"[bold]Name:[/bold] {response.name}")
        console.print(f"[bold]ID:[/bold] {response.id}")
        if response.description:
            console.print(f"[bold]Description:[/bold] {response.description}")
        console.print(f"[bold]State:[/bold] {response.state}")
        if response.board_url:
            console.print(f"[bold]URL:[/bold] {response.board_url}")

        if response.items:
            table = Table(title="Items")
            table.add_column("Type")
            table.add_column("Name")
            table.add_column("Size", justify="right")
            for item in response.items:
                size = item.get('size')
                table.add_row(
                    str(item.get('type', '')),
                    str(item.get('name') or item.get('url') or ''),
                    f"{size:,}" if isinstance(size, int) else ''
                )
            console.print(table)

    run_async(show_info())


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
