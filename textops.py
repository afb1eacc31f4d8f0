#!/usr/bin/env python3
"""
textops - Text File Operations

Main entry point for the textops CLI application.
"""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from typing import Optional

from core import AuditLogger, Settings
from modules.text_ops import TextFileOperator


console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

DEMO_CONTENT = "Hello, World!\nThis is a sample text file.\nPython File Operations Demo\n"
DEMO_APPENDED = "Appended line 1\nAppended line 2\n"


def get_operator(settings: Settings) -> TextFileOperator:
    """Get a file operator wired to the configured audit log."""
    return TextFileOperator(
        console=console,
        logger=AuditLogger(log_path=settings.audit_log),
        encoding=settings.encoding,
    )


def report_error(error: Exception) -> None:
    """Print an I/O failure and its traceback to stderr."""
    err_console.print(f"Error occurred: {error}", markup=False, style="red")
    err_console.print_exception()


def read_content(content: Optional[str]) -> str:
    """Use the given content, or standard input when omitted."""
    if content is not None:
        return content
    return click.get_text_stream("stdin").read()


@click.group()
@click.version_option(version="0.1.0", prog_name="textops")
@click.option("--config", "config_path", default="config.yaml", show_default=True,
              help="Path to the YAML configuration file.")
@click.pass_context
def textops(ctx, config_path: str):
    """
    textops - Text File Operations

    Create, read, append, edit, search and replace, count,
    copy and delete plain text files.
    """
    ctx.obj = Settings.load(config_path)


@textops.command()
@click.option("--cleanup", is_flag=True, help="Delete the copy at the end.")
@click.pass_obj
def demo(settings: Settings, cleanup: bool):
    """Run every file operation in sequence on a demo file."""
    ops = get_operator(settings)
    file_name = settings.demo_file

    console.print("=== PYTHON FILE OPERATIONS DEMONSTRATION ===\n", style="bold")

    try:
        console.print("1. CREATING AND WRITING TO FILE")
        ops.create_and_write(file_name, DEMO_CONTENT)

        console.print("\n2. READING FILE CONTENT:")
        ops.read_all(file_name)

        console.print("\n3. APPENDING TO FILE:")
        ops.append(file_name, DEMO_APPENDED)
        ops.read_all(file_name)

        console.print("\n4. MODIFYING SPECIFIC LINES:")
        ops.modify_line(file_name, 1, "This is a MODIFIED sample text file.")
        ops.read_all(file_name)

        console.print("\n5. SEARCH AND REPLACE:")
        ops.search_and_replace(file_name, "Demo", "Demonstration")
        ops.read_all(file_name)

        console.print("\n6. FILE STATISTICS:")
        ops.stats(file_name)

        console.print("\n7. COPYING FILE:")
        copy_name = settings.demo_copy
        ops.copy(file_name, copy_name)
        console.print(f"File copied successfully to: {copy_name}", markup=False)

        if cleanup:
            console.print("\n8. CLEANUP:")
            ops.delete(copy_name)

    except IOError as e:
        report_error(e)
    finally:
        console.print("\n=== FILE OPERATIONS COMPLETED ===", style="bold")


@textops.command()
@click.argument("path")
@click.argument("content", required=False)
@click.pass_obj
def create(settings: Settings, path: str, content: Optional[str]):
    """Create PATH (or truncate it) and write CONTENT to it."""
    try:
        get_operator(settings).create_and_write(path, read_content(content))
    except IOError as e:
        report_error(e)


@textops.command()
@click.argument("path")
@click.pass_obj
def read(settings: Settings, path: str):
    """Show PATH with line numbers."""
    try:
        get_operator(settings).read_all(path)
    except IOError as e:
        report_error(e)


@textops.command()
@click.argument("path")
@click.argument("content", required=False)
@click.pass_obj
def append(settings: Settings, path: str, content: Optional[str]):
    """Append CONTENT to the end of PATH."""
    try:
        get_operator(settings).append(path, read_content(content))
    except IOError as e:
        report_error(e)


@textops.command()
@click.argument("path")
@click.argument("line", type=int)
@click.argument("content")
@click.pass_obj
def modify(settings: Settings, path: str, line: int, content: str):
    """Replace line number LINE of PATH with CONTENT."""
    try:
        get_operator(settings).modify_line(path, line, content)
    except IOError as e:
        report_error(e)


@textops.command()
@click.argument("path")
@click.argument("search")
@click.argument("replacement")
@click.pass_obj
def replace(settings: Settings, path: str, search: str, replacement: str):
    """Replace every occurrence of SEARCH in PATH with REPLACEMENT."""
    try:
        get_operator(settings).search_and_replace(path, search, replacement)
    except IOError as e:
        report_error(e)


@textops.command()
@click.argument("path")
@click.pass_obj
def stats(settings: Settings, path: str):
    """Count lines, words and characters of PATH."""
    try:
        get_operator(settings).stats(path)
    except IOError as e:
        report_error(e)


@textops.command()
@click.argument("src")
@click.argument("dst")
@click.pass_obj
def copy(settings: Settings, src: str, dst: str):
    """Copy SRC to DST, overwriting DST."""
    try:
        get_operator(settings).copy(src, dst)
        console.print(f"File copied successfully to: {dst}", markup=False)
    except IOError as e:
        report_error(e)


@textops.command()
@click.argument("path")
@click.pass_obj
def delete(settings: Settings, path: str):
    """Delete PATH if it exists."""
    try:
        get_operator(settings).delete(path)
    except IOError as e:
        report_error(e)


@textops.command()
@click.option("--limit", default=20, show_default=True, help="Number of entries to show.")
@click.option("--failed", is_flag=True, help="Only show failed operations.")
@click.option("--format", "fmt", type=click.Choice(["table", "json", "csv"]), default="table",
              show_default=True, help="Output format.")
@click.pass_obj
def audit(settings: Settings, limit: int, failed: bool, fmt: str):
    """View the audit log."""
    logger = AuditLogger(log_path=settings.audit_log)

    if fmt != "table":
        click.echo(logger.export(format=fmt, limit=limit), nl=False)
        return

    entries = logger.get_failed(limit=limit) if failed else logger.get_recent(limit=limit)

    if not entries:
        console.print("[dim]No audit entries found.[/dim]")
        return

    table = Table(title="Recent Audit Log")
    table.add_column("Time", style="dim")
    table.add_column("Action")
    table.add_column("Target")
    table.add_column("Status")

    for entry in entries:
        time_str = entry.timestamp.split("T")[1].split(".")[0] if "T" in entry.timestamp else entry.timestamp

        status_str = entry.status
        if entry.status == "executed":
            status_str = f"[green]{entry.status}[/green]"
        elif entry.status == "failed":
            status_str = f"[red]{entry.status}[/red]"

        table.add_row(
            time_str,
            escape(entry.action_description[:50] + "..." if len(entry.action_description) > 50 else entry.action_description),
            escape(entry.target or "—"),
            status_str
        )

    console.print(table)


@textops.command("config")
@click.option("--write", is_flag=True, help="Write the current settings to the config file.")
@click.pass_obj
def config_cmd(settings: Settings, write: bool):
    """Show (or write) the current settings."""
    table = Table(title="Settings")
    table.add_column("Key")
    table.add_column("Value")
    table.add_row("encoding", escape(settings.encoding))
    table.add_row("audit_log", escape(settings.audit_log))
    table.add_row("demo.file", escape(settings.demo_file))
    table.add_row("demo.copy", escape(settings.demo_copy))
    console.print(table)

    if write:
        settings.save()
        console.print(f"[green]Settings written to:[/green] {escape(str(settings.config_path))}")


if __name__ == "__main__":
    textops()
