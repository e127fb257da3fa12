"""Rich console and settings tables for CLI output."""

from pathlib import Path

from rich.console import Console
from rich.table import Table

# Shared console; rendered calendars bypass it and go straight to stdout
console = Console()

# (setting, value, source)
SettingRow = tuple[str, str, str]


def _settings_table(setting_width: int, source_width: int) -> Table:
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("SETTING", style="cyan", min_width=setting_width, no_wrap=True)
    table.add_column("SOURCE", style="dim", min_width=source_width, no_wrap=True)
    table.add_column("VALUE")
    return table


def print_settings(
    title: str, env_file: Path | None, sections: list[tuple[str, list[SettingRow]]]
) -> None:
    """Print a titled block of settings sections with aligned columns."""
    rows = [row for _, section_rows in sections for row in section_rows]
    setting_width = max([len("SETTING")] + [len(row[0]) for row in rows])
    source_width = max([len("SOURCE")] + [len(row[2]) for row in rows])

    console.print()
    console.print("━" * 50)
    console.print(f"[bold]  {title}[/bold]")
    console.print("━" * 50)

    console.print("\n[bold]Config File:[/bold]")
    if env_file:
        console.print(f"  [cyan]{env_file}[/cyan]")
    else:
        console.print("  [dim]Not found (using defaults and environment variables)[/dim]")

    for name, section_rows in sections:
        console.print(f"\n[bold]{name}:[/bold]")
        table = _settings_table(setting_width, source_width)
        for setting, value, source in section_rows:
            table.add_row(setting, source, value)
        console.print(table)

    console.print()
