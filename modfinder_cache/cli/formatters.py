"""
Functions for formatting and displaying data in the console using Rich.
"""

from pathlib import Path

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from modfinder_cache.models.config import CacheConfig
from modfinder_cache.models.manifest import CachedMod
from modfinder_cache.utils.formatting import directory_size, format_size


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "UnsupportedKindError": [
            "• Only UMM mods can be moved into the local cache.",
            "• Uninstall other mod kinds through the game's own mod manager.",
        ],
        "InvalidModDirectoryError": [
            "• Pass the mod's own folder, e.g. `<install root>/ModA`.",
            "• The cache directory and its parents cannot be uninstalled.",
        ],
        "ManifestSaveError": [
            "• Check that the cache directory is writable.",
            "• The mod files were moved; run `modfinder-cache list` to verify.",
        ],
        "ConfigurationError": [
            "• Run `modfinder-cache init --install-root <PATH>` to create a config.",
            "• Use `modfinder-cache --show-config` to inspect the current values.",
        ],
        "FileExistsError": [
            "• A directory with the same name already exists at the destination.",
            "• Remove or rename it, then try again.",
        ],
        "FileNotFoundError": [
            "• The mod directory could not be found.",
            "• Check the path and that the mod is still installed.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    suggestion_text = Text("\n".join(suggestions))

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(suggestion_text)

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_cached_mods(mods: list[CachedMod], console: Console | None = None) -> None:
    """Prints a table of the mods currently held in the cache."""
    console = console or Console()
    if not mods:
        console.print("[dim]The mod cache is empty.[/dim]")
        return

    table = Table(title="Cached Mods", box=box.ROUNDED, show_lines=False)
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Id", style="bold")
    table.add_column("Size", justify="right", style="green")
    table.add_column("Directory", style="dim")

    total = 0
    for mod in mods:
        size = directory_size(mod.dir)
        total += size
        table.add_row(
            mod.identity.kind.value, mod.identity.id, format_size(size), str(mod.dir)
        )

    console.print(table)
    console.print(f"[dim]{len(mods)} cached mod(s), {format_size(total)} total.[/dim]")


def print_config(
    config_path: Path, config: CacheConfig, console: Console | None = None
) -> None:
    """Displays the current configuration in a formatted panel."""
    console = console or Console()
    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan", no_wrap=True)
    table.add_column()
    table.add_row("Config file", str(config_path))
    table.add_row("App data root", str(config.app_data_root))
    table.add_row("Install root", str(config.install_root))
    table.add_row("Cache directory", str(config.cache_dir))
    table.add_row("Manifest", str(config.manifest_file))
    console.print(
        Panel(
            table,
            title="[bold]Configuration[/bold]",
            border_style="blue",
            expand=False,
        )
    )
