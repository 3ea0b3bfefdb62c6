"""
Defines the command-line interface for the mod cache using Typer.
"""

import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from modfinder_cache import __version__
from modfinder_cache.core.mod_cache import CacheOutcome, ModCache
from modfinder_cache.exceptions import ModCacheError
from modfinder_cache.models.identity import ModId, ModKind
from modfinder_cache.storage.config_manager import ConfigManager

from .formatters import format_error_with_suggestions, print_cached_mods, print_config

console = Console()

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("modfinder_cache")

app = typer.Typer(
    name="modfinder-cache",
    help=(
        "Move uninstalled mods into a local cache and restore them later. Use"
        " 'modfinder-cache <command> --help' for more info."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "modfinder"


CONFIG_DIR = get_config_dir()
CONFIG_FILE = CONFIG_DIR / "config.ini"


def _open_cache(ctx: typer.Context) -> ModCache:
    config = ConfigManager(CONFIG_FILE).load_config(ctx.obj)
    return ModCache.from_config(config)


def _fail(error: Exception) -> typer.Exit:
    console.print(format_error_with_suggestions(error))
    return typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
    show_config: bool = typer.Option(
        False, "--show-config", help="Display the current configuration."
    ),
    install_root: Path | None = typer.Option(
        None,
        "--install-root",
        help="Override the configured install root for this run.",
    ),
    app_data: Path | None = typer.Option(
        None,
        "--app-data",
        help="Override the configured app data root for this run.",
    ),
):
    """ModFinder mod cache"""
    if version:
        console.print(
            f"[bold]modfinder-cache[/bold] version [cyan]{__version__}[/cyan]"
        )
        raise typer.Exit()

    log_level = "WARNING"
    if verbose == 1:
        log_level = "INFO"
    elif verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("modfinder_cache").setLevel(log_level)

    ctx.obj = {
        key: value
        for key, value in {
            "install_root": install_root,
            "app_data_root": app_data,
        }.items()
        if value is not None
    }

    if show_config:
        try:
            config = ConfigManager(CONFIG_FILE).load_config(ctx.obj)
        except ModCacheError as e:
            raise _fail(e) from e
        print_config(CONFIG_FILE, config, console)
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command()
def init(
    install_root: Path = typer.Option(
        ...,
        "--install-root",
        "-i",
        help="Directory UMM mods are installed into.",
    ),
    app_data: Path | None = typer.Option(
        None,
        "--app-data",
        help="Directory holding the CachedMods folder (default: user data dir).",
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing configuration."
    ),
):
    """Create the configuration file."""
    if (
        CONFIG_FILE.exists()
        and not force
        and not typer.confirm("Configuration file already exists. Overwrite it?")
    ):
        raise typer.Abort()

    settings = {"install_root": install_root}
    if app_data is not None:
        settings["app_data_root"] = app_data

    try:
        ConfigManager(CONFIG_FILE).save_new_config(settings)
    except ModCacheError as e:
        raise _fail(e) from e
    console.print(
        f"[bold green]✓ Configuration saved to '{CONFIG_FILE}'[/bold green]"
    )


@app.command(name="list")
def list_command(ctx: typer.Context):
    """Show the mods currently held in the cache."""
    try:
        cache = _open_cache(ctx)
    except ModCacheError as e:
        raise _fail(e) from e
    print_cached_mods(cache.cached_mods(), console)


@app.command()
def uninstall(
    ctx: typer.Context,
    mod_dir: Path = typer.Argument(..., help="Installed mod directory to cache."),
    mod_id: str | None = typer.Option(
        None, "--id", help="Mod id (defaults to the directory name)."
    ),
    kind: ModKind = typer.Option(ModKind.UMM, "--kind", "-k", help="Mod kind."),
):
    """Uninstall a mod by moving it into the cache."""
    mod_dir = mod_dir.resolve()
    identity = ModId(kind=kind, id=mod_id or mod_dir.name or "unnamed")
    try:
        cache = _open_cache(ctx)
        outcome = cache.cache_out(mod_dir, identity)
    except (ModCacheError, OSError) as e:
        raise _fail(e) from e

    if outcome is CacheOutcome.ALREADY_CACHED:
        console.print(
            f"[yellow]⚠️  '{mod_dir.name}' is already cached; nothing was moved."
            "[/yellow]"
        )
    else:
        console.print(f"[green]✓ Cached {identity.id}.[/green]")


@app.command()
def restore(
    ctx: typer.Context,
    mod_id: str = typer.Argument(..., help="Id of the cached mod."),
    kind: ModKind = typer.Option(ModKind.UMM, "--kind", "-k", help="Mod kind."),
):
    """Restore a cached mod into the install root."""
    identity = ModId(kind=kind, id=mod_id)
    try:
        cache = _open_cache(ctx)
        restored = cache.restore_in(identity)
    except (ModCacheError, OSError) as e:
        raise _fail(e) from e

    if not restored:
        console.print(f"[red]✗ {identity.id} is not in the cache.[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]✓ Restored {identity.id}.[/green]")
