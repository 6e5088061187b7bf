"""
ghostty_themes/scripting/cli.py

Command-line interface for browsing and applying Ghostty themes.

Usage:
    ghostty-themes list
    ghostty-themes list --search gruvbox
    ghostty-themes show Dracula
    ghostty-themes show --file nord.yaml
    ghostty-themes apply Dracula
    ghostty-themes current
    ghostty-themes status
"""

import sys
import json
import logging
from typing import Optional

import click

from ..errors import GhosttyThemesError, ThemeDirectoryError
from ..ghostty.reload import NullReloader
from .api import ThemesAPI

logger = logging.getLogger(__name__)

# Palette slots shown by name in `show`
ANSI_NAMES = [
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white",
    "bright black", "bright red", "bright green", "bright yellow",
    "bright blue", "bright magenta", "bright cyan", "bright white",
]


def get_api(ctx, no_reload: bool = False) -> ThemesAPI:
    """API for this invocation, built from the global options."""
    if ctx.obj.get("api") is None:
        ctx.obj["api"] = ThemesAPI(
            themes_dir=ctx.obj.get("themes_dir"),
            config_path=ctx.obj.get("config_path"),
            reloader=NullReloader() if no_reload else None,
        )
    return ctx.obj["api"]


def format_table(items: list, columns: list[tuple[str, str, int]]) -> str:
    """
    Format items as a simple table.

    Args:
        items: List of dicts
        columns: List of (key, header, width) tuples
    """
    if not items:
        return "No results."

    header = ""
    separator = ""
    for key, name, width in columns:
        header += f"{name:<{width}} "
        separator += "-" * width + " "

    lines = [header.rstrip(), separator.rstrip()]

    for item in items:
        row = ""
        for key, name, width in columns:
            val = item.get(key)
            if val is None:
                val = ""
            val_str = str(val)[:width - 1]  # Truncate if needed
            row += f"{val_str:<{width}} "
        lines.append(row.rstrip())

    return "\n".join(lines)


def hex_to_rgb(color: str) -> Optional[tuple[int, int, int]]:
    """#rrggbb (or rrggbb) to an RGB tuple, None if not a hex color."""
    value = color.strip().lstrip("#")
    if len(value) != 6:
        return None
    try:
        return tuple(int(value[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return None


def swatch(color: str) -> str:
    rgb = hex_to_rgb(color)
    if rgb is None:
        return "  "
    return click.style("  ", bg=rgb)


def _fail(message: str) -> None:
    click.echo(message, err=True)
    sys.exit(1)


@click.group()
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--themes-dir", type=click.Path(), default=None, help="Theme directory to use")
@click.option("--config", "config_path", type=click.Path(), default=None, help="Ghostty config file")
@click.pass_context
def cli(ctx, output_json, debug, themes_dir, config_path):
    """Browse installed Ghostty themes and apply one."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["json"] = output_json
    ctx.obj["themes_dir"] = themes_dir
    ctx.obj["config_path"] = config_path


@cli.command("list")
@click.option("-s", "--search", "query", default=None, help="Filter by name substring")
@click.option("-p", "--pattern", default=None, help="Filter by glob pattern (e.g., 'Gruvbox*')")
@click.pass_context
def list_themes(ctx, query, pattern):
    """List installed themes."""
    api = get_api(ctx)
    try:
        themes = api.search(query) if query else api.themes()
    except ThemeDirectoryError as e:
        _fail(f"Failed to load themes: {e}")

    if pattern:
        names = {t.name for t in api.themes(pattern)}
        themes = [t for t in themes if t.name in names]

    if ctx.obj["json"]:
        click.echo(json.dumps([t.to_dict() for t in themes], indent=2))
        return

    current = api.current_theme()
    rows = [
        {
            "active": "*" if t.name == current else "",
            "name": t.name,
            "background": t.colors.background,
            "foreground": t.colors.foreground,
        }
        for t in themes
    ]
    columns = [
        ("active", "", 2),
        ("name", "NAME", 36),
        ("background", "BACKGROUND", 12),
        ("foreground", "FOREGROUND", 12),
    ]
    click.echo(format_table(rows, columns))
    click.echo(f"\n{len(themes)} theme(s)")


@cli.command("show")
@click.argument("name", required=False)
@click.option("-f", "--file", "path", type=click.Path(dir_okay=False), default=None,
              help="Show a theme exported with `export` instead")
@click.pass_context
def show_theme(ctx, name, path):
    """Show the colors of a theme."""
    if not name and not path:
        raise click.UsageError("Give a theme NAME or --file")

    api = get_api(ctx)
    try:
        theme = api.load_exported(path) if path else api.require_theme(name)
    except GhosttyThemesError as e:
        _fail(str(e))

    if ctx.obj["json"]:
        click.echo(json.dumps(theme.to_dict(), indent=2))
        return

    colors = theme.colors
    click.echo(f"Name:       {theme.name}")
    click.echo(f"Background: {swatch(colors.background)} {colors.background}")
    click.echo(f"Foreground: {swatch(colors.foreground)} {colors.foreground}")
    click.echo(f"Cursor:     {swatch(colors.cursor)} {colors.cursor}")
    click.echo("Palette:")
    for index, color in enumerate(colors.palette):
        click.echo(f"  {index:>2} {swatch(color)} {color:<10} {ANSI_NAMES[index]}")


@cli.command("apply")
@click.argument("name")
@click.option("--no-reload", is_flag=True, help="Only edit the config, do not reload Ghostty")
@click.pass_context
def apply_theme(ctx, name, no_reload):
    """Select a theme in the Ghostty config and reload Ghostty."""
    api = get_api(ctx, no_reload=no_reload)

    try:
        if api.theme(name) is None:
            logger.warning(f"Theme '{name}' is not in {api.themes_dir}, applying anyway")
    except ThemeDirectoryError as e:
        logger.warning(f"Could not check theme list: {e}")

    try:
        result = api.apply(name)
    except GhosttyThemesError as e:
        _fail(f"Failed to apply theme: {e}")

    if ctx.obj["json"]:
        click.echo(json.dumps({
            "theme": result.theme,
            "config_path": str(result.config_path),
            "created": result.created,
            "reloaded": result.reloaded,
        }, indent=2))
        return

    click.echo(f"Theme applied: {result.theme} is now active")
    if not result.reloaded:
        click.echo("Ghostty was not reloaded; the theme takes effect on next start or reload.")


@cli.command("current")
@click.pass_context
def current_theme(ctx):
    """Show the theme selected in the Ghostty config."""
    api = get_api(ctx)
    name = api.current_theme()

    if ctx.obj["json"]:
        click.echo(json.dumps({"theme": name}))
    elif name:
        click.echo(name)
    else:
        click.echo(f"No theme set in {api.config_path}")


@cli.command("export")
@click.argument("name")
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None, help="Write YAML to file")
@click.pass_context
def export_theme(ctx, name, output):
    """Export a theme's colors as YAML."""
    api = get_api(ctx)
    try:
        theme = api.require_theme(name)
    except GhosttyThemesError as e:
        _fail(str(e))

    if output:
        try:
            theme.save(output)
        except OSError as e:
            _fail(f"Failed to write {output}: {e}")
        click.echo(f"Exported {theme.name} to {output}")
    else:
        click.echo(theme.to_yaml(), nl=False)


@cli.command("paths")
@click.pass_context
def show_paths(ctx):
    """Show where themes and config are looked for."""
    api = get_api(ctx)
    paths = api.paths()

    if ctx.obj["json"]:
        click.echo(json.dumps(paths, indent=2))
        return

    click.echo("Theme directory candidates:")
    for candidate in paths["candidates"]:
        marker = "*" if candidate == paths["themes_dir"] else " "
        click.echo(f"  {marker} {candidate}")
    click.echo(f"Themes dir:  {paths['themes_dir']}")
    click.echo(f"Config file: {paths['config_path']}")
    click.echo(f"Settings:    {paths['settings_path']}")


@cli.command("status")
@click.pass_context
def show_status(ctx):
    """Show status summary."""
    api = get_api(ctx)
    try:
        status = api.status()
    except ThemeDirectoryError as e:
        _fail(f"Failed to load themes: {e}")

    if ctx.obj["json"]:
        click.echo(json.dumps(status, indent=2))
    else:
        click.echo(f"Themes dir:    {status['themes_dir']}")
        click.echo(f"Themes:        {status['themes']}")
        click.echo(f"Config file:   {status['config_path']}")
        click.echo(f"Current theme: {status['current_theme'] or '(none)'}")
        if status['recent_themes']:
            click.echo(f"Recent:        {', '.join(status['recent_themes'])}")


def main():
    """Entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
