"""CLI interface for links-kit.

Commands:
    init       - Write a sample links configuration
    render     - Preview the configured links as text
    open       - Open a configured link by its title path
    platforms  - List the supported social platforms
"""

import sys
from pathlib import Path

import click

from .config import (
    CONFIG_FILE,
    SAMPLE_CONFIG,
    build_sections,
    config_exists,
    load_config,
    make_factory,
    save_config,
)
from .logging_config import setup_logging
from .platforms import CATALOG, SocialPlatform
from .registry import Registry
from .render import (
    LayoutMode,
    default_opener,
    find_button,
    format_rendering,
    render_registry,
)
from .sections import SectionBuilder


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--config", type=click.Path(), default=None, help="Config file path")
@click.pass_context
def main(ctx, verbose, config):
    """Links Kit: help, social and app links for your settings screen."""
    setup_logging(debug=verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config) if config else CONFIG_FILE


def _load_registry(config_path: Path) -> Registry:
    """Load the config file and configure a fresh registry from it."""
    if not config_exists(config_path):
        click.echo("Error: No config found. Run 'links-kit init' first.", err=True)
        sys.exit(1)

    try:
        config = load_config(config_path)
        registry = Registry()
        builder = SectionBuilder(make_factory(config, registry=registry))
        registry.configure(config.publisher_token, build_sections(config, builder))
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    return registry


@main.command()
@click.option("--force", is_flag=True, help="Overwrite an existing config")
@click.pass_context
def init(ctx, force):
    """Write a sample configuration to edit."""
    config_path = ctx.obj["config_path"]

    if config_exists(config_path) and not force:
        click.echo(f"Error: {config_path} already exists. Use --force to overwrite.", err=True)
        sys.exit(1)

    save_config(SAMPLE_CONFIG, config_path)
    click.echo(f"Sample config saved to {config_path}")
    click.echo("Run 'links-kit render' to preview it.")


@main.command()
@click.option(
    "--style",
    type=click.Choice([m.value for m in LayoutMode]),
    default=LayoutMode.SECTIONED.value,
    show_default=True,
    help="'sections' for settings lists, 'groups' for command menus",
)
@click.option("--urls", is_flag=True, help="Show each link's URL")
@click.pass_context
def render(ctx, style, urls):
    """Preview the configured links as an indented tree."""
    registry = _load_registry(ctx.obj["config_path"])
    nodes = render_registry(LayoutMode(style), registry=registry)

    if not nodes:
        click.echo("No links configured.")
        return

    click.echo(format_rendering(nodes, show_urls=urls))


@main.command("open")
@click.argument("titles", nargs=-1, required=True)
@click.pass_context
def open_link(ctx, titles):
    """Open a link, naming the menus leading to it.

    Example: links-kit open "Follow the App" "App on Threads"
    """
    registry = _load_registry(ctx.obj["config_path"])
    nodes = render_registry(LayoutMode.SECTIONED, opener=default_opener, registry=registry)

    button = find_button(nodes, list(titles))
    if button is None:
        click.echo(f"Error: No link found at {' > '.join(titles)}", err=True)
        sys.exit(1)

    click.echo(f"Opening {button.url}")
    button.activate()


@main.command()
@click.option("--handle", default="example", show_default=True, help="Handle for sample URLs")
def platforms(handle):
    """List the supported social platforms."""
    for platform in [*CATALOG.values(), SocialPlatform.mastodon("mastodon.social")]:
        name, icon, url = platform.describe(handle)
        click.echo(f"{str(platform):<26} {name:<10} {icon:<50} {url}")
