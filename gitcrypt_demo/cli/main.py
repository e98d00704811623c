# gitcrypt_demo/cli/main.py

import functools
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gitcrypt_demo.core.config_manager import AppSettings, load_settings
from gitcrypt_demo.core.content_resolver import FileContentResolver, LookupStatus
from gitcrypt_demo.core.resource_store import DirectoryResourceStore

console = Console()
logger = logging.getLogger(__name__)

STATUS_STYLES = {
    LookupStatus.TEXT: "[green]plaintext[/green]",
    LookupStatus.UNDECODABLE: "[yellow]encrypted / not text[/yellow]",
    LookupStatus.MISSING: "[red]missing[/red]",
}


def settings_options(command):
    """Adds the options shared by every command and turns them into an AppSettings."""

    @click.option('--primary', default=None, help="The preferred (secret) file. [default: Secret.txt]")
    @click.option('--fallback', default=None, help="The plaintext stand-in file. [default: Unsecret.txt]")
    @click.option('--resources',
                  type=click.Path(exists=True, file_okay=False, dir_okay=True, readable=True, path_type=Path),
                  default=None, help="Directory holding the bundled files.")
    @click.option('--config', type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
                  default=None, help="Path to a custom settings.json.")
    @functools.wraps(command)
    def wrapper(primary, fallback, resources, config, **kwargs):
        settings = load_settings(config).with_overrides(
            primary_file=primary, fallback_file=fallback, resources_dir=resources,
        )
        return command(settings=settings, **kwargs)

    return wrapper


def build_resolver(settings: AppSettings) -> FileContentResolver:
    return FileContentResolver(DirectoryResourceStore(settings.resources_dir), encoding=settings.encoding)


@click.group(context_settings=dict(help_option_names=['-h', '--help']))
@click.version_option(version="1.0", prog_name="GitCrypt Demo")
def gcd():
    """
    GitCrypt Demo - shows whether the bundled secret file is encrypted.

    Use `[COMMAND] --help` for more information on a specific command.
    """
    pass


@gcd.command()
@settings_options
def show(settings: AppSettings):
    """Prints the line the GUI would display."""
    try:
        payload = build_resolver(settings).resolve(settings.primary_file, settings.fallback_file)
    except Exception as e:
        console.print(f"[bold red]An unexpected error occurred: {e}[/bold red]")
        logger.error("CLI show command failed.", exc_info=True)
        sys.exit(1)
    console.print(payload, markup=False, highlight=False, soft_wrap=True)


@gcd.command()
@settings_options
def inspect(settings: AppSettings):
    """Reports the state of the primary and fallback files, then the resolved line."""
    try:
        resolver = build_resolver(settings)
        lookups = [
            ("Primary", resolver.read_first_line(settings.primary_file)),
            ("Fallback", resolver.read_first_line(settings.fallback_file)),
        ]
        payload = resolver.resolve(settings.primary_file, settings.fallback_file)
    except Exception as e:
        console.print(f"[bold red]An unexpected error occurred: {e}[/bold red]")
        logger.error("CLI inspect command failed.", exc_info=True)
        sys.exit(1)

    console.print(f"Resources: [bright_magenta]{escape(str(settings.resources_dir))}[/bright_magenta]", soft_wrap=True)

    table = Table(title="Bundled Files", style="cyan", title_style="bold magenta")
    table.add_column("Role", style="bold")
    table.add_column("File", style="green", no_wrap=True)
    table.add_column("Status")
    table.add_column("First Line / Reason")
    for role, lookup in lookups:
        detail = lookup.line if lookup.has_text else lookup.reason
        # File contents and names are user data, never markup.
        table.add_row(role, escape(lookup.filename), STATUS_STYLES[lookup.status], escape(detail))
    console.print(table)

    console.print("[bold]Displayed:[/bold]", end=" ")
    console.print(payload, markup=False, highlight=False, soft_wrap=True)
