# gitcrypt_demo/main.py

import click

from gitcrypt_demo.cli.main import gcd
from gitcrypt_demo.utils.logger import setup_logging


@click.group()
@click.option('-v', '--verbose', is_flag=True, help="Show debug messages on the console.")
def main(verbose):
    """
    GitCrypt Demo: shows the first line of a bundled secret file, or a
    plaintext stand-in when the secret is still encrypted.

    Launch 'gui' for the window, 'preview' for the preview harness,
    or 'cli' for the command-line tools.
    """
    # Configured once here, so 'gui' and 'cli' share the same handlers.
    setup_logging(verbose=verbose)


@click.command()
@click.option('--config', type=click.Path(exists=True, file_okay=True, dir_okay=False), default=None,
              help="Path to a custom settings.json.")
def gui(config):
    """Launches the graphical user interface."""
    # PySide6 is only imported when a window is actually needed.
    from gitcrypt_demo.core.config_manager import load_settings
    from gitcrypt_demo.gui.main_window import run_gui
    run_gui(load_settings(config))


@click.command()
def preview():
    """Shows the view in preview style, with Unsecret.txt as both files."""
    from gitcrypt_demo.core.config_manager import AppSettings
    from gitcrypt_demo.gui.main_window import run_gui
    run_gui(AppSettings(primary_file="Unsecret.txt", fallback_file="Unsecret.txt", style="preview"))


main.add_command(gui)
main.add_command(preview)
main.add_command(gcd, name='cli')

if __name__ == '__main__':
    main()
