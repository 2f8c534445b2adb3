"""Command-line entry point."""

from __future__ import annotations

import sys
from dataclasses import dataclass

import click

from .config import Config
from .downloader import Downloader
from .errors import InvalidUrl, RytError, YtDlpNotFound
from .ui import Format, MainAction, UserInterface
from .utils import is_valid_url

VERSION = "0.1.0"


@dataclass
class _Session:
    ui: UserInterface
    downloader: Downloader
    url: str | None


def handle_download(url: str | None, ui: UserInterface, downloader: Downloader) -> None:
    """Validate a URL, ask for download options and run the download."""
    if url is None:
        url = ui.get_url()

    if not is_valid_url(url):
        ui.error("Invalid URL format or unsupported platform")
        ui.info("Supported platforms: YouTube, Vimeo, SoundCloud, Twitch, TikTok, and more")
        raise InvalidUrl()

    content_type = ui.get_content_type()
    media_format = ui.get_format()
    quality = ui.get_quality() if media_format is Format.VIDEO else None
    downloader.download(url, content_type, media_format, quality)


def handle_config(ui: UserInterface, config: Config) -> None:
    """Describe the configuration features."""
    ui.info("Configuration management coming soon!")
    ui.info("Current features planned:")
    ui.info("  • Set default download directory")
    ui.info("  • Configure default quality settings")
    ui.info("  • Set custom yt-dlp path")
    ui.info("  • Manage concurrent downloads")


def handle_history(ui: UserInterface, config: Config) -> None:
    """Describe the download history features."""
    ui.info("Download history coming soon!")
    ui.info("Planned features:")
    ui.info("  • View past downloads")
    ui.info("  • Re-download previous URLs")
    ui.info("  • Export download history")


def handle_interactive(ui: UserInterface, downloader: Downloader) -> None:
    """Run the menu loop until the user exits."""
    ui.welcome()

    while True:
        action = ui.get_main_action()
        if action is MainAction.DOWNLOAD:
            url = ui.get_url()
            try:
                handle_download(url, ui, downloader)
            except (RytError, OSError) as exc:
                ui.error(f"Download failed: {exc}")
                continue
        elif action is MainAction.CONFIG:
            handle_config(ui, downloader.config)
        elif action is MainAction.HISTORY:
            handle_history(ui, downloader.config)
        else:
            break

        if not ui.continue_prompt():
            break

    ui.goodbye()


@click.group(
    name="ryt",
    invoke_without_command=True,
    help="A user-friendly media downloader built on yt-dlp",
)
@click.option("-u", "--url", default=None, help="URL to download")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.version_option(version=VERSION, prog_name="ryt")
@click.pass_context
def _cli(ctx: click.Context, url: str | None, verbose: bool) -> None:
    config = Config.load_or_create()
    ui = UserInterface()
    downloader = Downloader(config)

    try:
        downloader.check_ytdlp()
    except YtDlpNotFound as exc:
        ui.error(f"yt-dlp check failed: {exc}")
        ui.info("Please install yt-dlp and make sure it is on your PATH")
        ctx.exit(0)

    ctx.obj = _Session(ui=ui, downloader=downloader, url=url)

    if ctx.invoked_subcommand is None:
        if url is not None:
            handle_download(url, ui, downloader)
        else:
            handle_interactive(ui, downloader)


@_cli.command("download", help="Download media from URL")
@click.argument("url", required=False)
@click.pass_obj
def _download_command(session: _Session, url: str | None) -> None:
    handle_download(url if url is not None else session.url, session.ui, session.downloader)


@_cli.command("config", help="Manage configuration")
@click.pass_obj
def _config_command(session: _Session) -> None:
    handle_config(session.ui, session.downloader.config)


@_cli.command("history", help="View download history")
@click.pass_obj
def _history_command(session: _Session) -> None:
    handle_history(session.ui, session.downloader.config)


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    try:
        result = _cli.main(args=argv, prog_name="ryt", standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except (RytError, OSError, EOFError) as exc:
        click.echo(f"Error: {exc}", err=True)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    sys.exit(main())