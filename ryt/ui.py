"""Interactive terminal prompts and messages."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO

import click


class ContentType(Enum):
    SINGLE = "single"
    PLAYLIST = "playlist"


class Format(Enum):
    VIDEO = "video"
    AUDIO = "audio"


class Quality(Enum):
    P480 = "480"
    P720 = "720"
    P1080 = "1080"
    P1440 = "1440"
    P2160 = "2160"
    BEST = "best"

    def to_height(self) -> str:
        """Return the maximum height yt-dlp should select, or "best"."""
        return self.value


class MainAction(Enum):
    DOWNLOAD = "download"
    CONFIG = "config"
    HISTORY = "history"
    EXIT = "exit"


_MAIN_OPTIONS = [
    ("📥 Download media", MainAction.DOWNLOAD),
    ("⚙️  Configure settings", MainAction.CONFIG),
    ("📜 View history", MainAction.HISTORY),
    ("🚪 Exit", MainAction.EXIT),
]
_CONTENT_OPTIONS = [
    ("Single video/audio", ContentType.SINGLE),
    ("Entire playlist", ContentType.PLAYLIST),
]
_FORMAT_OPTIONS = [
    ("🎬 Video (with audio)", Format.VIDEO),
    ("🎵 Audio only", Format.AUDIO),
]
_QUALITY_OPTIONS = [
    ("480p", Quality.P480),
    ("720p", Quality.P720),
    ("1080p", Quality.P1080),
    ("1440p (2K)", Quality.P1440),
    ("2160p (4K)", Quality.P2160),
    ("Best available", Quality.BEST),
]


class UserInterface:
    """Prompts the user and prints styled messages."""

    def __init__(self, input: TextIO | None = None, output: TextIO | None = None) -> None:
        self._input = input
        self._output = output

    @property
    def _in(self) -> TextIO:
        return self._input if self._input is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def _echo(self, message: str = "", nl: bool = True) -> None:
        click.echo(message, file=self._out, nl=nl)

    def _read_line(self) -> str:
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError("input closed")
        return line.rstrip("\r\n")

    def _select(self, prompt: str, options: list[tuple[str, object]], default: int):
        self._echo(click.style(prompt, bold=True))
        for number, (label, _) in enumerate(options, start=1):
            self._echo(f"  {number}) {label}")
        while True:
            self._echo(f"Select [{default + 1}]: ", nl=False)
            answer = self._read_line().strip()
            if not answer:
                return options[default][1]
            if answer.isdigit() and 1 <= int(answer) <= len(options):
                return options[int(answer) - 1][1]
            self._echo(f"Please enter a number between 1 and {len(options)}.")

    def welcome(self) -> None:
        self._echo(click.style("🎥 Welcome to ryt - Your Media Downloader", fg="cyan", bold=True))
        self._echo(click.style("Built on yt-dlp for reliable downloads", dim=True))
        self._echo()

    def goodbye(self) -> None:
        self._echo()
        self._echo(click.style("Thanks for using ryt! 👋", fg="green"))

    def get_main_action(self) -> MainAction:
        return self._select("What would you like to do?", _MAIN_OPTIONS, 0)

    def get_url(self) -> str:
        while True:
            self._echo("Enter the URL to download: ", nl=False)
            line = self._read_line()
            if line:
                return line.strip()

    def get_content_type(self) -> ContentType:
        return self._select("What would you like to download?", _CONTENT_OPTIONS, 0)

    def get_format(self) -> Format:
        return self._select("Choose format", _FORMAT_OPTIONS, 0)

    def get_quality(self) -> Quality:
        return self._select("Select video quality", _QUALITY_OPTIONS, 2)

    def continue_prompt(self) -> bool:
        self._echo()
        while True:
            self._echo("Would you like to download something else? [Y/n] ", nl=False)
            answer = self._read_line().strip().lower()
            if not answer:
                return True
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False

    def info(self, message: str) -> None:
        self._echo(f"{click.style('ℹ', fg='blue')} {message}")

    def error(self, message: str) -> None:
        self._echo(f"{click.style('✗', fg='red')} {message}")