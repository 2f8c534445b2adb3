"""Running yt-dlp and reporting its progress."""

from __future__ import annotations

import re
import subprocess
from pathlib import Path

from tqdm import tqdm

from .config import PLAYLIST_DIR, SINGLE_DIR, Config
from .errors import DownloadFailed, YtDlpNotFound
from .ui import ContentType, Format, Quality

DEFAULT_YTDLP = "yt-dlp"

_PROGRESS_RE = re.compile(r"\[download\]\s+(\d+(?:\.\d+)?)%")

_TEMPLATES = {
    ContentType.SINGLE: (SINGLE_DIR, "%(title)s.%(ext)s"),
    ContentType.PLAYLIST: (PLAYLIST_DIR, "%(playlist_title)s/%(title)s.%(ext)s"),
}


class Downloader:
    """Builds yt-dlp command lines and runs them."""

    def __init__(self, config: Config) -> None:
        config.ensure_download_dirs()
        self.config = config
        self.ytdlp_cmd = (
            config.ytdlp_path if config.ytdlp_path is not None else DEFAULT_YTDLP
        )

    def check_ytdlp(self) -> None:
        """Raise YtDlpNotFound unless ``yt-dlp --version`` runs successfully."""
        try:
            result = subprocess.run(
                [self.ytdlp_cmd, "--version"],
                capture_output=True,
                check=False,
            )
        except OSError as exc:
            raise YtDlpNotFound() from exc
        if result.returncode != 0:
            raise YtDlpNotFound()

    def build_command(
        self,
        url: str,
        content_type: ContentType,
        format: Format,
        quality: Quality | None,
    ) -> list[str]:
        """Return the yt-dlp argument list for one download."""
        subdir, template = _TEMPLATES[content_type]
        output: Path = self.config.download_dir / subdir / template
        command = [self.ytdlp_cmd, url, "-o", str(output)]

        if format is Format.AUDIO:
            command += ["--extract-audio", "--audio-format", "best", "--audio-quality", "0"]
        elif quality is not None:
            if quality is Quality.BEST:
                command += ["-f", "best"]
            else:
                height = quality.to_height()
                command += [
                    "-f",
                    f"bestvideo[height<={height}]+bestaudio/best[height<={height}]",
                ]

        command.append("--newline")
        return command

    def download(
        self,
        url: str,
        content_type: ContentType,
        format: Format,
        quality: Quality | None,
    ) -> None:
        """Run yt-dlp with a progress bar; raise DownloadFailed if it fails."""
        print("🚀 Starting download...")
        command = self.build_command(url, content_type, format, quality)

        with subprocess.Popen(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
        ) as process, tqdm(
            total=100,
            bar_format="[{elapsed}] |{bar}| {n:.0f}%{postfix}",
        ) as bar:
            assert process.stdout is not None
            for raw_line in process.stdout:
                line = raw_line.rstrip("\r\n")
                progress = self.parse_progress(line)
                if progress is not None:
                    bar.n = int(progress)
                    bar.set_postfix_str(self.extract_status(line), refresh=False)
                    bar.refresh()
            returncode = process.wait()
            bar.set_postfix_str("Download completed!")

        if returncode == 0:
            print("✅ Download completed successfully!")
        else:
            print("❌ Download failed!")
            raise DownloadFailed()

    def parse_progress(self, line: str) -> float | None:
        """Return the percentage in a ``[download]`` line, or None."""
        match = _PROGRESS_RE.search(line)
        if match is None:
            return None
        return float(match.group(1))

    def extract_status(self, line: str) -> str:
        """Return the part of a ``[download]`` line after its tag."""
        if "[download]" in line:
            start = line.find("] ")
            if start != -1:
                return line[start + 2 :]
        return line