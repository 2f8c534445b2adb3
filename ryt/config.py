"""Persistent user configuration."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import platformdirs
import tomli_w

APP_NAME = "ryt"
SINGLE_DIR = "single-videos"
PLAYLIST_DIR = "playlists"


def default_download_dir() -> Path:
    """Return the default download directory: <documents>/ryt."""
    try:
        base = Path(platformdirs.user_documents_dir())
    except Exception:  # platformdirs may fail on unusual systems
        try:
            base = Path.home()
        except RuntimeError:
            base = Path(".")
    return base / APP_NAME


@dataclass
class Config:
    """User settings stored as TOML in the platform config directory."""

    download_dir: Path = field(default_factory=default_download_dir)
    default_quality: str = "1080p"
    default_format: str = "video"
    ytdlp_path: str | None = None
    max_concurrent_downloads: int = 3

    @staticmethod
    def config_path() -> Path:
        """Return the location of the configuration file."""
        return Path(platformdirs.user_config_dir()) / APP_NAME / "config.toml"

    @classmethod
    def load_or_create(cls, path: Path | None = None) -> Config:
        """Load the config at *path*, creating a default one if it is missing.

        A file that cannot be parsed as a config yields the defaults.
        """
        config_path = Path(path) if path is not None else cls.config_path()
        if config_path.exists():
            content = config_path.read_text(encoding="utf-8")
            return cls._from_toml(content) or cls()
        config = cls()
        config.save(config_path)
        return config

    def save(self, path: Path | None = None) -> None:
        """Write the config as TOML, creating parent directories."""
        config_path = Path(path) if path is not None else self.config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(tomli_w.dumps(self._to_dict()), encoding="utf-8")

    def ensure_download_dirs(self) -> None:
        """Create the download directory and its sub-directories."""
        for directory in (
            self.download_dir,
            self.download_dir / SINGLE_DIR,
            self.download_dir / PLAYLIST_DIR,
        ):
            directory.mkdir(parents=True, exist_ok=True)

    def _to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "download_dir": str(self.download_dir),
            "default_quality": self.default_quality,
            "default_format": self.default_format,
        }
        if self.ytdlp_path is not None:
            data["ytdlp_path"] = self.ytdlp_path
        data["max_concurrent_downloads"] = self.max_concurrent_downloads
        return data

    @classmethod
    def _from_toml(cls, content: str) -> Config | None:
        try:
            data = tomllib.loads(content)
        except tomllib.TOMLDecodeError:
            return None

        strings = ("download_dir", "default_quality", "default_format")
        if not all(isinstance(data.get(key), str) for key in strings):
            return None
        ytdlp_path = data.get("ytdlp_path")
        if ytdlp_path is not None and not isinstance(ytdlp_path, str):
            return None
        max_downloads = data.get("max_concurrent_downloads")
        if (
            not isinstance(max_downloads, int)
            or isinstance(max_downloads, bool)
            or max_downloads < 0
        ):
            return None

        return cls(
            download_dir=Path(data["download_dir"]),
            default_quality=data["default_quality"],
            default_format=data["default_format"],
            ytdlp_path=ytdlp_path,
            max_concurrent_downloads=max_downloads,
        )