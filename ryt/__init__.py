"""A user-friendly media downloader built on yt-dlp."""

__version__ = "0.1.0"