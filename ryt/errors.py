"""Exceptions raised by ryt."""


class RytError(Exception):
    """Base class for all ryt errors."""

    default_message = "ryt error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class YtDlpNotFound(RytError):
    """The yt-dlp executable could not be run."""

    default_message = "yt-dlp is not installed or not found in PATH"


class DownloadFailed(RytError):
    """yt-dlp exited with a failure status."""

    default_message = "Download failed"


class InvalidUrl(RytError):
    """The URL is malformed or points to an unsupported platform."""

    default_message = "Invalid URL format"