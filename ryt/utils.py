"""URL validation helpers."""

from urllib.parse import urlsplit

# Registered domain of each supported platform. Any sub-domain of one of
# these (www., m., music., gaming., ...) is accepted as well.
SUPPORTED_PLATFORMS: dict[str, str] = {
    "YouTube": "youtube.com",
    "YouTube short links": "youtu.be",
    "Vimeo": "vimeo.com",
    "Dailymotion": "dailymotion.com",
    "Twitch": "twitch.tv",
    "SoundCloud": "soundcloud.com",
    "TikTok": "tiktok.com",
}


def _belongs_to(host: str, domain: str) -> bool:
    """Return True if *host* is *domain* itself or lies beneath it."""
    return host == domain or host.endswith("." + domain)


def is_valid_url(input: str) -> bool:
    """Return True if *input* is an absolute URL on a supported platform."""
    try:
        parts = urlsplit(input)
        parts.port  # a malformed port raises ValueError
    except ValueError:
        return False
    host = parts.hostname
    if not (parts.scheme and host):
        return False
    return is_supported_domain(host)


def is_supported_domain(host: str) -> bool:
    """Return True if *host* is a supported domain or one of its sub-domains."""
    return any(_belongs_to(host, domain) for domain in SUPPORTED_PLATFORMS.values())