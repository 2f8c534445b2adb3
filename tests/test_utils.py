import pytest

from ryt.utils import is_supported_domain, is_valid_url


@pytest.mark.parametrize(
    "url",
    [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ",
        "https://vimeo.com/123456",
        "https://music.youtube.com/watch?v=dQw4w9WgXcQ",
    ],
)
def test_valid_urls(url):
    assert is_valid_url(url) is True


@pytest.mark.parametrize(
    "url",
    [
        "not a url",
        "",
        "https://unsupported-site.com/video",
        "https://fake-youtube.com.evil.com/video",
    ],
)
def test_invalid_urls(url):
    assert is_valid_url(url) is False


@pytest.mark.parametrize(
    "host",
    ["youtube.com", "www.youtube.com", "youtu.be", "music.youtube.com", "gaming.youtube.com"],
)
def test_supported_domains(host):
    assert is_supported_domain(host) is True


@pytest.mark.parametrize(
    "host", ["fake-youtube.com", "youtube.com.evil.com", "notyoutube.com"]
)
def test_unsupported_domains(host):
    assert is_supported_domain(host) is False


def test_url_without_scheme_is_rejected():
    assert is_valid_url("youtube.com/watch?v=dQw4w9WgXcQ") is False