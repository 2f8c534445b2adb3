import tomllib
from pathlib import Path

from ryt.config import Config, default_download_dir


def test_defaults():
    config = Config()
    assert config.default_quality == "1080p"
    assert config.default_format == "video"
    assert config.ytdlp_path is None
    assert config.max_concurrent_downloads == 3
    assert config.download_dir == default_download_dir()


def test_default_download_dir_named_after_app():
    assert default_download_dir().name == "ryt"


def test_config_path_location():
    path = Config.config_path()
    assert path.name == "config.toml"
    assert path.parent.name == "ryt"


def test_load_or_create_writes_default_file(tmp_path):
    path = tmp_path / "nested" / "config.toml"
    config = Config.load_or_create(path)
    assert path.exists()
    assert config == Config()


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "config.toml"
    original = Config(
        download_dir=tmp_path / "media",
        default_quality="720p",
        default_format="audio",
        ytdlp_path="/opt/bin/yt-dlp",
        max_concurrent_downloads=5,
    )
    original.save(path)
    assert Config.load_or_create(path) == original


def test_none_ytdlp_path_is_omitted(tmp_path):
    path = tmp_path / "config.toml"
    Config(download_dir=tmp_path).save(path)
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    assert "ytdlp_path" not in data
    assert Config.load_or_create(path).ytdlp_path is None


def test_invalid_toml_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("this is = = not toml", encoding="utf-8")
    assert Config.load_or_create(path) == Config()


def test_missing_field_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('default_quality = "720p"\n', encoding="utf-8")
    assert Config.load_or_create(path) == Config()


def test_wrong_type_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        'download_dir = "/x"\ndefault_quality = "720p"\n'
        'default_format = "video"\nmax_concurrent_downloads = "many"\n',
        encoding="utf-8",
    )
    assert Config.load_or_create(path) == Config()


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        'download_dir = "/x"\ndefault_quality = "720p"\n'
        'default_format = "audio"\nmax_concurrent_downloads = 2\nextra = 1\n',
        encoding="utf-8",
    )
    config = Config.load_or_create(path)
    assert config.download_dir == Path("/x")
    assert config.default_format == "audio"


def test_ensure_download_dirs(tmp_path):
    config = Config(download_dir=tmp_path / "downloads")
    config.ensure_download_dirs()
    assert (tmp_path / "downloads" / "single-videos").is_dir()
    assert (tmp_path / "downloads" / "playlists").is_dir()
    config.ensure_download_dirs()
    assert (tmp_path / "downloads").is_dir()