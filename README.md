# ryt

A friendly command-line front end for downloading media with `yt-dlp`.
You choose what to download (a single video or a whole playlist), whether
you want video with audio or audio only, and, for video, the maximum
quality. `ryt` then runs `yt-dlp` for you and shows a progress bar.

## Requirements

- Python 3.11 or newer
- `yt-dlp` installed and on your `PATH`, or its path set as `ytdlp_path`
  in the configuration file

## Installation

```
pip install .
```

## Usage

Start the interactive menu:

```
ryt
```

The menu offers "Download media", "Configure settings", "View history"
and "Exit". Every choice is a numbered list; type a number, or press
Enter to take the default shown in brackets. After each action you are
asked whether to go on (`Y/n`, default yes).

Download a URL directly. You are still asked about content type, format
and, for video, quality:

```
ryt --url <url>
ryt download <url>
```

`ryt download` without a URL asks for one.

Other commands:

```
ryt config     # overview of the configuration settings
ryt history    # overview of the download history features
ryt --help
ryt --version
```

Before doing anything, `ryt` runs `yt-dlp --version`. If that fails it
prints a message telling you to install `yt-dlp` and exits.

The video quality choices are 480p, 720p, 1080p (the default), 1440p,
2160p and "Best available". A height choice asks `yt-dlp` for the best
video no taller than that height plus the best audio, falling back to the
best combined format. Audio only extracts the best audio.

Supported sites are YouTube (including youtu.be and sub-domains such as
music.youtube.com), Vimeo, Dailymotion, Twitch, SoundCloud and TikTok,
together with any sub-domain of these. Other URLs are rejected with an
error and exit status 1.

## Where files go

Downloads go into a `ryt` folder in your documents directory (your home
directory if the documents directory cannot be determined):

- `single-videos/` holds single videos, saved as `<title>.<ext>`
- `playlists/` holds playlists, saved as `<playlist title>/<title>.<ext>`

These folders are created when `ryt` starts.

## Configuration

On first run `ryt` writes `config.toml` to `ryt/` in your user
configuration directory. Its keys are:

| key                        | default              |
|----------------------------|----------------------|
| `download_dir`             | see above            |
| `default_quality`          | `"1080p"`            |
| `default_format`           | `"video"`            |
| `ytdlp_path`               | unset, uses `yt-dlp` |
| `max_concurrent_downloads` | `3`                  |

If the file cannot be parsed, or a value has the wrong type, `ryt` uses
the defaults for that run and leaves the file as it is.

## What it does not do

- `ryt config` and the "Configure settings" menu entry only list the
  settings; they do not change them. Edit `config.toml` by hand.
- `ryt history` and "View history" only describe history features; no
  download history is recorded or stored.
- `default_quality`, `default_format` and `max_concurrent_downloads` are
  stored in the configuration but not used: you are always asked for
  format and quality, and downloads run one at a time.
- The `-v`/`--verbose` option is accepted but changes nothing.

## Using it from Python

```python
from ryt.config import Config
from ryt.downloader import Downloader
from ryt.errors import DownloadFailed, YtDlpNotFound
from ryt.ui import ContentType, Format, Quality
from ryt.utils import is_valid_url

url = "https://youtu.be/VIDEO_ID"
if is_valid_url(url):
    downloader = Downloader(Config.load_or_create())
    print(downloader.build_command(url, ContentType.SINGLE, Format.VIDEO, Quality.P720))
    try:
        downloader.check_ytdlp()
        downloader.download(url, ContentType.SINGLE, Format.VIDEO, Quality.P720)
    except (YtDlpNotFound, DownloadFailed) as exc:
        print(exc)
```

`Config.load_or_create` and `Config.save` take an optional path to use
instead of the default configuration file. `UserInterface` takes optional
`input` and `output` text streams, so its prompts can be driven from
something other than the terminal. `ryt.cli.main(argv)` runs the command
line with the given arguments and returns its exit status.