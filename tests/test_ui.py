import io

import pytest

from ryt.ui import ContentType, Format, MainAction, Quality, UserInterface


def make_ui(text):
    output = io.StringIO()
    return UserInterface(input=io.StringIO(text), output=output), output


@pytest.mark.parametrize(
    "quality, height",
    [
        (Quality.P480, "480"),
        (Quality.P720, "720"),
        (Quality.P1080, "1080"),
        (Quality.P1440, "1440"),
        (Quality.P2160, "2160"),
        (Quality.BEST, "best"),
    ],
)
def test_quality_to_height(quality, height):
    assert quality.to_height() == height


def test_main_action_selection():
    ui, output = make_ui("4\n")
    assert ui.get_main_action() is MainAction.EXIT
    assert "What would you like to do?" in output.getvalue()


def test_main_action_default_is_download():
    ui, _ = make_ui("\n")
    assert ui.get_main_action() is MainAction.DOWNLOAD


def test_quality_default_is_1080():
    ui, _ = make_ui("\n")
    assert ui.get_quality() is Quality.P1080


def test_invalid_choice_reprompts():
    ui, _ = make_ui("9\nabc\n6\n")
    assert ui.get_quality() is Quality.BEST


def test_content_type_and_format():
    ui, _ = make_ui("2\n2\n")
    assert ui.get_content_type() is ContentType.PLAYLIST
    assert ui.get_format() is Format.AUDIO


def test_get_url_trims_and_skips_empty():
    ui, _ = make_ui("\n  https://youtu.be/dQw4w9WgXcQ  \n")
    assert ui.get_url() == "https://youtu.be/dQw4w9WgXcQ"


def test_closed_input_raises():
    ui, _ = make_ui("")
    with pytest.raises(EOFError):
        ui.get_format()


@pytest.mark.parametrize("answer, expected", [("\n", True), ("y\n", True), ("n\n", False), ("no\n", False)])
def test_continue_prompt(answer, expected):
    ui, _ = make_ui(answer)
    assert ui.continue_prompt() is expected


def test_info_and_error_messages():
    ui, output = make_ui("")
    ui.info("Download history coming soon!")
    ui.error("Download failed")
    lines = output.getvalue().splitlines()
    assert lines == ["ℹ Download history coming soon!", "✗ Download failed"]


def test_welcome_and_goodbye():
    ui, output = make_ui("")
    ui.welcome()
    ui.goodbye()
    text = output.getvalue()
    assert "🎥 Welcome to ryt - Your Media Downloader" in text
    assert "Thanks for using ryt! 👋" in text
    assert "\x1b[" not in text