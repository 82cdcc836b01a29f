from pathlib import Path

import pytest

from ripple.core.settings import AppSettings, TextSettings, build_arg_parser


def test_defaults_from_empty_command_line():
    args = build_arg_parser().parse_args([])
    settings = AppSettings.from_args(args)

    assert settings == AppSettings()
    assert settings.waves.capacity == 64
    assert settings.text.text == "WATER DISTORTION"


def test_command_line_overrides():
    args = build_arg_parser().parse_args(
        [
            "--assets", "media",
            "--background", "lake.png",
            "--distortion", "ripple.png",
            "--width", "640",
            "--height", "480",
            "--pixel-ratio", "2",
            "--seed", "9",
            "--log-level", "debug",
        ]
    )
    settings = AppSettings.from_args(args)

    assert settings.assets.root == Path("media")
    assert settings.assets.background == "lake.png"
    assert settings.assets.distortion == "ripple.png"
    assert (settings.display.width, settings.display.height) == (640, 480)
    assert settings.display.pixel_ratio == 2.0
    assert settings.waves.seed == 9
    assert settings.log_level == "debug"


def test_escaped_newlines_in_text():
    args = build_arg_parser().parse_args(["--text", "WATER\\nDISTORTION"])
    assert AppSettings.from_args(args).text.text == "WATER\nDISTORTION"


def test_unknown_log_level_is_rejected():
    with pytest.raises(SystemExit):
        build_arg_parser().parse_args(["--log-level", "loud"])


@pytest.mark.parametrize(
    "color, expected",
    [
        ((1.0, 1.0, 1.0, 1.0), 0.0),
        ((0.0, 0.0, 0.0, 1.0), 1.0),
        ((0.25, 0.5, 0.75, 1.0), 0.5),
    ],
)
def test_hint_amount(color, expected):
    assert TextSettings(color=color).hint_amount == pytest.approx(expected)
