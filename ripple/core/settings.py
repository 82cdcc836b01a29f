# ripple/core/settings.py
from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from ripple.text.layout import DEFAULT_CAPACITY
from ripple.waves.scheduler import POOL_SIZE

RGBA = Tuple[float, float, float, float]


@dataclass(frozen=True, slots=True)
class DisplaySettings:
    """Window and frame pacing."""

    width: int = 1600
    height: int = 900
    title: str = "Water Distortion"
    pixel_ratio: float = 1.0
    fps: int = 60


@dataclass(frozen=True, slots=True)
class TextSettings:
    """What text to draw and how the SDF shader sharpens it."""

    text: str = "WATER DISTORTION"
    color: RGBA = (1.0, 1.0, 1.0, 1.0)
    subpixel: bool = True
    line_gap: float = 0.0
    buffer_floats: int = DEFAULT_CAPACITY

    @property
    def hint_amount(self) -> float:
        # Dark text wants full hinting, white text none
        r, g, b, _ = self.color
        return 1.0 - (r + g + b) / 3.0


@dataclass(frozen=True, slots=True)
class WaveSettings:
    capacity: int = POOL_SIZE
    plane_size: int = 128
    force: float = 0.1
    seed: Optional[int] = None


@dataclass(frozen=True, slots=True)
class AssetSettings:
    """
    Asset paths relative to `root`. A missing `distortion` image is
    replaced by a generated ripple mask.
    """

    root: Path = Path("assets")
    background: str = "ocean.jpg"
    font_texture: str = "roboto.png"
    font_atlas: str = "roboto.json"
    distortion: Optional[str] = None


@dataclass(frozen=True, slots=True)
class AppSettings:
    display: DisplaySettings = field(default_factory=DisplaySettings)
    text: TextSettings = field(default_factory=TextSettings)
    waves: WaveSettings = field(default_factory=WaveSettings)
    assets: AssetSettings = field(default_factory=AssetSettings)
    log_level: str = "info"

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> AppSettings:
        return cls(
            display=DisplaySettings(
                width=args.width,
                height=args.height,
                pixel_ratio=args.pixel_ratio,
            ),
            text=TextSettings(text=args.text.replace("\\n", "\n")),
            waves=WaveSettings(seed=args.seed),
            assets=AssetSettings(
                root=Path(args.assets),
                background=args.background,
                font_texture=args.font,
                font_atlas=args.atlas,
                distortion=args.distortion,
            ),
            log_level=args.log_level,
        )


def build_arg_parser() -> argparse.ArgumentParser:
    defaults = AppSettings()
    parser = argparse.ArgumentParser(
        description="Animated water distortion with SDF text."
    )
    parser.add_argument("--assets", default=str(defaults.assets.root))
    parser.add_argument("--background", default=defaults.assets.background)
    parser.add_argument("--font", default=defaults.assets.font_texture)
    parser.add_argument("--atlas", default=defaults.assets.font_atlas)
    parser.add_argument(
        "--distortion",
        default=None,
        help="Distortion mask image; a procedural ripple is used when omitted.",
    )
    parser.add_argument(
        "--text",
        default=defaults.text.text,
        help='Text to draw; "\\n" starts a new line.',
    )
    parser.add_argument("--width", type=int, default=defaults.display.width)
    parser.add_argument("--height", type=int, default=defaults.display.height)
    parser.add_argument(
        "--pixel-ratio", type=float, default=defaults.display.pixel_ratio
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--log-level",
        choices=("debug", "info", "warning", "error"),
        default=defaults.log_level,
    )
    return parser
