from __future__ import annotations

from dataclasses import asdict, dataclass
import re
from typing import Any, Mapping

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")


@dataclass(frozen=True)
class ThemeTokens:
    """Colour and font tokens handed to renderers with each render spec."""

    knob_background: str = "#2a2a2a"
    knob_dial: str = "#1a1a1a"
    knob_indicator: str = "#ffffff"
    knob_glow: str = "#ff6600"
    tick: str = "#888888"
    label: str = "#cccccc"
    power_led_on: str = "#00ff00"
    led_off: str = "#333333"
    slider_track: str = "#1a1a1a"
    slider_thumb: str = "#3a3a3a"
    toggle_led_on: str = "#ff3b30"
    font_family: str = "Arial, sans-serif"


DEFAULT_TOKENS = ThemeTokens()

_COLOR_TOKENS = (
    "knob_background",
    "knob_dial",
    "knob_indicator",
    "knob_glow",
    "tick",
    "label",
    "power_led_on",
    "led_off",
    "slider_track",
    "slider_thumb",
    "toggle_led_on",
)


def validate_theme_tokens(overrides: Mapping[str, Any] | None = None) -> ThemeTokens:
    """Validate and merge user token overrides against the defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_TOKENS)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown theme token: {key}")
            raw[key] = value

    for key in _COLOR_TOKENS:
        if not isinstance(raw[key], str) or not _HEX_COLOR.match(raw[key]):
            raise ValueError(f"Token `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")

    if not isinstance(raw["font_family"], str) or not raw["font_family"].strip():
        raise ValueError("Token `font_family` must be a non-empty string")

    return ThemeTokens(**{key: str(value) for key, value in raw.items()})
