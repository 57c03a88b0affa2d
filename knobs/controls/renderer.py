from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Mapping, Protocol

import numpy as np

from knobs.range_model import RangeMode
from knobs.style.theme import DEFAULT_TOKENS, ThemeTokens

if TYPE_CHECKING:
    from knobs.mount import EventTarget


KNOB_DIAL = "dial"
KNOB_GLOW = "glow"
KNOB_POWER = "power"
SLIDER_THUMB = "thumb"
SLIDER_VALUE_DISPLAY = "value_display"
SLIDER_TOGGLE_LED = "toggle_led"


class VisualHandle(Protocol):
    """Opaque element in a rendered tree that the control mutates directly."""

    def set_style(self, name: str, value: str) -> None:
        ...

    def set_text(self, text: str) -> None:
        ...


@dataclass(frozen=True)
class KnobRenderSpec:
    """Configuration snapshot a renderer needs to draw one knob."""

    mode: RangeMode
    size: float = 80.0
    label: str = ""
    show_value_labels: bool = True
    value_labels: tuple[str, ...] | None = None
    tick_count: int = 11
    glow: bool = False
    toggleable: bool = False
    theme: ThemeTokens = DEFAULT_TOKENS

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("KnobRenderSpec size must be > 0")
        if self.tick_count < 0:
            raise ValueError("KnobRenderSpec tick_count must be >= 0")


@dataclass(frozen=True)
class SliderRenderSpec:
    """Configuration snapshot a renderer needs to draw one vertical fader."""

    minimum: float
    maximum: float
    length: float = 150.0
    width: float = 60.0
    label: str = ""
    show_ticks: bool = True
    tick_count: int = 11
    show_value_labels: bool = True
    value_labels: tuple[str, ...] | None = None
    show_value_display: bool = True
    show_toggle: bool = False
    toggle_label: str = ""
    theme: ThemeTokens = DEFAULT_TOKENS

    def __post_init__(self) -> None:
        if self.length <= 0 or self.width <= 0:
            raise ValueError("SliderRenderSpec length/width must be > 0")
        if self.tick_count < 0:
            raise ValueError("SliderRenderSpec tick_count must be >= 0")


@dataclass(frozen=True)
class RenderedControl:
    """Visual tree produced by a renderer.

    `handles` maps the well-known element names (`dial`, `thumb`, ...) to
    their handles; any of them may be absent. `drag_target` and
    `toggle_target` are optional event surfaces inside the tree; controls fall
    back to the container when no drag target is given.
    """

    root: VisualHandle
    handles: Mapping[str, VisualHandle] = field(default_factory=dict)
    drag_target: "EventTarget | None" = None
    toggle_target: "EventTarget | None" = None
    track_length: float | None = None
    track_top: float = 0.0

    def handle(self, name: str) -> VisualHandle | None:
        return self.handles.get(name)


class KnobRenderer(Protocol):
    def render_knob(self, spec: KnobRenderSpec) -> RenderedControl:
        ...


class SliderRenderer(Protocol):
    def render_slider(self, spec: SliderRenderSpec) -> RenderedControl:
        ...


def tick_angles(start_angle: float, end_angle: float, count: int) -> np.ndarray:
    """Evenly spaced tick/label angles from `start_angle` to `end_angle`.

    A single mark sits at `start_angle`; zero marks yield an empty array.
    """

    if count <= 0:
        return np.empty(0, dtype=np.float64)
    if count == 1:
        return np.array([start_angle], dtype=np.float64)
    return np.linspace(start_angle, end_angle, count, dtype=np.float64)


def track_offsets(top: float, length: float, count: int) -> np.ndarray:
    """Vertical tick/label offsets along a track, top first."""

    if count <= 0:
        return np.empty(0, dtype=np.float64)
    if count == 1:
        return np.array([top], dtype=np.float64)
    return np.linspace(top, top + length, count, dtype=np.float64)


def default_value_labels(minimum: float, maximum: float, count: int) -> tuple[str, ...]:
    """Labels for `count` evenly spaced values, rounded to one decimal."""

    if count <= 0:
        return ()
    if count == 1:
        values = np.array([minimum], dtype=np.float64)
    else:
        values = np.linspace(minimum, maximum, count, dtype=np.float64)
    out: list[str] = []
    for value in np.round(values, 1).tolist():
        out.append(str(int(value)) if float(value).is_integer() else str(value))
    return tuple(out)
