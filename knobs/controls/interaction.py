from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Callable, Literal, Mapping


PointerPhase = Literal["down", "move", "up", "cancel", "click"]
PointerSource = Literal["mouse", "touch"]

_EVENT_PHASES: dict[str, tuple[PointerPhase, PointerSource]] = {
    "pointer_down": ("down", "mouse"),
    "pointer_move": ("move", "mouse"),
    "pointer_up": ("up", "mouse"),
    "pointer_cancel": ("cancel", "mouse"),
    "touch_start": ("down", "touch"),
    "touch_move": ("move", "touch"),
    "touch_end": ("up", "touch"),
    "touch_cancel": ("cancel", "touch"),
    "click": ("click", "mouse"),
}


@dataclass(frozen=True)
class PointerEvent:
    """Vertical-drag input sample consumed by knobs and sliders.

    `fast`/`precise` mirror the shift/ctrl modifiers and are always False for
    touch input. `prevent_default` suppresses the platform gesture (page
    scroll, text selection) when the input layer supports it.
    """

    phase: PointerPhase
    y: float
    source: PointerSource = "mouse"
    button: int = 0
    touch_count: int = 1
    fast: bool = False
    precise: bool = False
    prevent_default: Callable[[], None] | None = field(default=None, compare=False, repr=False)

    @property
    def is_primary(self) -> bool:
        if self.source == "touch":
            return self.touch_count == 1
        return self.button == 0

    def suppress_default(self) -> None:
        if self.prevent_default is not None:
            self.prevent_default()


def parse_pointer_event(event_type: str, payload: object) -> PointerEvent | None:
    """Parse a normalized input-layer event into a typed pointer event.

    Payloads carry `y`, optional `button`, `touch_count`, a `modifiers` mapping
    (`shift`, `ctrl`) and an optional `prevent_default` callable. Unknown event
    types and payloads without a usable `y` yield None.
    """

    mapped = _EVENT_PHASES.get(event_type)
    if mapped is None or not isinstance(payload, Mapping):
        return None
    phase, source = mapped
    try:
        y = float(payload.get("y", 0.0 if phase in ("up", "cancel", "click") else math.nan))
    except (TypeError, ValueError):
        return None
    if not math.isfinite(y):
        return None
    modifiers = payload.get("modifiers", {})
    if not isinstance(modifiers, Mapping) or source == "touch":
        modifiers = {}
    prevent_default = payload.get("prevent_default")
    if not callable(prevent_default):
        prevent_default = None
    return PointerEvent(
        phase=phase,
        y=y,
        source=source,
        button=int(payload.get("button", 0)),
        touch_count=int(payload.get("touch_count", 1)),
        fast=bool(modifiers.get("shift", False)),
        precise=bool(modifiers.get("ctrl", False)),
        prevent_default=prevent_default,
    )
