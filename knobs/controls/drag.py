from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Literal, Mapping

from .interaction import PointerEvent

if TYPE_CHECKING:
    from knobs.mount import EventTarget, PointerListener


DragState = Literal["idle", "dragging"]
GestureKind = Literal["click", "drag"]

CAPTURE_EVENTS = (
    "pointer_move",
    "pointer_up",
    "pointer_cancel",
    "touch_move",
    "touch_end",
    "touch_cancel",
)


class InputCapture:
    """Listener lease on a capture surface for the duration of one gesture.

    Acquire attaches every listener, release detaches them. Both are
    idempotent, so release can be called from every exit path.
    """

    def __init__(self, surface: "EventTarget", listeners: Mapping[str, "PointerListener"]) -> None:
        self._surface = surface
        self._listeners = dict(listeners)
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def acquire(self) -> None:
        if self._active:
            return
        for event_type, listener in self._listeners.items():
            self._surface.add_listener(event_type, listener)
        self._active = True

    def release(self) -> None:
        if not self._active:
            return
        self._active = False
        for event_type, listener in self._listeners.items():
            self._surface.remove_listener(event_type, listener)

    def __enter__(self) -> "InputCapture":
        self.acquire()
        return self

    def __exit__(self, *exc: object) -> None:
        self.release()


class DragController:
    """Idle/Dragging state machine turning vertical pointer travel into value deltas.

    `value_delta = dy / pixels_per_range * multipliers * value_range`, where
    `dy` is positive for upward travel. Deltas are handed to `on_delta` unless
    `enabled()` reports False; in that case samples are still consumed so a
    gesture survives being re-enabled mid-drag.
    """

    def __init__(
        self,
        *,
        pixels_per_range: float,
        value_range: float,
        fast_multiplier: float,
        precise_multiplier: float,
        on_delta: Callable[[float], None],
        enabled: Callable[[], bool] | None = None,
        on_state_change: Callable[[DragState], None] | None = None,
    ) -> None:
        if pixels_per_range <= 0:
            raise ValueError("pixels_per_range must be > 0")
        self._pixels_per_range = float(pixels_per_range)
        self._value_range = float(value_range)
        self._fast_multiplier = float(fast_multiplier)
        self._precise_multiplier = float(precise_multiplier)
        self._on_delta = on_delta
        self._enabled = enabled or (lambda: True)
        self._on_state_change = on_state_change
        self._state: DragState = "idle"
        self._last_y = 0.0
        self._moved = False
        self._capture: InputCapture | None = None

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def is_dragging(self) -> bool:
        return self._state == "dragging"

    def bind_capture(self, capture: InputCapture | None) -> None:
        self._capture = capture

    def value_delta(self, delta_y: float, *, fast: bool = False, precise: bool = False) -> float:
        fraction = delta_y / self._pixels_per_range
        if fast:
            fraction *= self._fast_multiplier
        if precise:
            fraction *= self._precise_multiplier
        return fraction * self._value_range

    def on_pointer_down(self, event: PointerEvent) -> bool:
        if self._state == "dragging" or not event.is_primary:
            return False
        event.suppress_default()
        self._state = "dragging"
        self._last_y = event.y
        self._moved = False
        if self._capture is not None:
            self._capture.acquire()
        self._notify_state()
        return True

    def on_pointer_move(self, event: PointerEvent) -> bool:
        if self._state != "dragging":
            return False
        if event.source == "touch":
            if event.touch_count != 1:
                return False
            event.suppress_default()
        delta_y = self._last_y - event.y
        self._last_y = event.y
        if delta_y == 0:
            return False
        self._moved = True
        if not self._enabled():
            return False
        # Touch input never carries modifiers.
        touch = event.source == "touch"
        self._on_delta(
            self.value_delta(
                delta_y,
                fast=event.fast and not touch,
                precise=event.precise and not touch,
            )
        )
        return True

    def on_pointer_up(self, event: PointerEvent) -> GestureKind | None:
        """End the gesture; classify it as a click or a drag.

        Cancellation ends the gesture like a release but is never a click.
        """

        if self._state != "dragging":
            return None
        moved = self._moved
        self._finish()
        if event.phase == "cancel":
            return None
        return "drag" if moved else "click"

    def cancel(self) -> None:
        if self._state == "dragging":
            self._finish()

    def _finish(self) -> None:
        self._state = "idle"
        self._moved = False
        if self._capture is not None:
            self._capture.release()
        self._notify_state()

    def _notify_state(self) -> None:
        if self._on_state_change is not None:
            self._on_state_change(self._state)
