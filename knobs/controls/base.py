from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Callable, Iterable, Literal

from knobs.config import SensitivityConfig
from knobs.mount import Container
from knobs.range_model import ValueModel

from .drag import CAPTURE_EVENTS, DragController, DragState, InputCapture
from .interaction import PointerEvent
from .notifier import ChangeNotifier
from .renderer import RenderedControl, VisualHandle


LOGGER = logging.getLogger(__name__)

ControlEvent = Literal["change", "toggle"]

PRESS_EVENTS = ("pointer_down", "touch_start")


class ValueControl:
    """Shared value/drag/notification plumbing for knobs and sliders.

    Subclasses build the value model and rendered tree, then call
    `super().__init__`; they provide `_change_event` and `_update_visuals`,
    and may override `_on_click` and `_detach`.
    """

    def __init__(
        self,
        container: Container,
        *,
        model: ValueModel,
        rendered: RenderedControl,
        sensitivity: SensitivityConfig,
        pixels_per_range: float,
        value_range: float,
        enabled: Callable[[], bool] | None = None,
        class_name: str | None = None,
        expected_handles: Iterable[str] = (),
    ) -> None:
        self._container = container
        self._model = model
        self._rendered = rendered
        self._sensitivity = sensitivity
        self._destroyed = False
        self._change_notifier: ChangeNotifier[Any] = ChangeNotifier()
        self._toggle_notifier: ChangeNotifier[Any] = ChangeNotifier()

        for name in expected_handles:
            if rendered.handle(name) is None:
                LOGGER.warning(
                    "%s renderer did not provide `%s` handle; its visual updates are skipped",
                    type(self).__name__,
                    name,
                )

        self._drag = DragController(
            pixels_per_range=pixels_per_range,
            value_range=value_range,
            fast_multiplier=sensitivity.fast_multiplier,
            precise_multiplier=sensitivity.precise_multiplier,
            on_delta=self._apply_drag_delta,
            enabled=enabled,
            on_state_change=self._on_drag_state,
        )
        self._press_listener = self._on_press
        self._capture_listener = self._on_capture_event
        self._capture = InputCapture(
            container.capture_target(),
            {event_type: self._capture_listener for event_type in CAPTURE_EVENTS},
        )
        self._drag.bind_capture(self._capture)
        self._drag_target = rendered.drag_target if rendered.drag_target is not None else container

        if class_name:
            container.add_class(class_name)
        container.set_style("touch_action", "none")
        container.set_style("cursor", "pointer")
        container.mount(rendered.root)
        for event_type in PRESS_EVENTS:
            self._drag_target.add_listener(event_type, self._press_listener)
        self._update_visuals()

    # Public API

    @property
    def sensitivity(self) -> SensitivityConfig:
        return self._sensitivity

    def get_value(self) -> float:
        return self._model.value

    def set_value(self, value: float) -> None:
        name = type(self).__name__
        if self._destroyed:
            LOGGER.warning("%s.set_value: control has been destroyed", name)
            return
        if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
            LOGGER.warning("%s.set_value: invalid value %r, must be a finite number", name, value)
            return
        self._apply(float(value))

    def is_dragging(self) -> bool:
        return self._drag.is_dragging

    def get_element(self) -> Container:
        return self._container

    def on_change(self, callback: Callable[[Any], None]) -> None:
        self._change_notifier.subscribe(callback)

    def on_toggle(self, callback: Callable[[Any], None]) -> None:
        self._toggle_notifier.subscribe(callback)

    def off(self, event: ControlEvent, callback: Callable[[Any], None]) -> None:
        if event == "change":
            self._change_notifier.unsubscribe(callback)
        elif event == "toggle":
            self._toggle_notifier.unsubscribe(callback)
        else:
            raise ValueError(f"Unknown control event: {event!r}")

    def destroy(self) -> None:
        if self._destroyed:
            return
        self._drag.cancel()
        self._capture.release()
        self._destroyed = True
        for event_type in PRESS_EVENTS:
            self._drag_target.remove_listener(event_type, self._press_listener)
        self._detach()
        self._change_notifier.clear()
        self._toggle_notifier.clear()
        self._container.clear()
        LOGGER.debug("%s destroyed", type(self).__name__)

    # Hooks

    def _change_event(self, previous_value: float) -> Any:
        raise NotImplementedError

    def _update_visuals(self) -> None:
        raise NotImplementedError

    def _on_click(self) -> None:
        """Press/release with no movement in between."""

    def _detach(self) -> None:
        """Remove subclass-specific listeners."""

    # Internals

    def _set_style(self, handle_name: str, style: str, value: str) -> None:
        handle: VisualHandle | None = self._rendered.handle(handle_name)
        if handle is not None:
            handle.set_style(style, value)

    def _set_text(self, handle_name: str, text: str) -> None:
        handle = self._rendered.handle(handle_name)
        if handle is not None:
            handle.set_text(text)

    def _apply(self, candidate: float) -> None:
        previous = self._model.value
        changed = self._model.update(candidate)
        self._update_visuals()
        if changed:
            self._change_notifier.notify(self._change_event(previous))

    def _apply_drag_delta(self, delta: float) -> None:
        self._apply(self._model.raw + delta)

    def _on_press(self, event: PointerEvent) -> None:
        if self._destroyed:
            return
        self._drag.on_pointer_down(event)

    def _on_capture_event(self, event: PointerEvent) -> None:
        if event.phase == "move":
            self._drag.on_pointer_move(event)
            return
        if event.phase in ("up", "cancel"):
            if self._drag.on_pointer_up(event) == "click":
                self._on_click()

    def _on_drag_state(self, state: DragState) -> None:
        if self._destroyed:
            return
        self._container.set_style("cursor", "grabbing" if state == "dragging" else "pointer")
