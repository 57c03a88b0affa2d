from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import math
from typing import Any, Mapping

from knobs.config import SensitivityConfig, resolve_sensitivity
from knobs.mount import Container, ContainerLookup, resolve_container
from knobs.range_model import Bounded, ValueModel, to_position
from knobs.style.theme import validate_theme_tokens

from .base import ValueControl
from .interaction import PointerEvent
from .renderer import (
    SLIDER_THUMB,
    SLIDER_TOGGLE_LED,
    SLIDER_VALUE_DISPLAY,
    SliderRenderer,
    SliderRenderSpec,
)


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SliderOptions:
    value: float = 0.0
    min: float = 0.0
    max: float = 100.0
    step: float = 1.0
    length: float = 150.0
    width: float = 60.0
    fast_multiplier: float | None = None
    precise_multiplier: float | None = None
    label: str = ""
    show_ticks: bool = True
    tick_count: int = 11
    show_value_labels: bool = True
    value_labels: tuple[str, ...] | None = None
    show_value_display: bool = True
    show_toggle: bool = False
    toggle_label: str = ""
    toggle_state: bool = False
    class_name: str | None = None
    theme: Mapping[str, str] | None = None


@dataclass(frozen=True)
class SliderChangeEvent:
    value: float
    previous_value: float
    position: float
    slider: "Slider"


@dataclass(frozen=True)
class ToggleChangeEvent:
    state: bool
    previous_state: bool
    slider: "Slider"


def format_value(value: float, step: float) -> str:
    """Display text: one decimal for fractional steps, otherwise a whole number."""

    if step < 1:
        return f"{value:.1f}"
    return str(int(math.floor(value + 0.5)))


class Slider(ValueControl):
    """Vertical fader mapping drag travel 1:1 onto its track.

    Carries an independent toggle (e.g. mute) that is unrelated to the value
    and never gated by drag state.
    """

    def __init__(
        self,
        container: Container | str,
        options: SliderOptions | None = None,
        *,
        renderer: SliderRenderer,
        lookup: ContainerLookup | None = None,
        sensitivity_defaults: SensitivityConfig | None = None,
        **overrides: Any,
    ) -> None:
        options = options or SliderOptions()
        if overrides:
            options = replace(options, **overrides)
        target = resolve_container(container, lookup)
        mode = Bounded(min=options.min, max=options.max)
        sensitivity = resolve_sensitivity(
            {
                "fast_multiplier": options.fast_multiplier,
                "precise_multiplier": options.precise_multiplier,
            },
            sensitivity_defaults,
        )
        theme = validate_theme_tokens(options.theme)
        model = ValueModel.create(mode, options.step, options.value)

        self._options = options
        self._bounds = mode
        self._theme = theme
        self._toggle_state = bool(options.toggle_state)

        spec = SliderRenderSpec(
            minimum=mode.min,
            maximum=mode.max,
            length=options.length,
            width=options.width,
            label=options.label,
            show_ticks=options.show_ticks,
            tick_count=options.tick_count,
            show_value_labels=options.show_value_labels,
            value_labels=tuple(options.value_labels) if options.value_labels is not None else None,
            show_value_display=options.show_value_display,
            show_toggle=options.show_toggle,
            toggle_label=options.toggle_label,
            theme=theme,
        )
        rendered = renderer.render_slider(spec)
        self._track_length = float(rendered.track_length or options.length)
        self._track_top = float(rendered.track_top)

        expected = [SLIDER_THUMB]
        if options.show_value_display:
            expected.append(SLIDER_VALUE_DISPLAY)
        if options.show_toggle:
            expected.append(SLIDER_TOGGLE_LED)

        self._toggle_listener = self._on_toggle_click
        self._toggle_target = rendered.toggle_target if options.show_toggle else None

        super().__init__(
            target,
            model=model,
            rendered=rendered,
            sensitivity=sensitivity,
            pixels_per_range=self._track_length,
            value_range=mode.max - mode.min,
            class_name=options.class_name,
            expected_handles=expected,
        )
        if self._toggle_target is not None:
            self._toggle_target.add_listener("click", self._toggle_listener)

    def get_position(self) -> float:
        return to_position(
            self._model.raw,
            minimum=self._bounds.min,
            maximum=self._bounds.max,
            track_length=self._track_length,
            top=self._track_top,
        )

    def get_toggle(self) -> bool:
        return self._toggle_state

    def set_toggle(self, state: bool) -> None:
        if self._destroyed:
            LOGGER.warning("Slider.set_toggle: control has been destroyed")
            return
        state = bool(state)
        if state == self._toggle_state:
            return
        previous = self._toggle_state
        self._toggle_state = state
        self._update_toggle_visuals()
        self._toggle_notifier.notify(ToggleChangeEvent(state=state, previous_state=previous, slider=self))

    def _on_toggle_click(self, event: PointerEvent) -> None:
        if self._destroyed:
            return
        self.set_toggle(not self._toggle_state)

    def _detach(self) -> None:
        if self._toggle_target is not None:
            self._toggle_target.remove_listener("click", self._toggle_listener)

    def _change_event(self, previous_value: float) -> SliderChangeEvent:
        return SliderChangeEvent(
            value=self._model.value,
            previous_value=previous_value,
            position=self.get_position(),
            slider=self,
        )

    def _update_visuals(self) -> None:
        self._set_style(SLIDER_THUMB, "transform", f"translateY({self.get_position()}px)")
        self._set_text(SLIDER_VALUE_DISPLAY, format_value(self._model.value, self._model.step))
        self._update_toggle_visuals()

    def _update_toggle_visuals(self) -> None:
        if self._toggle_state:
            color = self._theme.toggle_led_on
            self._set_style(SLIDER_TOGGLE_LED, "background_color", color)
            self._set_style(
                SLIDER_TOGGLE_LED,
                "box_shadow",
                f"0 0 6px {color}, inset 0 1px 2px rgba(255,255,255,0.3)",
            )
        else:
            self._set_style(SLIDER_TOGGLE_LED, "background_color", self._theme.led_off)
            self._set_style(SLIDER_TOGGLE_LED, "box_shadow", "inset 0 1px 2px rgba(0,0,0,0.5)")
