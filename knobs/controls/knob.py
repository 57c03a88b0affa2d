from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from typing import Any, Mapping

from knobs.config import SensitivityConfig, resolve_sensitivity
from knobs.mount import Container, ContainerLookup, resolve_container
from knobs.range_model import (
    DEFAULT_END_ANGLE,
    DEFAULT_START_ANGLE,
    Bounded,
    RangeMode,
    ValueModel,
    mode_from_options,
    value_range,
)
from knobs.style.theme import validate_theme_tokens

from .base import ValueControl
from .renderer import KNOB_DIAL, KNOB_GLOW, KNOB_POWER, KnobRenderer, KnobRenderSpec
from .toggle import ToggleGate


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class KnobOptions:
    """Construction options for a knob.

    `mode` is `"bounded"`, `"min-only"` or `"infinite"` (or a ready-made
    `Bounded`/`MinOnly`/`Infinite`). Missing bounds default to 0..10. The
    sensitivity fields override the process-wide defaults when set.
    """

    mode: str | RangeMode = "bounded"
    value: float = 0.0
    min: float | None = None
    max: float | None = None
    step: float = 1.0
    size: float = 80.0
    start_angle: float = DEFAULT_START_ANGLE
    end_angle: float = DEFAULT_END_ANGLE
    pixels_per_full_range: float | None = None
    fast_multiplier: float | None = None
    precise_multiplier: float | None = None
    toggleable: bool = False
    powered: bool = True
    glow: bool = False
    label: str = ""
    show_value_labels: bool = True
    value_labels: tuple[str, ...] | None = None
    tick_count: int = 11
    class_name: str | None = None
    theme: Mapping[str, str] | None = None

    def range_mode(self) -> RangeMode:
        if isinstance(self.mode, str):
            return mode_from_options(
                self.mode,
                min=self.min,
                max=self.max,
                start_angle=self.start_angle,
                end_angle=self.end_angle,
            )
        return self.mode

    def sensitivity_overrides(self) -> dict[str, float | None]:
        return {
            "pixels_per_full_range": self.pixels_per_full_range,
            "fast_multiplier": self.fast_multiplier,
            "precise_multiplier": self.precise_multiplier,
        }


@dataclass(frozen=True)
class KnobChangeEvent:
    value: float
    previous_value: float
    angle: float
    powered: bool
    knob: "Knob"


@dataclass(frozen=True)
class KnobToggleEvent:
    powered: bool
    value: float
    knob: "Knob"


class Knob(ValueControl):
    """Rotary control: vertical drag turns the dial, optionally power-gated."""

    def __init__(
        self,
        container: Container | str,
        options: KnobOptions | None = None,
        *,
        renderer: KnobRenderer,
        lookup: ContainerLookup | None = None,
        sensitivity_defaults: SensitivityConfig | None = None,
        **overrides: Any,
    ) -> None:
        options = options or KnobOptions()
        if overrides:
            options = replace(options, **overrides)
        target = resolve_container(container, lookup)
        mode = options.range_mode()
        sensitivity = resolve_sensitivity(options.sensitivity_overrides(), sensitivity_defaults)
        theme = validate_theme_tokens(options.theme)
        model = ValueModel.create(mode, options.step, options.value)

        self._options = options
        self._gate = ToggleGate(powered=options.powered, toggleable=options.toggleable)
        self._theme = theme

        spec = KnobRenderSpec(
            mode=mode,
            size=options.size,
            label=options.label,
            show_value_labels=options.show_value_labels and isinstance(mode, Bounded),
            value_labels=tuple(options.value_labels) if options.value_labels is not None else None,
            tick_count=options.tick_count,
            glow=options.glow,
            toggleable=options.toggleable,
            theme=theme,
        )
        rendered = renderer.render_knob(spec)

        expected = [KNOB_DIAL]
        if options.glow:
            expected.append(KNOB_GLOW)
        if options.toggleable:
            expected.append(KNOB_POWER)

        super().__init__(
            target,
            model=model,
            rendered=rendered,
            sensitivity=sensitivity,
            pixels_per_range=sensitivity.pixels_per_full_range,
            value_range=value_range(mode),
            enabled=self._gate.allows_updates,
            class_name=options.class_name,
            expected_handles=expected,
        )

    @property
    def mode(self) -> RangeMode:
        return self._model.mode

    def get_angle(self) -> float:
        return self._model.angle

    def is_powered(self) -> bool:
        return self._gate.powered

    def set_powered(self, powered: bool) -> None:
        if self._destroyed:
            LOGGER.warning("Knob.set_powered: control has been destroyed")
            return
        if self._gate.set_powered(powered):
            self._power_changed()

    def toggle(self) -> None:
        if self._destroyed:
            LOGGER.warning("Knob.toggle: control has been destroyed")
            return
        self._gate.toggle()
        self._power_changed()

    def _power_changed(self) -> None:
        self._update_visuals()
        self._toggle_notifier.notify(
            KnobToggleEvent(powered=self._gate.powered, value=self._model.value, knob=self)
        )

    def _on_click(self) -> None:
        if self._gate.toggleable:
            self.toggle()

    def _change_event(self, previous_value: float) -> KnobChangeEvent:
        return KnobChangeEvent(
            value=self._model.value,
            previous_value=previous_value,
            angle=self._model.angle,
            powered=self._gate.powered,
            knob=self,
        )

    def _update_visuals(self) -> None:
        self._set_style(KNOB_DIAL, "transform", f"rotate({self._model.angle}deg)")
        powered = self._gate.powered
        self._set_style(KNOB_GLOW, "opacity", "1" if powered else "0")
        self._set_style(
            KNOB_POWER,
            "fill",
            self._theme.power_led_on if powered else self._theme.led_off,
        )
