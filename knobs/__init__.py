"""Rotary knob and vertical fader controls for screen-based interfaces."""

from .config import (
    DEFAULT_SENSITIVITY,
    SensitivityConfig,
    configure_knobs,
    global_sensitivity,
    reset_global_sensitivity,
    resolve_sensitivity,
    validate_sensitivity,
)
from .controls.knob import Knob, KnobChangeEvent, KnobOptions, KnobToggleEvent
from .controls.slider import Slider, SliderChangeEvent, SliderOptions, ToggleChangeEvent
from .mount import Container, ContainerNotFoundError, EventTarget, resolve_container
from .presets import (
    create_frequency_knob,
    create_infinite_knob,
    create_min_only_knob,
    create_pan_knob,
    create_spinal_tap_knob,
    create_volume_knob,
)
from .range_model import (
    DEGREES_PER_UNIT,
    REFERENCE_VALUE_RANGE,
    TOTAL_ROTATION_DEGREES,
    Bounded,
    Infinite,
    MinOnly,
    RangeMode,
    ValueModel,
    clamp,
    mode_from_options,
    quantize,
    to_angle,
    to_position,
    value_range,
)
from .style.theme import DEFAULT_TOKENS, ThemeTokens, validate_theme_tokens

__all__ = [
    "Bounded",
    "Container",
    "ContainerNotFoundError",
    "DEFAULT_SENSITIVITY",
    "DEFAULT_TOKENS",
    "DEGREES_PER_UNIT",
    "EventTarget",
    "Infinite",
    "Knob",
    "KnobChangeEvent",
    "KnobOptions",
    "KnobToggleEvent",
    "MinOnly",
    "REFERENCE_VALUE_RANGE",
    "RangeMode",
    "SensitivityConfig",
    "Slider",
    "SliderChangeEvent",
    "SliderOptions",
    "TOTAL_ROTATION_DEGREES",
    "ThemeTokens",
    "ToggleChangeEvent",
    "ValueModel",
    "clamp",
    "configure_knobs",
    "create_frequency_knob",
    "create_infinite_knob",
    "create_min_only_knob",
    "create_pan_knob",
    "create_spinal_tap_knob",
    "create_volume_knob",
    "global_sensitivity",
    "mode_from_options",
    "quantize",
    "reset_global_sensitivity",
    "resolve_container",
    "resolve_sensitivity",
    "to_angle",
    "to_position",
    "validate_sensitivity",
    "validate_theme_tokens",
]
