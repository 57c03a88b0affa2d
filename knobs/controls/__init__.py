"""Knob and slider controls plus their interaction contracts."""

from .base import ValueControl
from .drag import DragController, DragState, GestureKind, InputCapture
from .interaction import PointerEvent, PointerPhase, PointerSource, parse_pointer_event
from .knob import Knob, KnobChangeEvent, KnobOptions, KnobToggleEvent
from .notifier import ChangeNotifier
from .renderer import (
    KnobRenderer,
    KnobRenderSpec,
    RenderedControl,
    SliderRenderer,
    SliderRenderSpec,
    VisualHandle,
    default_value_labels,
    tick_angles,
    track_offsets,
)
from .slider import Slider, SliderChangeEvent, SliderOptions, ToggleChangeEvent, format_value
from .toggle import ToggleGate

__all__ = [
    "ChangeNotifier",
    "DragController",
    "DragState",
    "GestureKind",
    "InputCapture",
    "Knob",
    "KnobChangeEvent",
    "KnobOptions",
    "KnobRenderSpec",
    "KnobRenderer",
    "KnobToggleEvent",
    "PointerEvent",
    "PointerPhase",
    "PointerSource",
    "RenderedControl",
    "Slider",
    "SliderChangeEvent",
    "SliderOptions",
    "SliderRenderSpec",
    "SliderRenderer",
    "ToggleChangeEvent",
    "ToggleGate",
    "ValueControl",
    "VisualHandle",
    "default_value_labels",
    "format_value",
    "parse_pointer_event",
    "tick_angles",
    "track_offsets",
]
