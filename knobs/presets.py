"""Factory functions for commonly used knob layouts.

Caller options always win over the preset's own values.
"""

from __future__ import annotations

from typing import Any

from .controls.knob import Knob, KnobOptions
from .controls.renderer import KnobRenderer
from .mount import Container, ContainerLookup


def _create(
    container: Container | str,
    preset: dict[str, Any],
    options: dict[str, Any],
    renderer: KnobRenderer,
    lookup: ContainerLookup | None,
) -> Knob:
    merged = {**preset, **options}
    return Knob(container, KnobOptions(**merged), renderer=renderer, lookup=lookup)


def create_volume_knob(
    container: Container | str,
    *,
    renderer: KnobRenderer,
    lookup: ContainerLookup | None = None,
    **options: Any,
) -> Knob:
    """0-10 in tenths, like a guitar amp volume pot."""

    preset = {"mode": "bounded", "min": 0, "max": 10, "step": 0.1, "label": "Volume"}
    return _create(container, preset, options, renderer, lookup)


def create_spinal_tap_knob(
    container: Container | str,
    *,
    renderer: KnobRenderer,
    lookup: ContainerLookup | None = None,
    **options: Any,
) -> Knob:
    """This one goes to 11."""

    preset = {
        "mode": "bounded",
        "min": 0,
        "max": 11,
        "step": 1,
        "tick_count": 12,
        "value_labels": tuple(str(i) for i in range(12)),
    }
    return _create(container, preset, options, renderer, lookup)


def create_infinite_knob(
    container: Container | str,
    *,
    renderer: KnobRenderer,
    lookup: ContainerLookup | None = None,
    **options: Any,
) -> Knob:
    preset = {"mode": "infinite", "show_value_labels": False}
    return _create(container, preset, options, renderer, lookup)


def create_min_only_knob(
    container: Container | str,
    *,
    renderer: KnobRenderer,
    lookup: ContainerLookup | None = None,
    **options: Any,
) -> Knob:
    preset = {"mode": "min-only", "min": 0, "show_value_labels": False}
    return _create(container, preset, options, renderer, lookup)


def create_pan_knob(
    container: Container | str,
    *,
    renderer: KnobRenderer,
    lookup: ContainerLookup | None = None,
    **options: Any,
) -> Knob:
    """-100 (left) to +100 (right), centred."""

    preset = {
        "mode": "bounded",
        "min": -100,
        "max": 100,
        "value": 0,
        "step": 1,
        "tick_count": 5,
        "value_labels": ("L", "", "C", "", "R"),
        "label": "Pan",
    }
    return _create(container, preset, options, renderer, lookup)


def create_frequency_knob(
    container: Container | str,
    *,
    renderer: KnobRenderer,
    lookup: ContainerLookup | None = None,
    **options: Any,
) -> Knob:
    preset = {
        "mode": "bounded",
        "min": 0,
        "max": 100,
        "value": 50,
        "step": 1,
        "tick_count": 5,
        "value_labels": ("20", "200", "2k", "8k", "20k"),
        "label": "Freq",
    }
    return _create(container, preset, options, renderer, lookup)
