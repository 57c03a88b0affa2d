from __future__ import annotations

from dataclasses import asdict, dataclass, replace
import math
import numbers
from typing import Any, Mapping


@dataclass(frozen=True)
class SensitivityConfig:
    """Drag sensitivity shared by knobs and sliders.

    `pixels_per_full_range` is the vertical travel that sweeps a knob across its
    whole value range. The multipliers apply while shift (fast) or ctrl
    (precise) is held and compose when both are held.
    """

    pixels_per_full_range: float = 400.0
    fast_multiplier: float = 4.0
    precise_multiplier: float = 0.25


DEFAULT_SENSITIVITY = SensitivityConfig()

_global_sensitivity: SensitivityConfig = DEFAULT_SENSITIVITY


def validate_sensitivity(
    overrides: Mapping[str, Any] | None = None,
    base: SensitivityConfig = DEFAULT_SENSITIVITY,
) -> SensitivityConfig:
    """Merge overrides onto `base`, field by field.

    `None` values fall through to `base`, so per-control options can be passed
    straight in without filtering.
    """

    raw: dict[str, Any] = asdict(base)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown sensitivity option: {key}")
            if value is None:
                continue
            raw[key] = value

    for key, value in raw.items():
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise ValueError(f"Sensitivity `{key}` must be a positive number")
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"Sensitivity `{key}` must be a positive number")

    return SensitivityConfig(
        pixels_per_full_range=float(raw["pixels_per_full_range"]),
        fast_multiplier=float(raw["fast_multiplier"]),
        precise_multiplier=float(raw["precise_multiplier"]),
    )


def global_sensitivity() -> SensitivityConfig:
    return _global_sensitivity


def configure_knobs(overrides: Mapping[str, Any] | None = None, **kwargs: Any) -> SensitivityConfig:
    """Merge a partial override into the process-wide defaults.

    Only controls constructed afterwards see the new values; existing controls
    keep the snapshot they resolved at construction.
    """

    global _global_sensitivity
    merged: dict[str, Any] = dict(overrides or {})
    merged.update(kwargs)
    _global_sensitivity = validate_sensitivity(merged, base=_global_sensitivity)
    return _global_sensitivity


def reset_global_sensitivity() -> SensitivityConfig:
    global _global_sensitivity
    _global_sensitivity = DEFAULT_SENSITIVITY
    return _global_sensitivity


def resolve_sensitivity(
    overrides: Mapping[str, Any] | None = None,
    defaults: SensitivityConfig | None = None,
) -> SensitivityConfig:
    """Snapshot the sensitivity a control uses for its whole lifetime."""

    base = _global_sensitivity if defaults is None else defaults
    if not overrides:
        return replace(base)
    return validate_sensitivity(overrides, base=base)
