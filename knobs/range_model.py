from __future__ import annotations

from dataclasses import dataclass
import math
import numbers
from typing import Union


TOTAL_ROTATION_DEGREES = 270.0
REFERENCE_VALUE_RANGE = 10.0
DEGREES_PER_UNIT = TOTAL_ROTATION_DEGREES / REFERENCE_VALUE_RANGE

DEFAULT_BOUNDED_MIN = 0.0
DEFAULT_BOUNDED_MAX = 10.0
DEFAULT_START_ANGLE = -135.0
DEFAULT_END_ANGLE = 135.0

_STEP_TOLERANCE = 1e-9


def _require_finite(name: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number")
    return float(value)


@dataclass(frozen=True)
class Bounded:
    """Value confined to `[min, max]`, swept from `start_angle` to `end_angle`."""

    min: float = DEFAULT_BOUNDED_MIN
    max: float = DEFAULT_BOUNDED_MAX
    start_angle: float = DEFAULT_START_ANGLE
    end_angle: float = DEFAULT_END_ANGLE

    def __post_init__(self) -> None:
        for name in ("min", "max", "start_angle", "end_angle"):
            object.__setattr__(self, name, _require_finite(f"Bounded {name}", getattr(self, name)))
        if self.max <= self.min:
            raise ValueError("Bounded max must be > min")


@dataclass(frozen=True)
class MinOnly:
    min: float = DEFAULT_BOUNDED_MIN

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", _require_finite("MinOnly min", self.min))


@dataclass(frozen=True)
class Infinite:
    pass


RangeMode = Union[Bounded, MinOnly, Infinite]

_MODE_NAMES = {"bounded", "min-only", "min_only", "infinite"}


def mode_from_options(
    name: str,
    *,
    min: float | None = None,
    max: float | None = None,
    start_angle: float | None = None,
    end_angle: float | None = None,
) -> RangeMode:
    """Build a mode variant from option-style names, defaulting missing bounds."""

    if name not in _MODE_NAMES:
        raise ValueError(f"Unknown mode: {name!r}")
    if name == "bounded":
        return Bounded(
            min=DEFAULT_BOUNDED_MIN if min is None else min,
            max=DEFAULT_BOUNDED_MAX if max is None else max,
            start_angle=DEFAULT_START_ANGLE if start_angle is None else start_angle,
            end_angle=DEFAULT_END_ANGLE if end_angle is None else end_angle,
        )
    if name in ("min-only", "min_only"):
        return MinOnly(min=DEFAULT_BOUNDED_MIN if min is None else min)
    return Infinite()


def _unknown_mode(mode: object) -> TypeError:
    return TypeError(f"unsupported range mode: {type(mode).__name__}")


def validate_step(step: float) -> float:
    if isinstance(step, bool) or not isinstance(step, numbers.Real) or not math.isfinite(step):
        raise ValueError("step must be a finite number")
    if step <= 0:
        raise ValueError("step must be > 0")
    return float(step)


def clamp(mode: RangeMode, raw: float) -> float:
    if isinstance(mode, Bounded):
        return min(max(raw, mode.min), mode.max)
    if isinstance(mode, MinOnly):
        return max(raw, mode.min)
    if isinstance(mode, Infinite):
        return raw
    raise _unknown_mode(mode)


def _round_half_up(x: float) -> float:
    return float(math.floor(x + 0.5))


def quantize(raw: float, step: float, mode: RangeMode | None = None) -> float:
    """Snap `raw` to the nearest multiple of `step`.

    With a mode, a multiple that rounds past a bound is pulled back one step
    inside. If no multiple of `step` lies within the bounds at all, the raw
    value (already clamped by the caller) is returned unchanged.
    """

    step = validate_step(step)
    value = _round_half_up(raw / step) * step
    if mode is None or isinstance(mode, Infinite):
        return value
    if not isinstance(mode, (Bounded, MinOnly)):
        raise _unknown_mode(mode)

    low = mode.min
    high = mode.max if isinstance(mode, Bounded) else math.inf
    tolerance = step * _STEP_TOLERANCE
    if value < low:
        value = low if low - value <= tolerance else math.ceil(low / step - _STEP_TOLERANCE) * step
    if value > high:
        value = high if value - high <= tolerance else math.floor(high / step + _STEP_TOLERANCE) * step
    # k * step can land a hair outside a bound that is itself a multiple.
    if low - tolerance <= value < low:
        value = low
    if high < value <= high + tolerance:
        value = high
    if value < low or value > high:
        return raw
    return value


def value_range(mode: RangeMode) -> float:
    if isinstance(mode, Bounded):
        return mode.max - mode.min
    if isinstance(mode, (MinOnly, Infinite)):
        return REFERENCE_VALUE_RANGE
    raise _unknown_mode(mode)


def to_angle(mode: RangeMode, raw: float) -> float:
    """Rotation in degrees (0 = top, clockwise) for a raw value."""

    if isinstance(mode, Bounded):
        # Endpoints are returned verbatim so min/max land exactly on the stops.
        if raw <= mode.min:
            return mode.start_angle
        if raw >= mode.max:
            return mode.end_angle
        normalized = (raw - mode.min) / (mode.max - mode.min)
        return mode.start_angle + normalized * (mode.end_angle - mode.start_angle)
    if isinstance(mode, MinOnly):
        return (raw - mode.min) * DEGREES_PER_UNIT
    if isinstance(mode, Infinite):
        return raw * DEGREES_PER_UNIT
    raise _unknown_mode(mode)


def to_position(raw: float, *, minimum: float, maximum: float, track_length: float, top: float = 0.0) -> float:
    """Vertical pixel offset on a track, with the maximum at the top."""

    if maximum <= minimum:
        raise ValueError("track maximum must be > minimum")
    normalized = (raw - minimum) / (maximum - minimum)
    return top + track_length * (1.0 - normalized)


@dataclass
class ValueModel:
    """Raw accumulator plus the quantized value reported to subscribers."""

    mode: RangeMode
    step: float
    raw: float
    value: float

    @classmethod
    def create(cls, mode: RangeMode, step: float, initial: float) -> "ValueModel":
        step = validate_step(step)
        initial = _require_finite("initial value", initial)
        raw = clamp(mode, initial)
        return cls(mode=mode, step=step, raw=raw, value=quantize(raw, step, mode))

    @property
    def angle(self) -> float:
        return to_angle(self.mode, self.raw)

    def update(self, candidate: float) -> bool:
        """Fold a candidate raw value in. Returns True when `value` changed."""

        previous = self.value
        self.raw = clamp(self.mode, candidate)
        self.value = quantize(self.raw, self.step, self.mode)
        return self.value != previous
