from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ToggleGate:
    """Knob power state; gates drag-driven value updates when toggleable."""

    powered: bool = True
    toggleable: bool = False

    def __post_init__(self) -> None:
        self.powered = bool(self.powered)
        self.toggleable = bool(self.toggleable)

    def allows_updates(self) -> bool:
        return self.powered or not self.toggleable

    def toggle(self) -> bool:
        self.powered = not self.powered
        return self.powered

    def set_powered(self, powered: bool) -> bool:
        """Apply `powered`; returns True only when the state changed."""

        powered = bool(powered)
        if powered == self.powered:
            return False
        self.powered = powered
        return True
