from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from .controls.interaction import PointerEvent
    from .controls.renderer import VisualHandle


PointerListener = Callable[["PointerEvent"], None]


class ContainerNotFoundError(LookupError):
    """Raised when a control is constructed against a mount point that does not exist."""


class EventTarget(Protocol):
    """Input-layer surface that delivers typed pointer events to listeners."""

    def add_listener(self, event_type: str, listener: PointerListener) -> None:
        ...

    def remove_listener(self, event_type: str, listener: PointerListener) -> None:
        ...


class Container(EventTarget, Protocol):
    """Mount point owning layout and teardown for one control."""

    def mount(self, root: VisualHandle) -> None:
        ...

    def clear(self) -> None:
        ...

    def set_style(self, name: str, value: str) -> None:
        ...

    def add_class(self, class_name: str) -> None:
        ...

    def capture_target(self) -> EventTarget:
        """Surface that keeps delivering move/up events outside the container bounds."""
        ...


ContainerLookup = Callable[[str], "Container | None"]


def resolve_container(target: Container | str, lookup: ContainerLookup | None = None) -> Container:
    if isinstance(target, str):
        if lookup is None:
            raise ContainerNotFoundError(f"Container not found: {target} (no lookup configured)")
        found = lookup(target)
        if found is None:
            raise ContainerNotFoundError(f"Container not found: {target}")
        return found
    if target is None:
        raise ContainerNotFoundError("Container not found: None")
    return target
