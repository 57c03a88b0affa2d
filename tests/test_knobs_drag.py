from __future__ import annotations

import unittest

from knobs.controls.drag import CAPTURE_EVENTS, DragController, InputCapture
from knobs.controls.interaction import PointerEvent


class _CaptureSurface:
    def __init__(self) -> None:
        self.listeners: dict[str, list] = {}

    def add_listener(self, event_type: str, listener) -> None:
        self.listeners.setdefault(event_type, []).append(listener)

    def remove_listener(self, event_type: str, listener) -> None:
        bucket = self.listeners.get(event_type, [])
        if listener in bucket:
            bucket.remove(listener)

    def count(self) -> int:
        return sum(len(bucket) for bucket in self.listeners.values())


def _down(y: float, **kwargs) -> PointerEvent:
    return PointerEvent(phase="down", y=y, **kwargs)


def _move(y: float, **kwargs) -> PointerEvent:
    return PointerEvent(phase="move", y=y, **kwargs)


def _up(y: float = 0.0) -> PointerEvent:
    return PointerEvent(phase="up", y=y)


class DragControllerTests(unittest.TestCase):
    def _controller(self, enabled=None) -> tuple[DragController, list[float], list[str]]:
        deltas: list[float] = []
        states: list[str] = []
        controller = DragController(
            pixels_per_range=400,
            value_range=10,
            fast_multiplier=4,
            precise_multiplier=0.25,
            on_delta=deltas.append,
            enabled=enabled,
            on_state_change=states.append,
        )
        return controller, deltas, states

    def test_idle_dragging_idle_cycle(self) -> None:
        controller, deltas, states = self._controller()
        self.assertEqual(controller.state, "idle")
        self.assertFalse(controller.on_pointer_move(_move(10)))

        self.assertTrue(controller.on_pointer_down(_down(300)))
        self.assertTrue(controller.is_dragging)
        self.assertTrue(controller.on_pointer_move(_move(100)))
        self.assertEqual(controller.on_pointer_up(_up(100)), "drag")
        self.assertEqual(controller.state, "idle")
        self.assertEqual(deltas, [5.0])
        self.assertEqual(states, ["dragging", "idle"])

    def test_moving_down_decreases_value(self) -> None:
        controller, deltas, _ = self._controller()
        controller.on_pointer_down(_down(100))
        controller.on_pointer_move(_move(140))
        self.assertEqual(deltas, [-1.0])

    def test_modifier_multipliers_compose(self) -> None:
        controller, _, _ = self._controller()
        plain = controller.value_delta(40)
        self.assertEqual(plain, 1.0)
        self.assertEqual(controller.value_delta(40, fast=True), 4.0)
        self.assertAlmostEqual(controller.value_delta(40, precise=True), 0.25)
        self.assertAlmostEqual(controller.value_delta(40, fast=True, precise=True), 1.0)

    def test_touch_moves_ignore_modifiers(self) -> None:
        controller, deltas, _ = self._controller()
        controller.on_pointer_down(_down(100, source="touch"))
        controller.on_pointer_move(_move(60, source="touch", fast=True, precise=True))
        self.assertEqual(deltas, [1.0])

    def test_secondary_buttons_and_multi_touch_do_not_start_a_drag(self) -> None:
        controller, _, _ = self._controller()
        self.assertFalse(controller.on_pointer_down(_down(0, button=2)))
        self.assertFalse(controller.on_pointer_down(_down(0, source="touch", touch_count=2)))
        self.assertEqual(controller.state, "idle")

    def test_multi_touch_moves_are_ignored_mid_gesture(self) -> None:
        controller, deltas, _ = self._controller()
        controller.on_pointer_down(_down(100, source="touch"))
        self.assertFalse(controller.on_pointer_move(_move(0, source="touch", touch_count=2)))
        controller.on_pointer_move(_move(60, source="touch"))
        self.assertEqual(deltas, [1.0])

    def test_disabled_gate_consumes_samples_without_updates(self) -> None:
        powered = [False]
        controller, deltas, _ = self._controller(enabled=lambda: powered[0])
        controller.on_pointer_down(_down(300))
        self.assertFalse(controller.on_pointer_move(_move(200)))
        powered[0] = True
        controller.on_pointer_move(_move(160))
        self.assertEqual(deltas, [1.0])

    def test_click_requires_no_movement(self) -> None:
        controller, _, _ = self._controller()
        controller.on_pointer_down(_down(50))
        controller.on_pointer_move(_move(50))
        self.assertEqual(controller.on_pointer_up(_up(50)), "click")

        controller.on_pointer_down(_down(50))
        controller.on_pointer_move(_move(49))
        controller.on_pointer_move(_move(50))
        self.assertEqual(controller.on_pointer_up(_up(50)), "drag")

    def test_moves_while_gated_still_count_as_a_drag(self) -> None:
        controller, _, _ = self._controller(enabled=lambda: False)
        controller.on_pointer_down(_down(50))
        controller.on_pointer_move(_move(10))
        self.assertEqual(controller.on_pointer_up(_up(10)), "drag")

    def test_cancel_ends_gesture_without_click(self) -> None:
        controller, _, states = self._controller()
        controller.on_pointer_down(_down(50))
        self.assertIsNone(controller.on_pointer_up(PointerEvent(phase="cancel", y=50)))
        self.assertEqual(controller.state, "idle")
        self.assertEqual(states, ["dragging", "idle"])

    def test_down_suppresses_platform_default(self) -> None:
        controller, _, _ = self._controller()
        calls: list[str] = []
        controller.on_pointer_down(PointerEvent(phase="down", y=0, prevent_default=lambda: calls.append("x")))
        self.assertEqual(calls, ["x"])

    def test_capture_is_held_only_while_dragging(self) -> None:
        controller, _, _ = self._controller()
        surface = _CaptureSurface()
        capture = InputCapture(surface, {event_type: print for event_type in CAPTURE_EVENTS})
        controller.bind_capture(capture)

        controller.on_pointer_down(_down(0))
        self.assertTrue(capture.active)
        self.assertEqual(surface.count(), len(CAPTURE_EVENTS))
        controller.cancel()
        self.assertFalse(capture.active)
        self.assertEqual(surface.count(), 0)

    def test_rejects_non_positive_pixels_per_range(self) -> None:
        with self.assertRaises(ValueError):
            DragController(
                pixels_per_range=0,
                value_range=1,
                fast_multiplier=1,
                precise_multiplier=1,
                on_delta=lambda delta: None,
            )


class InputCaptureTests(unittest.TestCase):
    def test_acquire_and_release_are_idempotent(self) -> None:
        surface = _CaptureSurface()
        capture = InputCapture(surface, {"pointer_move": print, "pointer_up": print})
        capture.acquire()
        capture.acquire()
        self.assertEqual(surface.count(), 2)
        capture.release()
        capture.release()
        self.assertEqual(surface.count(), 0)

    def test_context_manager_releases_on_error(self) -> None:
        surface = _CaptureSurface()
        capture = InputCapture(surface, {"pointer_move": print})
        with self.assertRaises(RuntimeError):
            with capture:
                self.assertEqual(surface.count(), 1)
                raise RuntimeError("boom")
        self.assertFalse(capture.active)
        self.assertEqual(surface.count(), 0)


if __name__ == "__main__":
    unittest.main()
