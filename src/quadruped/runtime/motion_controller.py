"""
Control loop that walks the feet from their current positions to a target, one bounded step per tick.
"""

from dataclasses import dataclass, field
import threading
import time
from typing import Optional

from quadruped import constants, labels
from quadruped.errors import KinematicsError
from quadruped.logger import Logger
from quadruped.motion.leg_positions import LegPositions
from quadruped.motion.vector import Vector2
from quadruped.runtime.ik_driver import QuadrupedIkDriver

log = Logger().setup_logger('Motion controller')


@dataclass(frozen=True)
class RemoteIntent:
    """Movement requested by the remote control.

    Attributes:
        direction: Planar direction, +Y forward and +X right, each component in [-1, 1].
        rotation: Turn rate, counter-clockwise positive, in [-1, 1].
    """

    direction: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0


class MotionController:
    """
    Owns the commanded foot positions and moves them towards the target on every tick.

    The target is an immutable snapshot: ``set_target`` stores a private copy and swaps it in
    under a lock, and ``tick`` reads it once. Any thread may set a new target or intent while
    the loop runs. ``stop`` may be called from any thread and disables the motors right away.

    The remote-control intent is only stored here. The gait layer polls ``controller.intent``
    every cycle, turns it into new foot targets and hands them back through ``set_target``.
    """

    def __init__(self, ik_driver: QuadrupedIkDriver):
        self._ik_driver = ik_driver
        self._configuration = ik_driver.configuration

        self._current = LegPositions.from_stance(self._configuration)
        self._target = self._current.copy()
        self._intent = RemoteIntent()

        self._target_lock = threading.Lock()
        self._stop_event = threading.Event()

        self.max_step = self._configuration.max_step
        self.failed_ticks = 0

    @property
    def current(self) -> LegPositions:
        """A copy of the last commanded foot positions."""
        return self._current.copy()

    @property
    def target(self) -> LegPositions:
        with self._target_lock:
            return self._target.copy()

    @property
    def intent(self) -> RemoteIntent:
        with self._target_lock:
            return self._intent

    @property
    def is_running(self) -> bool:
        return not self._stop_event.is_set()

    def set_target(self, positions: LegPositions) -> None:
        snapshot = positions.copy()
        with self._target_lock:
            self._target = snapshot
        log.debug(labels.MOTION_TARGET_UPDATED.format(snapshot))

    def set_intent(self, intent: RemoteIntent) -> None:
        """Record the remote-control intent for the gait layer; the controller does not interpret it."""
        with self._target_lock:
            self._intent = intent
        log.debug(labels.MOTION_INTENT_UPDATED.format(intent.direction, intent.rotation))

    def is_target_reached(self, tolerance: float = constants.DEFAULT_MOVE_TOLERANCE) -> bool:
        return self._current.move_finished(self.target, tolerance)

    def tick(self) -> bool:
        """Advance one step towards the target and command the motors.

        Returns:
            bool: True when the step was commanded, False when a leg could not be solved
            and the previous pose was held.
        """
        with self._target_lock:
            target = self._target

        next_positions = self._current.copy().move_towards(target, self.max_step)

        try:
            self._ik_driver.move_legs(next_positions)
        except KinematicsError as e:
            self.failed_ticks += 1
            log.warning(labels.MOTION_TICK_FAILED.format(e))
            return False

        self._current = next_positions
        return True

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Tick at the configured frame rate until ``stop`` is called or ``max_ticks`` ran.

        Returns:
            int: The number of ticks executed.
        """
        frame_duration = self._configuration.frame_duration
        log.info(labels.MOTION_STARTING.format(self._configuration.frame_rate_hz))

        ticks = 0
        while not self._stop_event.is_set():
            if max_ticks is not None and ticks >= max_ticks:
                break

            frame_start = time.monotonic()
            self.tick()
            ticks += 1

            elapsed = time.monotonic() - frame_start
            if elapsed > frame_duration:
                log.debug(labels.MOTION_TICK_OVERRUN.format(elapsed, frame_duration))
            else:
                self._stop_event.wait(frame_duration - elapsed)

        return ticks

    def stop(self) -> None:
        """Stop the loop and turn torque off on every motor."""
        log.info(labels.MOTION_STOPPING)
        self._stop_event.set()
        self._ik_driver.disable_motors()


__all__ = ['MotionController', 'RemoteIntent']
