from quadruped.runtime.ik_driver import QuadrupedIkDriver
from quadruped.runtime.motion_controller import MotionController, RemoteIntent

__all__ = ["MotionController", "QuadrupedIkDriver", "RemoteIntent"]
