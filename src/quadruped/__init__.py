"""
Inverse kinematics and foot-position state for a four legged walking robot.
"""

__version__ = '0.1.0'
