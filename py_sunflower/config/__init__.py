"""
Configuration modules for point generation.
"""

from .config import settings, Settings
from .controls import CONTROL_RANGES, ControlRange, ControlSettings, clamp_control

__all__ = ['settings', 'Settings', 'CONTROL_RANGES', 'ControlRange', 'ControlSettings', 'clamp_control']
