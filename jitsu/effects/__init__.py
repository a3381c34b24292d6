"""Power effect handlers

Each card power has its own PowerEffect class, routed by PowerEffectRegistry.
"""

from .base import PowerEffect
from .registry import PowerEffectRegistry, apply_power, create_default_registry

__all__ = ['PowerEffect', 'PowerEffectRegistry', 'apply_power', 'create_default_registry']
