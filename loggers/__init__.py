"""
Virtual pet logging system.
Provides structured logging for different subsystems.
"""

from .manager import LogManager
from .loggers import InternalLogger, SystemLogger, EventLogger

__all__ = ['LogManager', 'InternalLogger', 'SystemLogger', 'EventLogger']
