"""
Formatters for different log types.
Handles consistent formatting across different logging streams.
"""

import logging

class InternalFormatter(logging.Formatter):
    """Formatter for internal and system events."""
    
    def format(self, record):
        timestamp = self.formatTime(record)
        return (
            f"[{timestamp}] {record.levelname:8} "
            f"{record.name.split('.')[-1]:10} | {record.getMessage()}"
        )

class EventFormatter(logging.Formatter):
    """Formatter for event dispatcher"""
    
    def format(self, record):
        timestamp = self.formatTime(record)
        return f"[{timestamp}] {record.levelname:8} EVENT | {record.getMessage()}"
