"""
Specialized loggers for different subsystems.
Provides clean interfaces for specific logging needs.
"""

import logging
import json
from typing import Dict, Any, Optional


# --- Logger classes ---
class SystemLogger:
    """Logger for system operations (startup, dispatch failures, driver)."""

    @staticmethod
    def error(message: str):
        """Log error-level system events."""
        logger = logging.getLogger('pet.system')
        logger.error(f"System Error: {message}")

    @staticmethod
    def warning(message: str):
        """Log warning-level system events."""
        logger = logging.getLogger('pet.system')
        logger.warning(f"System Warning: {message}")

    @staticmethod
    def debug(message: str):
        """Log debug-level system events."""
        logger = logging.getLogger('pet.system')
        logger.debug(f"System Debug: {message}")

    @staticmethod
    def info(message: str):
        """Log info-level system events."""
        logger = logging.getLogger('pet.system')
        logger.info(f"System Info: {message}")

class InternalLogger:
    """Logger for internal state changes."""
    
    @staticmethod
    def log_state_change(component: str, old_value: Any, new_value: Any):
        logger = logging.getLogger('pet.internal')
        logger.debug(
            f"State Change: {component}\n"
            f"  From: {old_value}\n"
            f"  To:   {new_value}"
        )
        logger.info(f"Internal: {component} changed to {new_value}")
    
    @staticmethod
    def log_action(action: str, context: Optional[Dict] = None):
        logger = logging.getLogger('pet.internal')
        if context:
            logger.debug(
                f"Action: {action}\n"
                f"Context: {json.dumps(context, indent=2)}"
            )
        else:
            logger.debug(f"Action: {action}")
        logger.info(f"Internal: Performed {action}")

class EventLogger:
    """Logger for the event dispatcher."""

    @staticmethod
    def error(message: str):
        logger = logging.getLogger('pet.events')
        logger.error(f"Event Error: {message}")

    @staticmethod
    def log_event_dispatch(event_type: str, data: Any = None, metadata: Optional[Dict] = None):
        logger = logging.getLogger('pet.events')
        components = [f"Event Dispatched: {event_type}"]
        if data is not None:
            if isinstance(data, dict):
                processed_data = {k: str(v) for k, v in data.items()}
                components.append(f"Data:\n{json.dumps(processed_data, indent=2)}")
            else:
                components.append(f"Data: {data}")
        if metadata:
            meta_str = json.dumps({k: str(v) for k, v in metadata.items()}, indent=2)
            components.append(f"Metadata:\n{meta_str}")
        logger.debug('\n'.join(components))
        logger.info(f"Dispatched: {event_type}")
