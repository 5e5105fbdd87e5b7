"""
Central logging management.
Handles logger setup and configuration.
"""

import logging
import os
from datetime import datetime
from dotenv import load_dotenv

from config import Config
from .formatters import InternalFormatter, EventFormatter

class LogManager:
    """Log management with one output stream per subsystem."""

    LOGGER_NAMES = ('pet.internal', 'pet.system', 'pet.events')

    @staticmethod
    def setup_logging():
        """Initialize all loggers with appropriate handlers and configurable levels."""
        # Load environment variables from .env file
        load_dotenv()
        
        # Mapping from level name (string) to logging level (int)
        LEVELS = {
            'CRITICAL': logging.CRITICAL,
            'ERROR': logging.ERROR,
            'WARNING': logging.WARNING,
            'INFO': logging.INFO,
            'DEBUG': logging.DEBUG,
        }

        file_logging = Config.get_file_logging()
        log_base = Config.get_log_dir()
        internal_dir = log_base / 'internal'
        system_dir = log_base / 'system'
        event_dir = log_base / 'events'
        if file_logging:
            for directory in [internal_dir, system_dir, event_dir]:
                directory.mkdir(parents=True, exist_ok=True)
            
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        
        # Each logger gets a FileHandler with UTF-8.
        config = {
            'pet.internal': (internal_dir / f"internal_{timestamp}.log", InternalFormatter()),
            'pet.system': (system_dir / f"system_{timestamp}.log", InternalFormatter()),
            'pet.events': (event_dir / f"events_{timestamp}.log", EventFormatter())
        }
        
        for logger_name, (log_file, formatter) in config.items():
            logger = logging.getLogger(logger_name)
            
            # e.g., 'pet.system' -> 'LOG_LEVEL_PET_SYSTEM'
            env_var_key = f"LOG_LEVEL_{logger_name.upper().replace('.', '_')}"
            log_level_name = os.getenv(env_var_key, 'INFO')
            log_level = LEVELS.get(log_level_name.upper(), logging.INFO)
            logger.setLevel(log_level)

            # Game text goes to the console; logs stay in files
            logger.propagate = False

            # Avoid adding duplicate handlers if this function is called more than once
            if not logger.handlers:
                if file_logging:
                    handler = logging.FileHandler(log_file, encoding='utf-8')
                    handler.setFormatter(formatter)
                else:
                    # keeps logging.lastResort from writing into the game text
                    handler = logging.NullHandler()
                logger.addHandler(handler)
