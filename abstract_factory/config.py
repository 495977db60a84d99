"""
Centralized Configuration Module

Application constants, logging configuration, and demo settings.
Import from here instead of hardcoding values.
"""

import os
import logging
from pathlib import Path
from typing import List, Optional
from dotenv import load_dotenv

# ============================================================================
# Load default .env at module import time
# ============================================================================
load_dotenv()

logger = logging.getLogger(__name__)

# ============================================================================
# Environment Loading
# ============================================================================

def load_environment(env_file: str) -> bool:
    """
    Load an extra .env file over the current environment.

    Settings below are read at call time, so values from this file
    apply to everything configured afterwards.

    Returns:
        True if the file was found and loaded
    """
    if not Path(env_file).is_file():
        logger.warning(f"Environment file not found: {env_file}")
        return False

    load_dotenv(env_file, override=True)
    logger.info(f"Loaded environment from: {env_file}")
    return True


# ============================================================================
# Application Constants
# ============================================================================

class AppConfig:
    """Application-wide configuration constants"""

    APP_NAME = "Abstract Factory Demo"
    APP_VERSION = "1.0.0"
    APP_DESCRIPTION = "Run the same client code against every product family factory"

    OUTPUT_FORMATS = ("text", "json")

    @classmethod
    def get_default_output_format(cls) -> str:
        """
        Get output format from DEMO_FORMAT.

        Unsupported values fall back to 'text'.
        """
        output_format = os.getenv("DEMO_FORMAT", "text").strip().lower()
        if output_format not in cls.OUTPUT_FORMATS:
            logger.warning(f"Unsupported DEMO_FORMAT '{output_format}', using 'text'")
            return "text"
        return output_format


class DemoConfig:
    """Which product families the demo runs"""

    @classmethod
    def get_variant_list(cls) -> List[str]:
        """
        Get list of variants from DEMO_VARIANTS.

        Empty means every registered variant.
        """
        variants = os.getenv("DEMO_VARIANTS", "")
        return [v.strip() for v in variants.split(",") if v.strip()]


# ============================================================================
# Logging Configuration
# ============================================================================

class LogConfig:
    """Logging configuration"""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # Verbose runs show where each factory/product log line came from
    DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

    @classmethod
    def get_log_level(cls) -> int:
        """Get level from LOG_LEVEL (default WARNING)"""
        name = os.getenv("LOG_LEVEL", "WARNING").strip().upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.WARNING

    @classmethod
    def get_log_file(cls) -> Optional[str]:
        """Get optional log file path from LOG_FILE"""
        return os.getenv("LOG_FILE") or None


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """
    Configure application logging.

    Records go to stderr so stdout carries only the demo output.

    Args:
        verbose: Enable verbose (DEBUG) logging
        log_file: Optional log file path, overrides LOG_FILE
    """
    log_level = logging.DEBUG if verbose else LogConfig.get_log_level()
    log_format = LogConfig.DETAILED_FORMAT if verbose else LogConfig.LOG_FORMAT

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=LogConfig.LOG_DATE_FORMAT
    )
    logging.getLogger().setLevel(log_level)

    file_path = log_file or LogConfig.get_log_file()
    if file_path:
        file_handler = logging.FileHandler(file_path)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(log_format, LogConfig.LOG_DATE_FORMAT))
        logging.getLogger().addHandler(file_handler)
        logger.info(f"Logging to file: {file_path}")

    logger.info(f"Logging configured: level={logging.getLevelName(log_level)}")


__all__ = [
    'AppConfig',
    'DemoConfig',
    'LogConfig',
    'load_environment',
    'setup_logging',
]
