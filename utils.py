# utils.py
"""
Utility functions shared across the application.

Logging setup, configuration file loading and the HSLA color conversion used
for walker color tags. None of these belong to a specific domain like motion
or rendering.
"""
import colorsys
import json
import logging
import logging.handlers
import os
from typing import Any, Dict, List, Optional, Tuple

# --- Data Contracts ---
#
# setup_logging(config: Dict[str, Any]) -> None:
#   - Inputs:
#     - config: A dictionary with an optional "logging" section holding
#       "level", "format", "log_file", "max_bytes" and "backup_count" keys.
#       A null "log_file" disables the file handler.
#   - Side Effects: Replaces the handlers of the root logger. Creates the
#     log directory if needed.
#
# load_config(path: str) -> Dict[str, Any]:
#   - Outputs: The parsed JSON object.
#   - Raises: FileNotFoundError, json.JSONDecodeError, ValueError when the
#     top-level JSON value is not an object.
#
# hsla_to_rgba(hue, saturation, lightness, alpha) -> Tuple[int, int, int, int]:
#   - Inputs: hue in degrees (any real, taken mod 360), saturation and
#     lightness in [0, 1], alpha in [0, 1].
#   - Outputs: 8-bit RGBA channels.

LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUP_COUNT = 5


def _rotating_file_handler(log_config: Dict[str, Any]) -> Optional[logging.Handler]:
    """Builds the rotating file handler, or None when file logging is disabled."""
    log_file_path = log_config.get('log_file', 'logs/brownian.log')
    if not log_file_path:
        return None

    log_dir = os.path.dirname(log_file_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    return logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=int(log_config.get('max_bytes', LOG_FILE_MAX_BYTES)),
        backupCount=int(log_config.get('backup_count', LOG_FILE_BACKUP_COUNT)),
        encoding='utf-8',
    )


def setup_logging(config: Dict[str, Any]) -> None:
    """
    Configures the root logger from the "logging" section of the config.

    Records go to the console and, unless "log_file" is null, to a rotating
    file whose size limit and backup count can be set in the same section.
    """
    log_config = config.get('logging', {})
    log_level = str(log_config.get('level', 'INFO')).upper()
    formatter = logging.Formatter(
        log_config.get('format', '%(asctime)s - %(levelname)s - %(message)s')
    )

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    file_handler = _rotating_file_handler(log_config)
    if file_handler is not None:
        handlers.append(file_handler)

    root = logging.getLogger()
    root.setLevel(log_level)
    # Re-initialization replaces handlers instead of stacking duplicates
    for old in list(root.handlers):
        root.removeHandler(old)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.info("Logging system initialized.")
    logging.debug(
        f"Log level {log_level}; file "
        f"{file_handler.baseFilename if file_handler is not None else '<disabled>'}."
    )


def load_config(path: str) -> Dict[str, Any]:
    """Loads a JSON configuration file."""
    logging.info(f"Loading configuration from {path}...")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except FileNotFoundError:
        logging.error(f"Configuration file not found at {path}.")
        raise
    except json.JSONDecodeError:
        logging.error(f"Error decoding JSON from {path}.")
        raise

    if not isinstance(config, dict):
        msg = f"Configuration in {path} must be a JSON object, got {type(config).__name__}."
        logging.error(msg)
        raise ValueError(msg)

    logging.info("Configuration loaded successfully.")
    return config


def hsla_to_rgba(hue: float, saturation: float, lightness: float, alpha: float) -> Tuple[int, int, int, int]:
    """Converts a CSS-style HSLA color to 8-bit RGBA."""
    # colorsys takes hue in [0, 1) and orders the arguments H, L, S
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360.0, lightness, saturation)
    return (
        int(round(r * 255)),
        int(round(g * 255)),
        int(round(b * 255)),
        int(round(alpha * 255)),
    )
