"""
Configuration & Path Management
===============================
This module locates bundled run configurations and reads them from disk.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths to the example configurations
   scattered throughout the code.
2. Format: Run configurations are plain JSON documents. This module is the only
   place that parses them; everything downstream receives a dictionary.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_CONFIG_PATH (str): Absolute path to the flat-theta validation run.
"""
import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to a resource shipped at the root of the source tree.
    """
    # config.py is in src/memkit/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


def load_configuration(path: str) -> dict[str, Any]:
    """
    Read a JSON run configuration.

    Args:
        path: Path to the JSON file.

    Raises:
        ValueError: If the document is not a JSON object.

    Returns:
        The configuration mapping (``modules`` and optional ``particles``).
    """
    logger.info(f"Loading configuration from: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        msg = f"Configuration '{path}' must contain a JSON object, got {type(data).__name__}."
        logger.error(msg)
        raise ValueError(msg)
    return data


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_CONFIG_PATH: str = os.path.join(ASSETS_PATH, "flat_theta_validation.json")

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
