"""Plot Configuration Management Module.

Handles listing, loading, and saving of plot configurations.
Enforces the strictly typed PlotConfig schema.
"""

import json
import logging
from pathlib import Path
from typing import List

from ..schemas import PlotConfig

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.cwd() / "plot_configs"


def list_configs(config_dir: Path | None = None) -> List[str]:
    """List all available plot configuration files.

    Returns:
        List of filenames (e.g., ['report.json', 'french.json']).
    """
    config_dir = config_dir or CONFIG_DIR
    if not config_dir.exists():
        return []
    return sorted(f.name for f in config_dir.glob("*.json"))


def load_config(filename: str, config_dir: Path | None = None) -> PlotConfig:
    """Load and validate a plot configuration from a JSON file.

    Args:
        filename: Name of the file (e.g. 'report.json').
        config_dir: Directory to read from. Defaults to ./plot_configs.

    Returns:
        Validated PlotConfig object.

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValidationError: If JSON doesn't match schema.
    """
    file_path = (config_dir or CONFIG_DIR) / filename
    if not file_path.exists():
        raise FileNotFoundError(f"Plot config file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    logger.info(f"Loading plot config: {file_path}")
    return PlotConfig(**data)


def save_config(
    config: PlotConfig, filename: str, config_dir: Path | None = None
) -> Path:
    """Save a plot configuration to a JSON file.

    Args:
        config: The PlotConfig object to save.
        filename: Target filename.
        config_dir: Directory to write to. Defaults to ./plot_configs.

    Returns:
        Path of the written file.
    """
    config_dir = config_dir or CONFIG_DIR
    config_dir.mkdir(parents=True, exist_ok=True)
    file_path = config_dir / filename

    with open(file_path, "w", encoding="utf-8") as f:
        f.write(config.model_dump_json(indent=2))

    logger.info(f"Saved plot config to {file_path}")
    return file_path
