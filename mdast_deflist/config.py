"""Transform configuration.

Loads configuration from .deflist/config.toml if present, with sensible defaults.
Configuration hierarchy (highest priority first):
1. Explicit TransformConfig passed to the transformer factory
2. Repo-level config (.deflist/config.toml)
3. Defaults
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_DIR = ".deflist"
CONFIG_FILE = "config.toml"


@dataclass
class TransformConfig:
    """Which optional stages of the definition list transform run."""

    prenormalize: bool = True  # Rewrite the source and re-parse before building lists
    absorb_orphans: bool = True  # Wrap paragraphs/lists that follow a list into new details


def load_config(workspace: Path) -> TransformConfig:
    """Load configuration from .deflist/config.toml if it exists.

    Args:
        workspace: Path to the workspace/repository root.

    Returns:
        TransformConfig with values from config file or defaults.
    """
    config_path = workspace / CONFIG_DIR / CONFIG_FILE

    if not config_path.exists():
        return TransformConfig()

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    transform_data = data.get("transform", {})

    return TransformConfig(
        prenormalize=transform_data.get("prenormalize", True),
        absorb_orphans=transform_data.get("absorb_orphans", True),
    )
