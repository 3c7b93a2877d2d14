"""
Configuration for booltree.

Configuration is loaded from the booltree.toml [booltree] section.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from booltree.core.errors import PointerStyle
from booltree.core.truth_table import DEFAULT_MAX_VARIABLES

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "booltree.toml"


class BoolTreeConfig(BaseModel):
    """Settings shared by the CLI commands."""

    pointer_style: PointerStyle = PointerStyle.TEXT
    debug: bool = False
    max_variables: int = Field(default=DEFAULT_MAX_VARIABLES, ge=0, le=20)
    html_padding: str = " "


def load_config(toml_path: Path | None = None) -> BoolTreeConfig:
    """
    Load configuration from booltree.toml.

    Args:
        toml_path: Path to the TOML file (defaults to ./booltree.toml)

    Returns:
        BoolTreeConfig with values from file or defaults

    Raises:
        pydantic.ValidationError: If the [booltree] table holds invalid values.
    """
    toml_path = toml_path or Path(CONFIG_FILENAME)
    if not toml_path.exists():
        return BoolTreeConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", toml_path, e)
        return BoolTreeConfig()

    section: dict[str, Any] = data.get("booltree", {})
    if not section:
        return BoolTreeConfig()

    return BoolTreeConfig.model_validate(section)
