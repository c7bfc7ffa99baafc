# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "roadmap"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ITEMS_PATH: Path = DATA_PATH / "items.yaml"

DEFAULT_LEFT_COLUMN_WIDTH = 32
DEFAULT_LOG_LEVEL = "WARNING"


class Configuration(TypedDict):
    show_header: bool
    data_path: Optional[str]
    timeline_width: Optional[int]
    left_column_width: int
    auto_scroll: bool
    log_level: str


def default_configuration() -> Configuration:
    return {
        "show_header": True,
        "data_path": None,
        "timeline_width": None,
        "left_column_width": DEFAULT_LEFT_COLUMN_WIDTH,
        "auto_scroll": True,
        "log_level": DEFAULT_LOG_LEVEL,
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are instantiated.
    """
    global DATA_PATH, DATA_ITEMS_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)
        DATA_ITEMS_PATH = DATA_PATH / "items.yaml"
