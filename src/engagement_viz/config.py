"""
Configuration for the engagement-viz CLI and dashboard.

Defaults are merged with an optional YAML file and then with ``key=value``
command-line overrides, later sources winning.
"""

from pathlib import Path
from typing import List, Optional, Union

from omegaconf import DictConfig, OmegaConf

from .aggregator import DATE_BUCKETS, DEFAULT_DATE_BUCKET
from .errors import ConfigError
from .loader import DEFAULT_ENCODING, DEFAULT_SEPARATOR

DEFAULT_DATA_PATH = "data/socialMedia.csv"
DEFAULT_OUTPUT_DIR = "data/output"

# Export file names
GROUPED_MEAN_FILENAME = "socialMediaAvg.csv"
DAILY_MEAN_FILENAME = "socialMediaTime.csv"
BOX_PLOT_FILENAME = "boxplot.html"
BAR_PLOT_FILENAME = "barplot.html"
LINE_PLOT_FILENAME = "lineplot.html"


def default_config() -> DictConfig:
    """Create default configuration."""
    return OmegaConf.create(
        {
            "data": DEFAULT_DATA_PATH,
            "sep": DEFAULT_SEPARATOR,
            "encoding": DEFAULT_ENCODING,
            "bucket": DEFAULT_DATE_BUCKET,
            "output_dir": DEFAULT_OUTPUT_DIR,
            "export_html": False,
            "verbose": True,
        }
    )


def validate_config(config: DictConfig) -> DictConfig:
    """Check configuration values, raising ConfigError on the first bad one."""
    if not config.get("data"):
        raise ConfigError("data path is required (e.g. data=socialMedia.csv)")
    if config.get("bucket") not in DATE_BUCKETS:
        raise ConfigError(
            f"bucket must be one of {list(DATE_BUCKETS)}, got {config.get('bucket')!r}"
        )
    if not config.get("sep"):
        raise ConfigError("sep cannot be empty")
    return config


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[List[str]] = None,
) -> DictConfig:
    """
    Build the effective configuration.

    Args:
        path: Optional YAML file merged over the defaults.
        overrides: ``key=value`` strings merged last (as given on the CLI).

    Returns:
        The validated, merged configuration.
    """
    config = default_config()

    if path:
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
        try:
            file_config = OmegaConf.load(config_path)
        except Exception as e:
            raise ConfigError(f"Failed to parse config file {config_path}: {e}") from e
        config = OmegaConf.merge(config, file_config)

    if overrides:
        try:
            cli_config = OmegaConf.from_dotlist(list(overrides))
        except Exception as e:
            raise ConfigError(f"Failed to parse CLI arguments: {e}") from e
        config = OmegaConf.merge(config, cli_config)

    return validate_config(config)
