"""Website export configuration reader.

Configs live in the notes directory as ``sites/<name>.yaml``::

    publish_tags:
      - name: public
        target: posts
    pages:
      - id: "202102012138"
        target: about
"""

from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from .logger import logger
from .models import Page, PublishTag, SiteConfig


class ConfigurationError(RuntimeError):
    """Raised when the site configuration is missing or malformed."""


CONFIG_DIRNAME = "sites"
CONFIG_SUFFIX = ".yaml"


def config_path(notes_dir: Union[str, Path], config_name: str) -> Path:
    """Return the config file location for a website name."""
    return Path(notes_dir) / CONFIG_DIRNAME / f"{config_name}{CONFIG_SUFFIX}"


def load_config(path: Union[str, Path]) -> SiteConfig:
    """Read and validate a site configuration file.

    Args:
        path: Path to the YAML config file

    Returns:
        Parsed configuration

    Raises:
        ConfigurationError: If the file can't be read or has the wrong shape
    """
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Could not load config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {e}") from e

    config = parse_config(raw, source=str(path))
    logger.debug(
        f"Loaded {len(config.publish_tags)} publish tags and "
        f"{len(config.pages)} pages from {path}"
    )
    return config


def parse_config(raw: Any, source: str = "<config>") -> SiteConfig:
    """Build a SiteConfig from a decoded YAML document."""
    if raw is None:
        return SiteConfig()
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{source}: top level must be a mapping")

    publish_tags = [
        PublishTag(name=entry["name"], target=entry["target"])
        for entry in _entries(raw, "publish_tags", ("name", "target"), source)
    ]
    pages = [
        Page(id=entry["id"], target=entry["target"])
        for entry in _entries(raw, "pages", ("id", "target"), source)
    ]
    return SiteConfig(publish_tags=publish_tags, pages=pages)


def _entries(raw: Dict[str, Any], key: str, fields: tuple, source: str) -> List[Dict[str, str]]:
    items = raw.get(key)
    if items is None:
        return []
    if not isinstance(items, list):
        raise ConfigurationError(f"{source}: '{key}' must be a list")

    entries = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ConfigurationError(f"{source}: {key}[{index}] must be a mapping")
        entry = {}
        for name in fields:
            value = item.get(name)
            if value is None or isinstance(value, (dict, list)):
                raise ConfigurationError(f"{source}: {key}[{index}] needs a '{name}' value")
            # Unquoted ids load as ints
            entry[name] = str(value)
        entries.append(entry)
    return entries
