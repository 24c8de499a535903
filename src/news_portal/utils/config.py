import os
import yaml
from pathlib import Path


class ConfigError(Exception):
  """Raised when the configuration file is missing or malformed"""


REQUIRED_SECTIONS = ('database', 'listing')


def find_config_path() -> Path:
  """NEWS_PORTAL_CONFIG, then the repository config, then ./config"""
  if os.environ.get('NEWS_PORTAL_CONFIG'):
    return Path(os.environ['NEWS_PORTAL_CONFIG'])
  repo_path = Path(__file__).parent.parent.parent.parent / 'config' / 'config.yaml'
  if repo_path.exists():
    return repo_path
  return Path.cwd() / 'config' / 'config.yaml'


def load_config(path: Path) -> dict:
  """Load and sanity check a YAML config file"""
  if not path.exists():
    raise ConfigError(f"Config file not found: {path}")

  with open(path, 'r', encoding = 'utf-8') as f:
    config = yaml.safe_load(f) or {}

  if not isinstance(config, dict):
    raise ConfigError(f"Config root must be a mapping, got {type(config).__name__}")

  missing = [s for s in REQUIRED_SECTIONS if s not in config]
  if missing:
    raise ConfigError(f"Missing config sections: {missing} in {path}")

  return config


# Automatically load when module is imported
CONFIG = load_config(find_config_path())
