import logging
import sys
from pathlib import Path
from typing import Optional
from news_portal.utils.config import CONFIG

LOGGER_NAME = "news_portal"

CONSOLE_FORMAT = ("%(asctime)s - %(levelname)s - %(message)s", "%H:%M:%S")
FILE_FORMAT = ("%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s", "%Y-%m-%d %H:%M:%S")


def _handler(handler: logging.Handler, fmt) -> logging.Handler:
  handler.setFormatter(logging.Formatter(fmt[0], datefmt = fmt[1]))
  return handler


def setup_logger(
  name: str = LOGGER_NAME,
  log_file: Optional[str] = None,
  level: Optional[str] = None,
  settings: Optional[dict] = None
) -> logging.Logger:
  """
  Attach console and file handlers to the package logger

  Args:
    name: Logger name
    log_file: Path to log file, defaults to logging.log_file in config
    level: Log level, defaults to logging.level in config
    settings: Logging section to read defaults from instead of CONFIG
  """
  if settings is None:
    settings = CONFIG.get('logging') or {}
  log_file = log_file or settings.get('log_file', f"logs/{LOGGER_NAME}.log")
  level = (level or settings.get('level', "INFO")).upper()

  Path(log_file).parent.mkdir(parents = True, exist_ok = True)

  configured = logging.getLogger(name)
  configured.setLevel(getattr(logging, level, logging.INFO))

  # Re-running replaces handlers instead of stacking them
  for handler in list(configured.handlers):
    configured.removeHandler(handler)
    handler.close()

  configured.addHandler(_handler(logging.StreamHandler(sys.stdout), CONSOLE_FORMAT))
  configured.addHandler(_handler(logging.FileHandler(log_file, encoding = 'utf-8'), FILE_FORMAT))
  return configured


# Global logger instance
logger = logging.getLogger(LOGGER_NAME)
