import logging

import pytest

from news_portal.utils.logger import setup_logger


@pytest.fixture
def scratch_logger():
  name = "news_portal.test"
  yield name
  configured = logging.getLogger(name)
  for handler in list(configured.handlers):
    configured.removeHandler(handler)
    handler.close()


def test_defaults_come_from_logging_settings(tmp_path, scratch_logger):
  log_file = tmp_path / "nested" / "portal.log"
  configured = setup_logger(scratch_logger, settings = {"log_file": str(log_file), "level": "warning"})
  assert configured.level == logging.WARNING
  assert log_file.parent.is_dir()
  configured.warning("disk almost full")
  for handler in configured.handlers:
    handler.flush()
  assert "disk almost full" in log_file.read_text(encoding = "utf-8")


def test_explicit_arguments_win(tmp_path, scratch_logger):
  log_file = tmp_path / "explicit.log"
  configured = setup_logger(
    scratch_logger,
    log_file = str(log_file),
    level = "DEBUG",
    settings = {"log_file": str(tmp_path / "ignored.log"), "level": "ERROR"}
  )
  assert configured.level == logging.DEBUG
  assert log_file.exists()
  assert not (tmp_path / "ignored.log").exists()


def test_setup_twice_does_not_stack_handlers(tmp_path, scratch_logger):
  settings = {"log_file": str(tmp_path / "portal.log")}
  setup_logger(scratch_logger, settings = settings)
  configured = setup_logger(scratch_logger, settings = settings)
  assert len(configured.handlers) == 2
  assert configured.level == logging.INFO
