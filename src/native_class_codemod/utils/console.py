"""
Codemod Logging.

Log records of the codemod go to the ``native_class_codemod`` logger, which
renders them through a `rich` handler. The handler's console defaults to
stderr, keeping stdout free for rewritten source. Tools embedding the codemod
can redirect the output with `set_console` (e.g. to an in-memory buffer).

Records still propagate to the root logger, so host applications and
pytest's `caplog` see them too.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "native_class_codemod"

logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.INFO)

_handler: Optional[RichHandler] = None


def set_console(new_console: Console) -> None:
  """
  Routes codemod log output to the given console.

  Args:
      new_console (Console): The Rich console the handler should write to.
  """
  global _handler
  if _handler is not None:
    logger.removeHandler(_handler)
  _handler = RichHandler(
    console=new_console,
    show_time=False,
    show_path=False,
    markup=False,
    rich_tracebacks=True,
  )
  logger.addHandler(_handler)


def reset_console() -> None:
  """Routes codemod log output back to stderr."""
  set_console(Console(stderr=True))


def log_info(msg: str) -> None:
  """
  Logs an informational message.

  Args:
      msg (str): The message content. Rich markup is never interpreted, since
          messages quote source code containing brackets.
  """
  logger.info(msg)


def log_warning(msg: str) -> None:
  logger.warning(msg)


def log_error(msg: str) -> None:
  logger.error(msg)


reset_console()
