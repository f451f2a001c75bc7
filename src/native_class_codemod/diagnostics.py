"""
Diagnostic Events.

Non-fatal findings produced while building property models (e.g. a decorator
that was dropped because it cannot be translated). Models expose their events
as data; a `DiagnosticSink` collects them for the caller and forwards each
one to the logging console exactly once.
"""

from typing import Iterable, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from native_class_codemod.enums import DiagnosticLevel
from native_class_codemod.utils.console import log_error, log_info, log_warning


class DiagnosticEvent(BaseModel):
  """
  A single structured diagnostic.
  """

  model_config = ConfigDict(frozen=True)

  level: DiagnosticLevel = Field(DiagnosticLevel.INFO)
  prop_name: str = Field(..., description="Name of the property the event concerns.")
  message: str
  decorator_name: Optional[str] = Field(None, description="Set for ignored-decorator events.")

  @property
  def text(self) -> str:
    return f"[{self.prop_name}] {self.message}"


def ignored_decorator_event(prop_name: str, decorator: str) -> DiagnosticEvent:
  return DiagnosticEvent(
    level=DiagnosticLevel.INFO,
    prop_name=prop_name,
    message=f"Ignored decorator {decorator}",
    decorator_name=decorator,
  )


class DiagnosticSink:
  """
  Collects diagnostic events and logs them as they are reported.
  """

  def __init__(self, log: bool = True) -> None:
    """
    Args:
        log (bool): If False, events are only collected.
    """
    self.events: List[DiagnosticEvent] = []
    self._log = log

  def report(self, events: Iterable[DiagnosticEvent]) -> None:
    for event in events:
      self.events.append(event)
      if not self._log:
        continue
      if event.level is DiagnosticLevel.ERROR:
        log_error(event.text)
      elif event.level is DiagnosticLevel.WARNING:
        log_warning(event.text)
      else:
        log_info(event.text)

  def __len__(self) -> int:
    return len(self.events)
