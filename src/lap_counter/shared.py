from __future__ import annotations

from datetime import datetime, timezone

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field
from textual.widget import Widget

def utcNow() -> datetime:
    return datetime.now(timezone.utc)

class LapRecord(BaseModel):
    time: AwareDatetime = Field(default_factory=utcNow)

    model_config = ConfigDict(
        frozen=True,
    )

Laps = tuple[LapRecord, ...]

class LapLog(BaseModel):
    '''
    On-disk document of the JSON store. Insertion order is preserved.
    '''
    laps: list[LapRecord] = []

    @classmethod
    def fromLaps(cls, laps: Laps) -> LapLog:
        return cls(laps=list(laps))

def titled(
    w: Widget, /, title: str, skip_bottom: bool = True,
    style = ('round', '#999'), padding = (0, 1),
):
    w.styles.border = style
    if skip_bottom:
        w.styles.border_bottom = None
    w.border_title = title
    w.styles.padding = padding
    return w
