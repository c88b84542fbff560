from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo

from .errors import FormatError

@dataclass(frozen=True)
class LongStyleFormatter:
    '''
    Long time style, e.g. `3:04:05 PM UTC`.
    `tz` of `None` means the host's local timezone.
    '''
    tz: tzinfo | None = None

    def formatLongStyle(self, t: datetime) -> str:
        try:
            local = t.astimezone(self.tz)
            hour = local.hour % 12 or 12
            return f'{hour}:{local:%M:%S %p} {self.zoneName(local)}'
        except (ValueError, OverflowError) as e:
            raise FormatError(f'Cannot format {t!r}') from e

    @staticmethod
    def zoneName(local: datetime) -> str:
        name = local.tzname()
        if name and not name.startswith(('+', '-', 'UTC+', 'UTC-')):
            return name
        offset = local.utcoffset() or timedelta()
        sign = '-' if offset < timedelta() else '+'
        minutes = abs(int(offset.total_seconds())) // 60
        h, m = divmod(minutes, 60)
        if h == 0 and m == 0:
            return 'GMT'
        if m:
            return f'GMT{sign}{h}:{m:02d}'
        return f'GMT{sign}{h}'
