from .shared import Laps
from .formatter import LongStyleFormatter

def titleFor(laps: Laps) -> str:
    return f'{len(laps)} laps'

def rowsFor(laps: Laps, formatter: LongStyleFormatter) -> list[str]:
    '''
    Most recent lap first.
    '''
    return [formatter.formatLongStyle(lap.time) for lap in reversed(laps)]
