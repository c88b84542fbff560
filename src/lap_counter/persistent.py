from __future__ import annotations

import logging
import os

from .shared import LapRecord, LapLog, Laps
from .store_interface import LapStoreInterface
from .errors import StorageUnavailable, WriteFailed

log = logging.getLogger(__name__)

class Persistent(LapStoreInterface):
    '''
    Append-only lap log kept in a JSON file.
    A missing file is an empty log.
    '''
    def __init__(self, /, path: str) -> None:
        super().__init__()
        self.path = path
        self.__laps: list[LapRecord] = []
        self.is_in_context = False

    @property
    def is_open(self) -> bool:
        return self.is_in_context

    def readFile(self) -> list[LapRecord]:
        try:
            with open(self.path, 'rb') as f:
                raw = f.read()
        except FileNotFoundError:
            return []
        return LapLog.model_validate_json(raw).laps

    def loadFile(self) -> list[LapRecord]:
        '''
        The read done by `open()`. Retries hook in here, not into
        `readFile()`, so polls and inserts never wait.
        '''
        return self.readFile()

    def writeFile(self, laps: Laps) -> None:
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        tmp = self.path + '.tmp'
        with open(tmp, 'w', encoding='utf-8') as f:
            f.write(LapLog.fromLaps(laps).model_dump_json(indent=2))
        os.replace(tmp, self.path)

    def open(self) -> None:
        assert not self.is_in_context
        try:
            laps = self.loadFile()
        except (OSError, ValueError) as e:
            log.error('Cannot open lap store %s: %s', self.path, e)
            raise StorageUnavailable(
                f'Cannot open lap store at {self.path}',
            ) from e
        self.__laps = laps
        self.is_in_context = True
        log.info('Opened %s with %d laps.', self.path, len(laps))

    def close(self) -> None:
        if not self.is_in_context:
            return
        self.is_in_context = False
        self.__laps = []
        log.info('Closed %s.', self.path)

    def snapshot(self) -> Laps:
        assert self.is_in_context
        return tuple(self.__laps)

    def insert(self, record: LapRecord) -> None:
        assert self.is_in_context
        try:
            current = self.readFile()
        except (OSError, ValueError) as e:
            raise WriteFailed(f'Cannot read {self.path}: {e}') from e
        laps = (*current, record)
        try:
            self.writeFile(laps)
        except OSError as e:
            raise WriteFailed(f'Cannot write {self.path}: {e}') from e
        self.__laps = list(laps)
        log.debug('Inserted lap at %s.', record.time.isoformat())
        self.notifyChanged()

    def refresh(self) -> None:
        if not self.is_in_context:
            return
        try:
            laps = self.readFile()
        except (OSError, ValueError) as e:
            log.error('Lost lap store %s: %s', self.path, e)
            error = StorageUnavailable(f'Cannot read lap store at {self.path}')
            error.__cause__ = e
            self.channel.fail(error)
            return
        if laps == self.__laps:
            return
        log.info(
            'Lap store %s changed on disk: %d -> %d laps.',
            self.path, len(self.__laps), len(laps),
        )
        self.__laps = laps
        self.notifyChanged()
