import typing as tp

from .shared import LapRecord, Laps
from .store_interface import LapStoreInterface
from .errors import StorageUnavailable, WriteFailed

class LapStoreDummy(LapStoreInterface):
    '''
    In-memory store. Nothing survives `close()`.
    `failing_inserts` holds 1-based insert attempt numbers that fail.
    '''
    def __init__(
        self,
        laps: tp.Iterable[LapRecord] = (),
        failing_inserts: tp.Collection[int] = (),
        unavailable: bool = False,
    ) -> None:
        super().__init__()
        self.initial_laps = tuple(laps)
        self.failing_inserts = set(failing_inserts)
        self.unavailable = unavailable
        self.insert_attempts = 0
        self.laps: list[LapRecord] | None = None

    @property
    def is_open(self) -> bool:
        return self.laps is not None

    def open(self) -> None:
        assert self.laps is None
        if self.unavailable:
            raise StorageUnavailable('Dummy store is unavailable.')
        self.laps = list(self.initial_laps)

    def close(self) -> None:
        self.laps = None

    def snapshot(self) -> Laps:
        assert self.laps is not None
        return tuple(self.laps)

    def insert(self, record: LapRecord) -> None:
        assert self.laps is not None
        self.insert_attempts += 1
        if self.insert_attempts in self.failing_inserts:
            raise WriteFailed(f'Dummy insert #{self.insert_attempts} failed.')
        self.laps.append(record)
        self.notifyChanged()

    def refresh(self) -> None:
        if self.laps is None:
            return
        if self.unavailable:
            self.channel.fail(StorageUnavailable('Dummy store went away.'))
