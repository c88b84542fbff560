from __future__ import annotations

import logging
import typing as tp
from datetime import datetime

from .shared import LapRecord, Laps, utcNow
from .channel import Channel, DisposeBag
from .errors import StorageUnavailable, WriteFailed
from .formatter import LongStyleFormatter
from .projection import titleFor, rowsFor
from .store_interface import LapStoreInterface

log = logging.getLogger(__name__)

class LapView(tp.Protocol):
    def setTitle(self, text: str) -> None: ...

    def setRows(self, rows: tp.Sequence[str]) -> None: ...

    def showStorageUnavailable(self, error: StorageUnavailable) -> None: ...

    def reportWriteFailed(self, error: WriteFailed) -> None: ...

class LapController:
    def __init__(
        self,
        store: LapStoreInterface,
        formatter: LongStyleFormatter,
        clock: tp.Callable[[], datetime] = utcNow,
    ) -> None:
        self.store = store
        self.formatter = formatter
        self.clock = clock

        self.view: LapView | None = None
        self.bag: DisposeBag | None = None

    @property
    def is_active(self) -> bool:
        return self.bag is not None

    def activate(self, view: LapView, taps: Channel[None]) -> bool:
        '''
        Returns whether the screen went live.
        On `False` the view is already showing the storage error.
        '''
        assert not self.is_active
        try:
            self.store.open()
        except StorageUnavailable as e:
            log.error('Lap screen not activated: %s', e)
            view.showStorageUnavailable(e)
            return False
        self.view = view
        self.bag = bag = DisposeBag()
        bag.add(self.store.observeAll(self.onTitle, self.onStorageError))
        bag.add(self.store.observeAll(self.onRows, self.onStorageError))
        bag.add(taps.subscribe(self.onTap))
        log.info('Lap screen active.')
        return True

    def deactivate(self) -> None:
        if self.bag is None:
            return
        self.bag.dispose()
        self.bag = None
        self.view = None
        self.store.close()
        log.info('Lap screen inactive.')

    def onTitle(self, laps: Laps) -> None:
        assert self.view is not None
        self.view.setTitle(titleFor(laps))

    def onRows(self, laps: Laps) -> None:
        assert self.view is not None
        self.view.setRows(rowsFor(laps, self.formatter))

    def onTap(self, _: None) -> None:
        self.lap()

    def lap(self) -> LapRecord | None:
        assert self.view is not None
        record = LapRecord(time=self.clock())
        try:
            self.store.insert(record)
        except WriteFailed as e:
            log.warning('Lap not recorded: %s', e)
            self.view.reportWriteFailed(e)
            return None
        return record

    def refresh(self) -> None:
        if self.is_active:
            self.store.refresh()

    def onStorageError(self, error: Exception) -> None:
        if not self.is_active:
            return
        assert self.view is not None
        view = self.view
        log.error('Lap store failed while observed: %s', error)
        self.deactivate()
        if isinstance(error, StorageUnavailable):
            view.showStorageUnavailable(error)
        else:
            view.showStorageUnavailable(StorageUnavailable(str(error)))
