from __future__ import annotations

import typing as tp
from abc import ABC, abstractmethod
from contextlib import contextmanager

from .shared import LapRecord, Laps
from .channel import Channel, Subscription, OnNext, OnError
from .errors import StorageUnavailable

class LapStoreInterface(ABC):
    def __init__(self) -> None:
        self.channel: Channel[Laps] = Channel()

    @property
    @abstractmethod
    def is_open(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def open(self) -> None:
        '''
        Raises `StorageUnavailable` if the laps cannot be loaded.
        '''
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def snapshot(self) -> Laps:
        '''
        All laps, in insertion order.
        '''
        raise NotImplementedError

    @abstractmethod
    def insert(self, record: LapRecord) -> None:
        '''
        Appends and persists `record`, then notifies observers.
        Raises `WriteFailed` and leaves the store untouched on failure.
        '''
        raise NotImplementedError

    @abstractmethod
    def refresh(self) -> None:
        '''
        Re-reads the backing storage and notifies observers if it changed.
        Read failures go to observers as `StorageUnavailable`.
        '''
        raise NotImplementedError

    def observeAll(
        self, onNext: OnNext[Laps], onError: OnError | None = None,
    ) -> Subscription:
        '''
        Emits the current laps right away, then once per change.
        '''
        if not self.is_open:
            raise StorageUnavailable('The lap store is not open.')
        sub = self.channel.subscribe(onNext, onError)
        onNext(self.snapshot())
        return sub

    def notifyChanged(self) -> None:
        self.channel.emit(self.snapshot())

    @contextmanager
    def Context(self) -> tp.Generator[LapStoreInterface, None, None]:
        self.open()
        try:
            yield self
        finally:
            self.close()
