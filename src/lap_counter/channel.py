'''
Synchronous change notification.
A `Channel` fans every emitted value out to its live subscribers,
in subscription order, on the caller's thread.
'''

from __future__ import annotations

import itertools
import logging
import typing as tp

log = logging.getLogger(__name__)

T = tp.TypeVar('T')

OnNext  = tp.Callable[[T], None]
OnError = tp.Callable[[Exception], None]

class Subscription:
    def __init__(self, channel: Channel, key: int) -> None:
        self.channel = channel
        self.key = key
        self.is_disposed = False

    def dispose(self) -> None:
        if self.is_disposed:
            return
        self.is_disposed = True
        self.channel._forget(self.key)

class Channel(tp.Generic[T]):
    def __init__(self) -> None:
        self.__observers: dict[int, tuple[
            Subscription, OnNext[T], OnError | None,
        ]] = {}
        self.__keys = itertools.count()

    def subscribe(
        self, onNext: OnNext[T], onError: OnError | None = None,
    ) -> Subscription:
        key = next(self.__keys)
        sub = Subscription(self, key)
        self.__observers[key] = (sub, onNext, onError)
        return sub

    def emit(self, value: T) -> None:
        for sub, onNext, _ in list(self.__observers.values()):
            if sub.is_disposed:
                continue
            onNext(value)

    def fail(self, error: Exception) -> None:
        '''
        Terminates every current subscription with `error`.
        Raises `error` once all handlers ran if some subscriber
        had no `onError`.
        '''
        observers = list(self.__observers.values())
        unhandled = False
        for sub, _, onError in observers:
            if sub.is_disposed:
                continue
            sub.dispose()
            if onError is None:
                unhandled = True
                continue
            onError(error)
        if unhandled:
            raise error

    def __len__(self) -> int:
        return len(self.__observers)

    def _forget(self, key: int) -> None:
        self.__observers.pop(key, None)

class DisposeBag:
    '''
    Subscriptions released together.
    '''
    def __init__(self) -> None:
        self.__subs: list[Subscription] = []
        self.is_disposed = False

    def add(self, sub: Subscription) -> Subscription:
        if self.is_disposed:
            sub.dispose()
            return sub
        self.__subs.append(sub)
        return sub

    def dispose(self) -> None:
        if self.is_disposed:
            return
        self.is_disposed = True
        subs, self.__subs = self.__subs, []
        for sub in subs:
            sub.dispose()
        log.debug('Disposed %d subscriptions.', len(subs))

    def __len__(self) -> int:
        return len(self.__subs)

    def __enter__(self) -> DisposeBag:
        return self

    def __exit__(self, *_) -> None:
        self.dispose()
