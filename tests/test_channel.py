import pytest

from lap_counter.channel import Channel, DisposeBag


def test_emit_reaches_subscribers_in_order():
    channel = Channel()
    seen = []
    channel.subscribe(lambda v: seen.append(("a", v)))
    channel.subscribe(lambda v: seen.append(("b", v)))

    channel.emit(1)
    channel.emit(2)

    assert seen == [("a", 1), ("b", 1), ("a", 2), ("b", 2)]


def test_disposed_subscription_stops_receiving():
    channel = Channel()
    seen = []
    sub = channel.subscribe(seen.append)

    channel.emit(1)
    sub.dispose()
    sub.dispose()
    channel.emit(2)

    assert seen == [1]
    assert sub.is_disposed
    assert len(channel) == 0


def test_subscriber_disposed_during_delivery_is_skipped():
    channel = Channel()
    seen = []
    subs = []

    def first(value):
        seen.append(("first", value))
        subs[1].dispose()

    subs.append(channel.subscribe(first))
    subs.append(channel.subscribe(lambda v: seen.append(("second", v))))

    channel.emit("x")

    assert seen == [("first", "x")]


def test_fail_terminates_subscriptions_with_error():
    channel = Channel()
    errors = []
    sub = channel.subscribe(lambda v: None, errors.append)
    boom = RuntimeError("boom")

    channel.fail(boom)
    channel.emit("after")

    assert errors == [boom]
    assert sub.is_disposed


def test_fail_without_handler_raises_after_notifying_others():
    channel = Channel()
    errors = []
    channel.subscribe(lambda v: None)
    channel.subscribe(lambda v: None, errors.append)

    with pytest.raises(RuntimeError):
        channel.fail(RuntimeError("boom"))

    assert len(errors) == 1
    assert len(channel) == 0


def test_channel_accepts_subscribers_after_fail():
    channel = Channel()
    channel.subscribe(lambda v: None, lambda e: None)
    channel.fail(RuntimeError("boom"))

    seen = []
    channel.subscribe(seen.append)
    channel.emit(3)

    assert seen == [3]


def test_dispose_bag_releases_everything_once():
    channel = Channel()
    seen = []
    bag = DisposeBag()
    bag.add(channel.subscribe(seen.append))
    bag.add(channel.subscribe(seen.append))

    bag.dispose()
    bag.dispose()
    channel.emit(1)

    assert seen == []
    assert bag.is_disposed
    assert len(bag) == 0


def test_dispose_bag_context_releases_on_error():
    channel = Channel()
    seen = []

    with pytest.raises(ValueError):
        with DisposeBag() as bag:
            bag.add(channel.subscribe(seen.append))
            raise ValueError("leaving early")

    channel.emit(1)
    assert seen == []


def test_adding_to_disposed_bag_disposes_immediately():
    channel = Channel()
    bag = DisposeBag()
    bag.dispose()

    sub = bag.add(channel.subscribe(lambda v: None))

    assert sub.is_disposed
    assert len(channel) == 0
