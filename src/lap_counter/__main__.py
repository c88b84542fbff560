import argparse

from .UI import UI
from .store_client import Settings, initLogging, initStore, initFormatter
from .store_dummy import LapStoreDummy
from .store_interface import LapStoreInterface

def main() -> None:
    parser = argparse.ArgumentParser(
        prog='lap-counter', description='Record and list laps.',
    )
    parser.add_argument(
        '--store', default=None,
        help='JSON file holding the laps. Overrides LAP_COUNTER_STORE.',
    )
    parser.add_argument(
        '--dummy', action='store_true',
        help='Keep laps in memory only.',
    )
    args = parser.parse_args()

    settings = Settings.fromEnv()
    initLogging(settings)
    store: LapStoreInterface
    if args.dummy:
        store = LapStoreDummy()
    else:
        store = initStore(settings, args.store)
    app = UI(
        store,
        formatter=initFormatter(settings),
        poll_seconds=settings.poll_seconds,
    )
    app.run()

if __name__ == '__main__':
    main()
