from .UI import UI as LapCounterUI
from .lap_controller import LapController
from .persistent import Persistent
from .shared import LapRecord
from .store_dummy import LapStoreDummy
from .store_client import initStore

__all__ = [
    "LapCounterUI", "LapController", "LapRecord", "LapStoreDummy",
    "Persistent", "initStore",
]
