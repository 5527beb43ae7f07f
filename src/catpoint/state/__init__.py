"""State/store layer.

The stores in this package are the single source of truth for the
arming status, the alarm status and the registered sensors.
"""

from catpoint.state.persistence import JsonFileStateStore, load_snapshot, save_snapshot
from catpoint.state.snapshot import SecuritySnapshot
from catpoint.state.store import InMemoryStateStore, StateStore

__all__ = [
    "InMemoryStateStore",
    "JsonFileStateStore",
    "SecuritySnapshot",
    "StateStore",
    "load_snapshot",
    "save_snapshot",
]
