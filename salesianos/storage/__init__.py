"""Storage components."""

from salesianos.storage.debug import DebugManager
from salesianos.storage.persistence import ALL_DATA_FILENAME, RUN_LOG_FILENAME, SUMMARY_FILENAME, OutputStorage

__all__ = ['ALL_DATA_FILENAME', 'DebugManager', 'OutputStorage', 'RUN_LOG_FILENAME', 'SUMMARY_FILENAME']
