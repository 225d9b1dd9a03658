"""Storage module for Wolf survival persistence.

Sessions are stored as single JSON documents, one file per save slot.
"""

from wolf_survival.storage.session_file import read_session, write_session

__all__ = [
    "read_session",
    "write_session",
]
