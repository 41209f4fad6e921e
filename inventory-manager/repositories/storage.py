"""
Storage configuration.

This module contains *only* the lookup of where the snapshot and the audit log
live, and the construction of the file-backed sinks for those paths.

Environment variables (optional, read from the process environment or a .env file):
- INVENTORY_SNAPSHOT_PATH: snapshot file (default: inventory.txt)
- INVENTORY_LOG_PATH: audit log file (default: transaction_log.txt)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from repositories.audit_log_repository import DEFAULT_AUDIT_LOG_PATH, FileAuditLog
from repositories.snapshot_repository import DEFAULT_SNAPSHOT_PATH, FileSnapshotStore

SNAPSHOT_PATH_VAR: str = "INVENTORY_SNAPSHOT_PATH"
LOG_PATH_VAR: str = "INVENTORY_LOG_PATH"

# Look for .env in the inventory-manager directory unless told otherwise.
_DEFAULT_ENV_PATH: Path = Path(__file__).parent.parent / ".env"


@dataclass(frozen=True, slots=True)
class StorageSettings:
    snapshot_path: Path
    audit_log_path: Path

    def snapshot_store(self) -> FileSnapshotStore:
        return FileSnapshotStore(self.snapshot_path)

    def audit_log(self) -> FileAuditLog:
        return FileAuditLog(self.audit_log_path)


def _read_path(var: str, default: str) -> Path:
    value = os.getenv(var)
    if value is None:
        return Path(default)
    if not value.strip():
        raise RuntimeError(
            f"Environment variable {var} is set but empty. "
            f"Unset it to use the default ({default}) or point it at a file."
        )
    return Path(value.strip())


def load_storage_settings(env_path: Optional[Union[str, Path]] = None) -> StorageSettings:
    """
    Resolve storage paths from the environment.

    Values already present in the process environment win over the .env file.

    Raises:
        RuntimeError: If a path variable is present but blank.
    """

    load_dotenv(dotenv_path=Path(env_path) if env_path is not None else _DEFAULT_ENV_PATH)

    return StorageSettings(
        snapshot_path=_read_path(SNAPSHOT_PATH_VAR, DEFAULT_SNAPSHOT_PATH),
        audit_log_path=_read_path(LOG_PATH_VAR, DEFAULT_AUDIT_LOG_PATH),
    )


__all__ = [
    "LOG_PATH_VAR",
    "SNAPSHOT_PATH_VAR",
    "StorageSettings",
    "load_storage_settings",
]
