import json
import logging
import os
from typing import Any, Dict, Optional, Protocol

from pydantic import ValidationError

from tourney_store.core.config import settings
from tourney_store.models.snapshot_model import StoreState

logger = logging.getLogger(__name__)


class SnapshotStorage(Protocol):
    """Durable home of the whole snapshot under one fixed key."""

    def load(self) -> Optional[StoreState]:
        """Return the saved snapshot, or None when nothing usable is stored."""
        ...

    def save(self, state: StoreState) -> None:
        """Replace the saved snapshot with ``state`` in full."""
        ...


def dump_state(state: StoreState, persist_session: bool = True) -> Dict[str, Any]:
    exclude = None if persist_session else {"current_user"}
    return state.model_dump(mode="json", exclude=exclude)


def parse_state(content: str, source: str) -> Optional[StoreState]:
    if not content.strip():
        return None
    try:
        return StoreState.model_validate_json(content)
    except ValidationError as e:
        # Covers both undecodable JSON and documents of the wrong shape
        logger.warning("Could not load snapshot from %s, using defaults: %s", source, e.errors()[:1])
        return None


class JsonFileStorage:
    def __init__(
        self,
        data_dir: Optional[str] = None,
        storage_key: Optional[str] = None,
        persist_session: Optional[bool] = None,
    ):
        data_dir = data_dir or settings.DATA_DIR
        storage_key = storage_key or settings.STORAGE_KEY
        self.persist_session = settings.PERSIST_SESSION if persist_session is None else persist_session
        self.data_file_path = os.path.join(data_dir, f"{storage_key}.json")
        # Ensure data directory exists
        os.makedirs(os.path.dirname(self.data_file_path) or ".", exist_ok=True)

    def load(self) -> Optional[StoreState]:
        if not os.path.exists(self.data_file_path):
            return None
        with open(self.data_file_path, "rb") as f:
            raw = f.read()
        try:
            content = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning("Could not load snapshot from %s, using defaults: %s", self.data_file_path, e)
            return None
        return parse_state(content, self.data_file_path)

    def save(self, state: StoreState) -> None:
        # Write beside the target and swap it in, so a crash never leaves half a snapshot
        tmp_path = f"{self.data_file_path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(dump_state(state, self.persist_session), f, indent=4, ensure_ascii=False)
        os.replace(tmp_path, self.data_file_path)
        logger.debug("Snapshot written to %s", self.data_file_path)


class MemoryStorage:
    """Keeps the serialized snapshot in memory; for tests and throwaway sessions."""

    def __init__(self, persist_session: bool = True):
        self.persist_session = persist_session
        self.payload: Optional[str] = None
        self.save_count = 0

    def load(self) -> Optional[StoreState]:
        if self.payload is None:
            return None
        return parse_state(self.payload, "memory")

    def save(self, state: StoreState) -> None:
        self.payload = json.dumps(dump_state(state, self.persist_session), ensure_ascii=False)
        self.save_count += 1
