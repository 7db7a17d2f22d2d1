"""
In-process store of algorithm configurations synced to a JSON file.

The in-memory collection is authoritative for the running process. Every
successful write rewrites the whole backing file; a failed write is logged
and the collection stays usable. A crash between a mutation and its persist
step loses that mutation.
"""
import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from app.models.algo_config import AlgoConfig, utc_now
from app.services.validation import validate_config

logger = logging.getLogger(__name__)


class ConfigStore:
    """Ordered collection of configurations with file persistence."""

    def __init__(self, data_file: Path | str):
        self.data_file = Path(data_file)
        self._configs: list[AlgoConfig] = []
        # Sync routes run in a threadpool; mutation and file write share one lock
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._configs)

    # ==================== Lifecycle ====================

    def load(self) -> None:
        """
        Load configurations from the backing file.

        A missing file gives an empty collection. An unreadable or corrupt
        file is logged and also gives an empty collection. Records that fail
        validation, or repeat an id already loaded, are skipped.
        """
        with self._lock:
            self._configs = []
            if not self.data_file.exists():
                logger.info(f"No data file at {self.data_file}, starting empty")
                return

            try:
                with open(self.data_file, encoding="utf-8") as f:
                    raw = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning(f"Could not load {self.data_file}, starting fresh: {e}")
                return

            if not isinstance(raw, list):
                logger.warning(f"{self.data_file} does not hold a JSON array, starting fresh")
                return

            seen: set[str] = set()
            for index, item in enumerate(raw):
                config = self._parse_record(item, index)
                if config is None:
                    continue
                if config.id in seen:
                    logger.warning(f"Skipping duplicate config id {config.id} at index {index}")
                    continue
                seen.add(config.id)
                self._configs.append(config)

            logger.info(f"Loaded {len(self._configs)} configs from {self.data_file}")

    def _parse_record(self, item: Any, index: int) -> Optional[AlgoConfig]:
        if not isinstance(item, dict):
            logger.warning(f"Skipping non-object record at index {index}")
            return None
        errors = validate_config(item)
        if errors:
            logger.warning(f"Skipping invalid config at index {index}: {errors}")
            return None
        try:
            return AlgoConfig.model_validate(item)
        except ValidationError as e:
            logger.warning(f"Skipping malformed config at index {index}: {e.error_count()} errors")
            return None

    def persist(self) -> bool:
        """
        Write the whole collection to the backing file.

        Returns False if the write failed. The failure is logged, not raised.
        """
        documents = [config.to_document() for config in self._configs]
        tmp_path = None
        try:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self.data_file.parent, prefix=".configs-", suffix=".json"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(documents, f, indent=2)
            os.replace(tmp_path, self.data_file)
            return True
        except OSError as e:
            logger.error(f"Failed to persist configs to {self.data_file}: {e}")
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            return False

    # ==================== Queries ====================

    def list(self) -> list[AlgoConfig]:
        """Return all configurations in insertion order."""
        return list(self._configs)

    def get(self, config_id: str) -> Optional[AlgoConfig]:
        """Return the configuration with this id, or None."""
        for config in self._configs:
            if config.id == config_id:
                return config
        return None

    def _index_of(self, config_id: str) -> int:
        for index, config in enumerate(self._configs):
            if config.id == config_id:
                return index
        return -1

    # ==================== Mutations ====================

    def insert(self, config: AlgoConfig) -> AlgoConfig:
        """Append a fully-formed configuration and persist."""
        with self._lock:
            if self._index_of(config.id) != -1:
                raise ValueError(f"Config id {config.id} already exists")
            self._configs.append(config)
            self.persist()
        return config

    def replace(self, config_id: str, fields: dict[str, Any]) -> Optional[AlgoConfig]:
        """
        Merge ``fields`` over an existing configuration and persist.

        ``id`` and ``created_at`` are never overwritten; ``updated_at`` is
        stamped with the current time. Returns None if the id is unknown.
        """
        changes = {k: v for k, v in fields.items() if k not in ("id", "created_at")}
        with self._lock:
            index = self._index_of(config_id)
            if index == -1:
                return None
            current = self._configs[index]
            changes["updated_at"] = max(utc_now(), current.created_at)
            updated = current.model_copy(update=changes)
            self._configs[index] = updated
            self.persist()
        return updated

    def delete(self, config_id: str) -> bool:
        """Remove a configuration and persist. Returns False if the id is unknown."""
        with self._lock:
            index = self._index_of(config_id)
            if index == -1:
                return False
            del self._configs[index]
            self.persist()
        return True
