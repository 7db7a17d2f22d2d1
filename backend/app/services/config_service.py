"""
Algorithm configuration service: validation-gated CRUD over the store.
"""
import logging
import uuid
from collections import Counter
from typing import Any, Optional

from app.core.exceptions import ConfigValidationError
from app.models.algo_config import AlgoConfig, MUTABLE_FIELDS, utc_now
from app.services.config_store import ConfigStore
from app.services.validation import normalize_config, validate_config

logger = logging.getLogger(__name__)


class AlgoConfigService:
    """Service for algorithm configuration operations."""

    def __init__(self, store: ConfigStore):
        self.store = store

    def list_configs(self) -> list[AlgoConfig]:
        """List all configurations in insertion order."""
        return self.store.list()

    def get_config(self, config_id: str) -> Optional[AlgoConfig]:
        """Get a configuration by id."""
        return self.store.get(config_id)

    def create_config(self, payload: dict[str, Any]) -> AlgoConfig:
        """
        Validate and create a configuration.

        Raises:
            ConfigValidationError: payload failed one or more field rules.
                The store is not touched.
        """
        errors = validate_config(payload)
        if errors:
            raise ConfigValidationError(errors)

        now = utc_now()
        config = AlgoConfig(
            id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            **normalize_config(payload),
        )
        self.store.insert(config)
        logger.info(f"Created config {config.id} ({config.name})")
        return config

    def update_config(self, config_id: str, payload: dict[str, Any]) -> Optional[AlgoConfig]:
        """
        Validate and replace the mutable fields of a configuration.

        Returns None if the id is unknown. Optional flags and notes that the
        payload omits keep their current values.

        Raises:
            ConfigValidationError: payload failed one or more field rules.
                The store is not touched.
        """
        if self.store.get(config_id) is None:
            return None

        errors = validate_config(payload)
        if errors:
            raise ConfigValidationError(errors)

        fields = {k: v for k, v in normalize_config(payload).items() if k in MUTABLE_FIELDS}
        updated = self.store.replace(config_id, fields)
        if updated is not None:
            logger.info(f"Updated config {config_id}")
        return updated

    def delete_config(self, config_id: str) -> bool:
        """Delete a configuration. Returns False if the id is unknown."""
        deleted = self.store.delete(config_id)
        if deleted:
            logger.info(f"Deleted config {config_id}")
        return deleted

    def summarize(self) -> dict[str, Any]:
        """Aggregate counts for the dashboard stats bar."""
        configs = self.store.list()
        total = len(configs)
        enabled = sum(1 for c in configs if c.enabled)
        avg_max_loss = (
            round(sum(c.max_loss_percent for c in configs) / total, 2) if total else None
        )
        return {
            "total": total,
            "enabled": enabled,
            "disabled": total - enabled,
            "stop_loss_enabled": sum(1 for c in configs if c.stop_loss_enabled),
            "instruments": dict(Counter(c.instrument for c in configs)),
            "avg_max_loss_percent": avg_max_loss,
        }
