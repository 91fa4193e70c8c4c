"""YAML file implementation of context storage."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from kafka_context.config import config
from kafka_context.exceptions import PersistenceError
from kafka_context.models.context import ConfigurationStore
from kafka_context.storage.base import ContextStorage

logger = logging.getLogger(__name__)


class FileContextStorage(ContextStorage):
    """Stores contexts in a single YAML file.

    Writes go to a temporary file in the same directory which then replaces
    the target, so a failed save leaves the previous file in place.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path or config.storage.config_path).expanduser()

    def load(self) -> ConfigurationStore:
        """Load the store, returning an empty one if the file is missing."""
        if not self.path.exists():
            logger.debug(f"No context file at {self.path}, starting empty")
            return ConfigurationStore()

        try:
            with open(self.path, 'r') as f:
                data = yaml.safe_load(f) or {}
            store = ConfigurationStore(**data)
        except (OSError, yaml.YAMLError, PydanticValidationError, TypeError) as e:
            raise PersistenceError(
                f"failed to load contexts from {self.path}", path=str(self.path), cause=e
            ) from e

        logger.debug(f"Loaded {len(store.contexts)} contexts from {self.path}")
        return store

    def save(self, store: ConfigurationStore) -> None:
        """Write the store to disk."""
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=str(self.path.parent), prefix='.', suffix='.tmp'
            )
            with os.fdopen(fd, 'w') as f:
                yaml.safe_dump(store.dict(), f, default_flow_style=False, sort_keys=False)
            os.replace(tmp_path, self.path)
            tmp_path = None
        except (OSError, yaml.YAMLError) as e:
            raise PersistenceError(
                f"failed to save contexts to {self.path}", path=str(self.path), cause=e
            ) from e
        finally:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)

        logger.info(f"Saved {len(store.contexts)} contexts to {self.path}")
