"""Selection and removal of stored contexts."""

import logging
from typing import Tuple

from kafka_context.exceptions import NotFoundError
from kafka_context.models.context import ConfigurationStore, Context

logger = logging.getLogger(__name__)


def get_current_context(store: ConfigurationStore) -> Tuple[str, Context]:
    """Return the current context name and profile.

    Raises:
        NotFoundError: if no current context is set
    """
    if not store.current_context:
        raise NotFoundError("no current context is set")
    return store.current_context, store.contexts[store.current_context]


def use_context(store: ConfigurationStore, name: str) -> ConfigurationStore:
    """Return a copy of `store` with `name` as the current context."""
    if name not in store.contexts:
        raise NotFoundError(f"no context exists with the name: \"{name}\"", name=name)

    updated = store.copy(deep=True)
    updated.current_context = name
    return updated


def delete_context(store: ConfigurationStore, name: str) -> ConfigurationStore:
    """Return a copy of `store` without `name`.

    The current context is cleared when it pointed at the removed entry.
    """
    if name not in store.contexts:
        raise NotFoundError(f"cannot delete context {name}, not in config", name=name)

    contexts = {k: c.copy(deep=True) for k, c in store.contexts.items() if k != name}
    current = store.current_context
    if current == name:
        logger.warning(f"Deleted the current context {name}, no current context is set")
        current = None

    return ConfigurationStore(contexts=contexts, current_context=current)
