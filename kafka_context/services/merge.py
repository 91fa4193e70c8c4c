"""Merge tri-state overrides onto a stored context."""

import logging
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from kafka_context.exceptions import ValidationError
from kafka_context.models.context import Context, parse_kafka_version
from kafka_context.models.overrides import ContextOverrides

logger = logging.getLogger(__name__)


def split_servers(value: Optional[str]) -> List[str]:
    """Split a comma-separated server list, dropping empty items."""
    if not value:
        return []
    return [server.strip() for server in value.split(',') if server.strip()]


def merge_context(base: Context, overrides: ContextOverrides) -> Context:
    """Apply provided overrides on top of `base` and return a new context.

    Only flags marked provided replace the base value. `tls` is always taken
    from the overrides. Supplying any SASL flag enables SASL; this path never
    disables it.

    Args:
        base: Stored context, or a fresh default one
        overrides: Field overrides for this invocation

    Returns:
        New validated context; `base` is left untouched

    Raises:
        ValidationError: if the merged values do not form a valid context
    """
    data = base.dict()
    sasl = data['sasl']

    if overrides.ksql.provided:
        data['ksql'] = overrides.ksql.value or None

    if overrides.schema_registry.provided:
        data['schema_registry'] = overrides.schema_registry.value or None

    if overrides.bootstrap_servers.provided:
        data['bootstrap_servers'] = split_servers(overrides.bootstrap_servers.value)

    if overrides.kafka_version.provided:
        try:
            data['kafka_version'] = str(parse_kafka_version(overrides.kafka_version.value))
        except ValueError as e:
            raise ValidationError(
                str(e), field='kafka_version', value=overrides.kafka_version.value
            ) from e

    if overrides.sasl_requested:
        sasl['enabled'] = True

    if overrides.algorithm.provided:
        sasl['algorithm'] = overrides.algorithm.value or ""

    if overrides.username.provided:
        sasl['username'] = overrides.username.value or ""

    if overrides.password.provided:
        sasl['password'] = overrides.password.value or ""

    data['tls'] = overrides.use_tls

    try:
        merged = Context(**data)
    except PydanticValidationError as e:
        raise ValidationError("invalid context values", cause=e) from e

    logger.debug(f"Merged context overrides: {merged.masked().dict()}")
    return merged
