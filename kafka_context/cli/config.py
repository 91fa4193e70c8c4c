"""CLI access to the context store."""

from pathlib import Path
from typing import Dict, Any, Tuple

import click

from kafka_context.exceptions import KafkaContextError, UsageError
from kafka_context.models.context import ConfigurationStore
from kafka_context.storage.file_store import FileContextStorage


def get_storage(ctx_obj: Dict[str, Any]) -> FileContextStorage:
    """Storage for the config file selected on the command line."""
    return FileContextStorage(Path(ctx_obj['config_path']))


def load_store(ctx_obj: Dict[str, Any]) -> Tuple[FileContextStorage, ConfigurationStore]:
    """Load the store for this invocation."""
    storage = get_storage(ctx_obj)
    return storage, storage.load()


def report_error(ctx: click.Context, error: KafkaContextError):
    """Turn a kafka-context error into the matching click exit."""
    if isinstance(error, UsageError):
        raise click.UsageError(error.message, ctx=ctx)

    click.echo(f"❌ Error: {error}", err=True)
    raise click.Abort()
