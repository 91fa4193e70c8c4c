"""Main CLI entry point for kafka-context."""

import sys
from pathlib import Path

import click

from kafka_context import __version__
from kafka_context.cli.broker_commands import get_configs
from kafka_context.cli.config_commands import (
    set_context, get_contexts, current_context, use_context_cmd, delete_context_cmd
)
from kafka_context.config import config
from kafka_context.logging_config import setup_logging


@click.group()
@click.option('--config-file', '-c', default=None,
              help='Context file path (default: $KAFKA_CONTEXT_CONFIG or ~/.kafka-context/config.yaml)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, config_file, verbose):
    """kafka-context - Manage connection contexts for Kafka clusters."""
    if verbose:
        setup_logging()

    ctx.ensure_object(dict)
    ctx.obj['config_path'] = Path(config_file or config.storage.config_path).expanduser()


@cli.command()
def version():
    """Show version information."""
    click.echo("kafka-context")
    click.echo(f"Version: {__version__}")


cli.add_command(set_context)
cli.add_command(get_contexts)
cli.add_command(current_context)
cli.add_command(use_context_cmd)
cli.add_command(delete_context_cmd)
cli.add_command(get_configs)


def main():
    """Main entry point."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user")
        sys.exit(1)


if __name__ == '__main__':
    main()
