"""CLI commands for inspecting brokers of the current context."""

import logging

import click

from kafka_context.cli.config import load_store, report_error
from kafka_context.clients.kafka_client import ClusterConnection, open_connection
from kafka_context.exceptions import KafkaContextError, NotFoundError
from kafka_context.services.contexts import get_current_context

logger = logging.getLogger(__name__)


def find_controller_id(connection: ClusterConnection) -> int:
    """Id of the controller broker.

    Raises:
        NotFoundError: if the cluster reports no controller
    """
    for broker in connection.list_brokers():
        if broker.is_controller:
            return broker.id
    raise NotFoundError("impossible to find the controller broker id")


@click.command('get-configs')
@click.argument('broker_id', type=int, required=False)
@click.pass_context
def get_configs(ctx, broker_id):
    """Show broker configs, by default of the controller broker."""
    try:
        _, store = load_store(ctx.obj)
        name, context = get_current_context(store)

        with open_connection(context) as connection:
            if broker_id is None:
                broker_id = find_controller_id(connection)
                logger.debug(f"Using controller broker {broker_id} of context {name}")
            configs = connection.describe_broker_config(broker_id)
    except KafkaContextError as e:
        report_error(ctx, e)

    click.echo('\t'.join(['NAME', 'VALUE', 'DEFAULT']))
    for entry in configs:
        value = entry.value if entry.value is not None else ''
        click.echo('\t'.join([entry.name, value, str(entry.is_default).lower()]))
