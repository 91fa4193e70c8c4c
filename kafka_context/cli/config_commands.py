"""CLI commands for managing contexts."""

import click
from click.core import ParameterSource
from tabulate import tabulate

from kafka_context.cli.config import load_store, report_error
from kafka_context.clients.kafka_client import open_connection
from kafka_context.exceptions import KafkaContextError
from kafka_context.logging_config import audit_logger
from kafka_context.models.overrides import ContextOverrides, OptionalFlag
from kafka_context.services.contexts import delete_context, get_current_context, use_context
from kafka_context.services.probe import is_reachable
from kafka_context.services.set_context import SetContextCommand, SetContextRequest


_PROVIDED_SOURCES = (ParameterSource.COMMANDLINE, ParameterSource.ENVIRONMENT, ParameterSource.PROMPT)

SET_CONTEXT_HELP = """Sets a context entry in config.

Specifying a name that already exists will merge new fields on top of
existing values for those fields.

\b
Example:
  # Set the servers of the kafka-dev context without touching other values
  kafka-context set-context kafka-dev --server=b-1.example.com:9092,b-2.example.com:9092
"""


def _flag(ctx: click.Context, param_name: str) -> OptionalFlag:
    """Wrap a parameter value with whether it was explicitly passed."""
    source = ctx.get_parameter_source(param_name)
    return OptionalFlag(value=ctx.params[param_name], provided=source in _PROVIDED_SOURCES)


@click.command('set-context', help=SET_CONTEXT_HELP)
@click.argument('name', required=False)
@click.option('--current', is_flag=True, help='Modify the current context')
@click.option('--server', help='Bootstrap servers for the context (comma-separated)')
@click.option('--schema-registry', help='Schema registry URL for the context')
@click.option('--ksql', help='ksql URL for the context')
@click.option('--version', 'kafka_version', help='Kafka version for the context')
@click.option('--sasl', is_flag=True, help='Use SASL')
@click.option('--algorithm', '-a', help='Algorithm for SASL')
@click.option('--username', '-u', help='Username')
@click.option('--password', '-p', help='Password')
@click.option('--tls', type=bool, default=True, show_default=True, help='Use TLS')
@click.option('--quiet', '-q', is_flag=True, help='Never prompt, fail on missing values')
@click.pass_context
def set_context(ctx, name, current, server, schema_registry, ksql, kafka_version,
                sasl, algorithm, username, password, tls, quiet):
    overrides = ContextOverrides(
        bootstrap_servers=_flag(ctx, 'server'),
        kafka_version=_flag(ctx, 'kafka_version'),
        schema_registry=_flag(ctx, 'schema_registry'),
        ksql=_flag(ctx, 'ksql'),
        use_sasl=_flag(ctx, 'sasl'),
        algorithm=_flag(ctx, 'algorithm'),
        username=_flag(ctx, 'username'),
        password=_flag(ctx, 'password'),
        use_tls=tls
    )
    request = SetContextRequest(name=name, current=current, overrides=overrides, quiet=quiet)

    try:
        storage, store = load_store(ctx.obj)
        command = SetContextCommand(connector=open_connection, prober=is_reachable)
        result = command.run(store, request)
        storage.save(result.store)
    except KafkaContextError as e:
        report_error(ctx, e)

    context = result.context
    audit_logger.log_context_operation(
        result.name, 'create' if result.created else 'modify',
        details={'servers': context.bootstrap_servers, 'tls': context.tls,
                 'sasl': context.sasl.enabled}
    )

    if result.created:
        click.echo(f'Context "{result.name}" created.')
    else:
        click.echo(f'Context "{result.name}" modified.')


@click.command('get-contexts')
@click.pass_context
def get_contexts(ctx):
    """Describe all stored contexts."""
    try:
        _, store = load_store(ctx.obj)
    except KafkaContextError as e:
        report_error(ctx, e)

    rows = []
    for name, context in store.contexts.items():
        rows.append([
            '*' if name == store.current_context else '',
            name,
            ','.join(context.bootstrap_servers),
            context.kafka_version,
            context.sasl.algorithm if context.sasl.enabled else '',
            context.tls
        ])

    headers = ['CURRENT', 'NAME', 'SERVERS', 'VERSION', 'SASL', 'TLS']
    click.echo(tabulate(rows, headers=headers, tablefmt='plain'))


@click.command('current-context')
@click.pass_context
def current_context(ctx):
    """Display the current context."""
    try:
        _, store = load_store(ctx.obj)
        name, _ = get_current_context(store)
    except KafkaContextError as e:
        report_error(ctx, e)

    click.echo(name)


@click.command('use-context')
@click.argument('name')
@click.pass_context
def use_context_cmd(ctx, name):
    """Set the current context."""
    try:
        storage, store = load_store(ctx.obj)
        storage.save(use_context(store, name))
    except KafkaContextError as e:
        report_error(ctx, e)

    audit_logger.log_context_operation(name, 'use')
    click.echo(f'Switched to context "{name}".')


@click.command('delete-context')
@click.argument('name')
@click.pass_context
def delete_context_cmd(ctx, name):
    """Delete the specified context from the config."""
    try:
        storage, store = load_store(ctx.obj)
        storage.save(delete_context(store, name))
    except KafkaContextError as e:
        report_error(ctx, e)

    audit_logger.log_context_operation(name, 'delete')
    click.echo(f'Deleted context "{name}".')
