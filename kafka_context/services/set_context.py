"""Create or update a stored context."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from kafka_context.clients.kafka_client import ClusterConnection, open_connection
from kafka_context.exceptions import (
    ConnectivityError, NotFoundError, UsageError, ValidationError
)
from kafka_context.models.context import ConfigurationStore, Context
from kafka_context.models.overrides import ContextOverrides
from kafka_context.services.completion import InteractiveCompleter
from kafka_context.services.merge import merge_context
from kafka_context.services.probe import is_reachable, redact_address, split_host_port

logger = logging.getLogger(__name__)


@dataclass
class SetContextRequest:
    """Arguments of one set-context invocation."""
    name: Optional[str] = None
    current: bool = False
    overrides: ContextOverrides = field(default_factory=ContextOverrides)
    quiet: bool = False


@dataclass
class SetContextResult:
    """Outcome of a successful set-context invocation."""
    name: str
    created: bool
    context: Context
    store: ConfigurationStore


class SetContextCommand:
    """Resolves, completes, merges, validates and checks a context update.

    The input store is never modified; the updated store is returned in the
    result for the caller to persist.
    """

    def __init__(
        self,
        connector: Callable[[Context], ClusterConnection] = open_connection,
        prober: Callable[[str], bool] = is_reachable,
        completer: Optional[InteractiveCompleter] = None
    ):
        self.connector = connector
        self.prober = prober
        self.completer = completer or InteractiveCompleter()

    def run(self, store: ConfigurationStore, request: SetContextRequest) -> SetContextResult:
        """Apply `request` to `store`.

        Raises:
            UsageError: if neither or both of a name and `current` are given
            NotFoundError: if `current` is requested without a current context
            ValidationError: if the merged context is invalid
            ConnectivityError: if an endpoint or the cluster cannot be reached
        """
        name = self.resolve_name(store, request)

        exists = name in store.contexts
        base = store.contexts[name] if exists else Context()

        self.completer.complete(base, request.overrides, quiet=request.quiet)

        context = merge_context(base, request.overrides)

        self.validate(request)
        self.check_connection(context, request.overrides)

        updated = store.with_context(name, context)
        return SetContextResult(name=name, created=not exists, context=context, store=updated)

    def resolve_name(self, store: ConfigurationStore, request: SetContextRequest) -> str:
        """Pick the target context name."""
        if not request.name and not request.current:
            raise UsageError("you must specify a non-empty context name or --current")
        if request.name and request.current:
            raise UsageError("you cannot specify both a context name and --current")

        if request.current:
            if not store.current_context:
                raise NotFoundError("no current context is set")
            return store.current_context

        return request.name

    def validate(self, request: SetContextRequest) -> None:
        """Check endpoint syntax, reachability and quiet mode SASL flags."""
        overrides = request.overrides

        for label, flag in (('ksql', overrides.ksql), ('schema-registry', overrides.schema_registry)):
            if not flag.provided or not flag.value:
                continue
            # Syntax is checked before any probe is attempted.
            split_host_port(flag.value)
            if not request.quiet and not self.prober(flag.value):
                raise ConnectivityError(f"failed to connect on {label}", address=redact_address(flag.value))

        if overrides.use_sasl.provided and request.quiet:
            if not overrides.username.provided:
                raise ValidationError("username flag is required if SASL is provided", field='username')
            if not overrides.password.provided:
                raise ValidationError("password flag is required if SASL is provided", field='password')

    def check_connection(self, context: Context, overrides: ContextOverrides) -> None:
        """Require a live cluster connection when bootstrap servers change."""
        if not overrides.bootstrap_servers.provided:
            logger.debug("Bootstrap servers unchanged, skipping connection check")
            return

        with self.connector(context):
            logger.info(f"Connection check passed for {','.join(context.bootstrap_servers)}")
