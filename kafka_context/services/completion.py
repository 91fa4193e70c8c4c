"""Interactive completion of missing context fields."""

import logging

import click

from kafka_context.models.context import Context, SASL_MECHANISMS
from kafka_context.models.overrides import ContextOverrides

logger = logging.getLogger(__name__)


class ClickPrompter:
    """Terminal prompts backed by click."""

    def text(self, label: str, hide_input: bool = False, choices=None) -> str:
        """Ask for a required text value."""
        prompt_type = click.Choice(choices, case_sensitive=False) if choices else str
        return click.prompt(label, hide_input=hide_input, type=prompt_type)

    def confirm(self, label: str, default: bool = False) -> bool:
        """Ask a yes/no question."""
        return click.confirm(label, default=default)


class InteractiveCompleter:
    """Prompts for required fields missing from both overrides and base."""

    def __init__(self, prompter=None):
        self.prompter = prompter or ClickPrompter()

    def complete(self, base: Context, overrides: ContextOverrides, quiet: bool = False) -> None:
        """Fill missing required overrides in place.

        Prompt order is bootstrap servers, Kafka version, SASL usage, then
        the SASL algorithm, username and password. Schema registry and ksql
        are never prompted for. Nothing happens in quiet mode.
        """
        if quiet:
            return

        if not overrides.bootstrap_servers.provided and not base.bootstrap_servers:
            overrides.bootstrap_servers.set(self.prompter.text("Bootstrap servers"))

        if not overrides.kafka_version.provided and not base.kafka_version:
            overrides.kafka_version.set(self.prompter.text("Kafka version"))

        use_sasl = overrides.sasl_requested or base.sasl.enabled
        if not use_sasl:
            use_sasl = self.prompter.confirm("Use SASL", default=False)
            if use_sasl:
                overrides.use_sasl.set(True)

        if not use_sasl:
            return

        if not overrides.algorithm.provided and not base.sasl.algorithm:
            overrides.algorithm.set(self.prompter.text("SASL Algorithm", choices=SASL_MECHANISMS))

        if not overrides.username.provided and not base.sasl.username:
            overrides.username.set(self.prompter.text("User"))

        if not overrides.password.provided and not base.sasl.password:
            overrides.password.set(self.prompter.text("Password", hide_input=True))

        logger.debug("Completed SASL settings interactively")
