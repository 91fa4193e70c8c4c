"""Tests for interactive completion of missing fields."""

from unittest.mock import patch

from kafka_context.models.context import Context, SASLSettings
from kafka_context.models.overrides import ContextOverrides, OptionalFlag
from kafka_context.services.completion import ClickPrompter, InteractiveCompleter


class TestInteractiveCompleter:
    """Test InteractiveCompleter prompting rules."""

    def test_quiet_mode_never_prompts(self, fake_prompter):
        prompter = fake_prompter()
        overrides = ContextOverrides()

        InteractiveCompleter(prompter).complete(Context(), overrides, quiet=True)

        assert prompter.asked == []
        assert overrides.bootstrap_servers.provided is False

    def test_prompts_in_fixed_order_for_new_context(self, fake_prompter):
        prompter = fake_prompter(texts={
            'Bootstrap servers': 'a:9092',
            'Kafka version': '3.6.0',
            'SASL Algorithm': 'PLAIN',
            'User': 'alice',
            'Password': 's3cret',
        }, confirm=True)
        overrides = ContextOverrides()

        InteractiveCompleter(prompter).complete(Context(), overrides)

        assert prompter.asked == [
            ('Bootstrap servers', False),
            ('Kafka version', False),
            ('Use SASL', False),
            ('SASL Algorithm', False),
            ('User', False),
            ('Password', True),
        ]
        assert overrides.bootstrap_servers.value == 'a:9092'
        assert overrides.kafka_version.value == '3.6.0'
        assert overrides.use_sasl.provided and overrides.use_sasl.value is True
        assert overrides.password.value == 's3cret'

    def test_declined_sasl_skips_credentials(self, fake_prompter):
        prompter = fake_prompter(texts={
            'Bootstrap servers': 'a:9092',
            'Kafka version': '3.6.0',
        }, confirm=False)
        overrides = ContextOverrides()

        InteractiveCompleter(prompter).complete(Context(), overrides)

        assert [label for label, _ in prompter.asked] == [
            'Bootstrap servers', 'Kafka version', 'Use SASL'
        ]
        assert overrides.use_sasl.provided is False
        assert overrides.username.provided is False

    def test_fields_present_on_base_are_not_prompted(self, fake_prompter, dev_context):
        prompter = fake_prompter()
        overrides = ContextOverrides()

        InteractiveCompleter(prompter).complete(dev_context, overrides)

        assert prompter.asked == []

    def test_provided_overrides_are_not_prompted(self, fake_prompter):
        prompter = fake_prompter(texts={'Password': 'pw'})
        overrides = ContextOverrides(
            bootstrap_servers=OptionalFlag.of('a:9092'),
            kafka_version=OptionalFlag.of('2.8.0'),
            use_sasl=OptionalFlag.of(True),
            algorithm=OptionalFlag.of('PLAIN'),
            username=OptionalFlag.of('bob')
        )

        InteractiveCompleter(prompter).complete(Context(), overrides)

        assert prompter.asked == [('Password', True)]
        assert overrides.password.value == 'pw'

    def test_missing_credentials_completed_when_base_uses_sasl(self, fake_prompter):
        base = Context(
            bootstrap_servers=['a:9092'],
            kafka_version='2.8.0',
            sasl=SASLSettings(enabled=True, algorithm='PLAIN')
        )
        prompter = fake_prompter(texts={'User': 'carol', 'Password': 'pw'})
        overrides = ContextOverrides()

        InteractiveCompleter(prompter).complete(base, overrides)

        assert prompter.asked == [('User', False), ('Password', True)]

    def test_schema_registry_and_ksql_never_prompted(self, fake_prompter):
        base = Context(bootstrap_servers=['a:9092'], kafka_version='2.8.0')
        prompter = fake_prompter(confirm=False)
        overrides = ContextOverrides()

        InteractiveCompleter(prompter).complete(base, overrides)

        assert prompter.asked == [('Use SASL', False)]
        assert overrides.schema_registry.provided is False
        assert overrides.ksql.provided is False


class TestClickPrompter:
    """Test the click backed prompter."""

    def test_password_prompt_hides_input(self):
        with patch('kafka_context.services.completion.click.prompt', return_value='pw') as mock_prompt:
            assert ClickPrompter().text('Password', hide_input=True) == 'pw'

        _, kwargs = mock_prompt.call_args
        assert kwargs['hide_input'] is True

    def test_confirm_defaults_to_no(self):
        with patch('kafka_context.services.completion.click.confirm', return_value=False) as mock_confirm:
            assert ClickPrompter().confirm('Use SASL') is False

        mock_confirm.assert_called_once_with('Use SASL', default=False)
