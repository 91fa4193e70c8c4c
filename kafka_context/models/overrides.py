"""Tri-state field overrides for context updates."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class OptionalFlag:
    """A flag value together with whether it was explicitly provided.

    `provided` is tracked separately from the value so that an empty value
    given on purpose is distinguishable from a flag that was never passed.
    """
    value: Optional[Any] = None
    provided: bool = False

    @classmethod
    def of(cls, value: Any) -> 'OptionalFlag':
        """Build a provided flag."""
        return cls(value=value, provided=True)

    def set(self, value: Any) -> None:
        """Mark the flag provided with `value`."""
        self.value = value
        self.provided = True


@dataclass
class ContextOverrides:
    """Field overrides for one set-context invocation."""
    bootstrap_servers: OptionalFlag = field(default_factory=OptionalFlag)
    kafka_version: OptionalFlag = field(default_factory=OptionalFlag)
    schema_registry: OptionalFlag = field(default_factory=OptionalFlag)
    ksql: OptionalFlag = field(default_factory=OptionalFlag)
    use_sasl: OptionalFlag = field(default_factory=OptionalFlag)
    algorithm: OptionalFlag = field(default_factory=OptionalFlag)
    username: OptionalFlag = field(default_factory=OptionalFlag)
    password: OptionalFlag = field(default_factory=OptionalFlag)
    # Not tri-state: always applied.
    use_tls: bool = True

    @property
    def sasl_requested(self) -> bool:
        """Whether any SASL related flag was supplied."""
        return any(flag.provided for flag in (
            self.use_sasl, self.algorithm, self.username, self.password
        ))
