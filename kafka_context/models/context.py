"""Context (connection profile) data models."""

import re
from pydantic import BaseModel, Field, validator
from typing import Dict, Optional, List, Tuple, NamedTuple


SASL_MECHANISMS = ['PLAIN', 'SCRAM-SHA-256', 'SCRAM-SHA-512']

# Kafka releases a context can target. Pre-1.0 releases carry a four part
# version, everything after uses three parts.
SUPPORTED_KAFKA_VERSIONS = [
    '0.8.2.0', '0.8.2.1', '0.8.2.2',
    '0.9.0.0', '0.9.0.1',
    '0.10.0.0', '0.10.0.1', '0.10.1.0', '0.10.1.1', '0.10.2.0', '0.10.2.1', '0.10.2.2',
    '0.11.0.0', '0.11.0.1', '0.11.0.2',
    '1.0.0', '1.0.1', '1.0.2', '1.1.0', '1.1.1',
    '2.0.0', '2.0.1', '2.1.0', '2.1.1', '2.2.0', '2.2.1', '2.2.2',
    '2.3.0', '2.3.1', '2.4.0', '2.4.1', '2.5.0', '2.5.1', '2.6.0', '2.6.1', '2.6.2', '2.6.3',
    '2.7.0', '2.7.1', '2.7.2', '2.8.0', '2.8.1', '2.8.2',
    '3.0.0', '3.0.1', '3.0.2', '3.1.0', '3.1.1', '3.1.2', '3.2.0', '3.2.1', '3.2.2', '3.2.3',
    '3.3.0', '3.3.1', '3.3.2', '3.4.0', '3.4.1', '3.5.0', '3.5.1', '3.5.2',
    '3.6.0', '3.6.1', '3.6.2', '3.7.0', '3.7.1', '3.7.2', '3.8.0', '3.8.1', '3.9.0', '3.9.1',
    '4.0.0', '4.1.0',
]

_NEW_VERSION_RE = re.compile(r'^\d+\.\d+\.\d+$')
_OLD_VERSION_RE = re.compile(r'^0\.\d+\.\d+\.\d+$')


class KafkaVersion(NamedTuple):
    """Parsed Kafka protocol version."""
    parts: Tuple[int, ...]

    def __str__(self) -> str:
        return '.'.join(str(p) for p in self.parts)


def parse_kafka_version(value: str) -> KafkaVersion:
    """Parse a version string against the known version table.

    Raises:
        ValueError: if the string is malformed or not a known release
    """
    value = (value or '').strip()
    if not (_NEW_VERSION_RE.match(value) or _OLD_VERSION_RE.match(value)):
        raise ValueError(f"invalid version `{value}`")

    version = KafkaVersion(tuple(int(p) for p in value.split('.')))
    if str(version) not in SUPPORTED_KAFKA_VERSIONS:
        raise ValueError(f"unsupported Kafka version `{value}`")
    return version


class SASLSettings(BaseModel):
    """SASL authentication settings for a context."""
    enabled: bool = Field(default=False, description="Authenticate with SASL")
    algorithm: str = Field(default="", description="SASL mechanism")
    username: str = Field(default="", description="SASL username")
    password: str = Field(default="", description="SASL password")

    @validator('algorithm')
    def validate_algorithm(cls, v):
        """Normalize and validate SASL mechanism."""
        if not v:
            return ""
        v = v.strip().upper()
        if v not in SASL_MECHANISMS:
            raise ValueError(f"algorithm must be one of {SASL_MECHANISMS}")
        return v


class Context(BaseModel):
    """Connection profile for one Kafka cluster and its auxiliary services."""
    bootstrap_servers: List[str] = Field(default_factory=list, description="host:port bootstrap servers")
    kafka_version: str = Field(default="", description="Kafka protocol version")
    schema_registry: Optional[str] = Field(default=None, description="Schema registry URL")
    ksql: Optional[str] = Field(default=None, description="ksqlDB URL")
    tls: bool = Field(default=True, description="Connect over TLS")
    sasl: SASLSettings = Field(default_factory=SASLSettings, description="SASL settings")

    @validator('kafka_version')
    def validate_kafka_version(cls, v):
        """Store known versions in canonical form."""
        if not v:
            return ""
        return str(parse_kafka_version(v))

    def masked(self) -> 'Context':
        """Copy safe for display with the SASL password hidden."""
        display = self.copy(deep=True)
        if display.sasl.password:
            display.sasl.password = "***MASKED***"
        return display


class ConfigurationStore(BaseModel):
    """All stored contexts plus the current context name."""
    contexts: Dict[str, Context] = Field(default_factory=dict, description="Contexts by name")
    current_context: Optional[str] = Field(default=None, description="Name of the current context")

    @validator('current_context')
    def validate_current_context(cls, v, values):
        """Current context must name a stored context."""
        if v and v not in values.get('contexts', {}):
            raise ValueError(f"current context `{v}` does not exist")
        return v or None

    def with_context(self, name: str, context: Context) -> 'ConfigurationStore':
        """Copy of the store with `name` set to `context`."""
        contexts = {k: c.copy(deep=True) for k, c in self.contexts.items()}
        contexts[name] = context.copy(deep=True)
        return ConfigurationStore(contexts=contexts, current_context=self.current_context)


class BrokerSummary(BaseModel):
    """Broker membership as reported by the cluster."""
    id: int = Field(..., description="Broker node id")
    host: str = Field(default="", description="Advertised host")
    port: int = Field(default=0, description="Advertised port")
    is_controller: bool = Field(default=False, description="Whether this broker is the controller")


class BrokerConfigEntry(BaseModel):
    """One effective broker configuration entry."""
    name: str = Field(..., description="Configuration key")
    value: Optional[str] = Field(default=None, description="Configuration value")
    is_default: bool = Field(default=False, description="Value is the broker default")
    is_sensitive: bool = Field(default=False, description="Value is redacted by the broker")
