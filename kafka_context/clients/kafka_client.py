"""Kafka cluster connections built from stored contexts."""

import logging
import ssl
from typing import Dict, Any, Optional, List

from kafka import KafkaAdminClient
from kafka.admin import ConfigResource, ConfigResourceType

from kafka_context.config import config
from kafka_context.exceptions import ConnectivityError, KafkaContextError
from kafka_context.models.context import Context, BrokerSummary, BrokerConfigEntry

logger = logging.getLogger(__name__)

# DescribeConfigs v1+ reports a config source instead of an is_default flag.
_DEFAULT_CONFIG_SOURCE = 5


def security_protocol(context: Context) -> str:
    """Kafka security protocol for a context's TLS and SASL settings."""
    if context.sasl.enabled:
        return 'SASL_SSL' if context.tls else 'SASL_PLAINTEXT'
    return 'SSL' if context.tls else 'PLAINTEXT'


def build_client_config(context: Context, timeout_ms: Optional[int] = None) -> Dict[str, Any]:
    """Build kafka-python admin client configuration for a context."""
    timeout_ms = timeout_ms or config.kafka.connect_timeout_ms
    config_dict = {
        'bootstrap_servers': list(context.bootstrap_servers),
        'client_id': config.kafka.client_id,
        'security_protocol': security_protocol(context),
        'request_timeout_ms': timeout_ms,
        'api_version_auto_timeout_ms': timeout_ms,
    }

    if context.tls:
        config_dict['ssl_context'] = ssl.create_default_context()

    if context.sasl.enabled:
        config_dict['sasl_mechanism'] = context.sasl.algorithm or 'PLAIN'
        config_dict['sasl_plain_username'] = context.sasl.username
        config_dict['sasl_plain_password'] = context.sasl.password

    return config_dict


class ClusterConnection:
    """Open admin session against one cluster."""

    def __init__(self, admin_client: KafkaAdminClient, bootstrap_servers: List[str]):
        self.admin_client = admin_client
        self.bootstrap_servers = bootstrap_servers

    def list_brokers(self) -> List[BrokerSummary]:
        """List brokers ordered by id with the controller flagged."""
        try:
            metadata = self.admin_client.describe_cluster()
        except Exception as e:
            raise ConnectivityError(
                "failed to describe cluster",
                bootstrap_servers=','.join(self.bootstrap_servers),
                cause=e
            ) from e

        controller_id = metadata.get('controller_id')
        brokers = [
            BrokerSummary(
                id=broker['node_id'],
                host=broker.get('host', ''),
                port=broker.get('port', 0),
                is_controller=broker['node_id'] == controller_id
            )
            for broker in metadata.get('brokers', [])
        ]
        return sorted(brokers, key=lambda b: b.id)

    def describe_broker_config(self, broker_id: int) -> List[BrokerConfigEntry]:
        """Fetch the effective configuration of a broker."""
        resource = ConfigResource(ConfigResourceType.BROKER, str(broker_id))
        try:
            responses = self.admin_client.describe_configs([resource])
        except Exception as e:
            raise ConnectivityError(
                f"failed to describe configs of broker {broker_id}",
                bootstrap_servers=','.join(self.bootstrap_servers),
                cause=e
            ) from e

        entries = []
        for response in responses:
            for error_code, error_message, _type, _name, config_entries in response.resources:
                if error_code:
                    raise KafkaContextError(
                        f"broker {broker_id} rejected describe configs: {error_message}",
                        details={'error_code': error_code}
                    )
                entries.extend(_config_entry(raw) for raw in config_entries)

        logger.debug(f"Fetched {len(entries)} config entries from broker {broker_id}")
        return entries

    def close(self):
        """Close the admin client."""
        try:
            self.admin_client.close()
            logger.debug(f"Closed connection to {self.bootstrap_servers}")
        except Exception as e:
            logger.warning(f"Error closing connection to {self.bootstrap_servers}: {e}")

    def __enter__(self) -> 'ClusterConnection':
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


def _config_entry(raw) -> BrokerConfigEntry:
    name, value, _read_only, default_or_source, is_sensitive = raw[:5]
    if isinstance(default_or_source, bool):
        is_default = default_or_source
    else:
        is_default = default_or_source == _DEFAULT_CONFIG_SOURCE
    return BrokerConfigEntry(
        name=name,
        value=value,
        is_default=is_default,
        is_sensitive=bool(is_sensitive)
    )


def open_connection(context: Context, timeout_ms: Optional[int] = None) -> ClusterConnection:
    """Open an admin connection to the cluster described by `context`.

    Raises:
        ConnectivityError: if no bootstrap server could be reached
    """
    servers = ','.join(context.bootstrap_servers)
    if not context.bootstrap_servers:
        raise ConnectivityError("no bootstrap servers configured")

    try:
        admin_client = KafkaAdminClient(**build_client_config(context, timeout_ms))
    except Exception as e:
        logger.error(f"Failed to connect to {servers}: {e}")
        raise ConnectivityError(
            f"could not connect to {servers}", bootstrap_servers=servers, cause=e
        ) from e

    logger.info(f"Connected to cluster at {servers}")
    return ClusterConnection(admin_client, list(context.bootstrap_servers))
