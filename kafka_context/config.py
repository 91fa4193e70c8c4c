"""Configuration management for kafka-context."""

import os
from typing import Optional
from dataclasses import dataclass, field
from pathlib import Path


DEFAULT_CONFIG_PATH = str(Path.home() / '.kafka-context' / 'config.yaml')


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class KafkaConfig:
    """Kafka-specific configuration."""
    probe_timeout_seconds: float = 3.0
    connect_timeout_ms: int = 10000
    client_id: str = "kafka-context"


@dataclass
class StorageConfig:
    """Context store configuration."""
    config_path: str = DEFAULT_CONFIG_PATH


@dataclass
class Config:
    """Main configuration class."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)

    @classmethod
    def from_env(cls) -> 'Config':
        """Load configuration from environment variables."""
        config = cls()

        # Storage config
        config.storage.config_path = os.getenv('KAFKA_CONTEXT_CONFIG', config.storage.config_path)

        # Kafka config
        config.kafka.probe_timeout_seconds = float(
            os.getenv('KAFKA_CONTEXT_PROBE_TIMEOUT', str(config.kafka.probe_timeout_seconds))
        )
        config.kafka.connect_timeout_ms = int(
            os.getenv('KAFKA_CONTEXT_CONNECT_TIMEOUT_MS', str(config.kafka.connect_timeout_ms))
        )

        # Logging config
        config.logging.level = os.getenv('LOG_LEVEL', config.logging.level)
        config.logging.file_path = os.getenv('LOG_FILE_PATH')

        return config


# Global configuration instance
config = Config.from_env()
