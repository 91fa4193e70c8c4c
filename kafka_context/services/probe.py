"""TCP reachability checks for service endpoints."""

import logging
import re
import socket
from typing import Optional, Tuple
from urllib.parse import urlsplit

from kafka_context.config import config
from kafka_context.exceptions import ValidationError

logger = logging.getLogger(__name__)

_USERINFO_RE = re.compile(r'^([A-Za-z][A-Za-z0-9+.-]*://)?[^/?#]*@')


def _split(address: str):
    # A bare `host:port` would otherwise parse `host` as the scheme.
    return urlsplit(address if '://' in address else '//' + address)


def redact_address(address: str) -> str:
    """Drop any `user:password@` part so the address is safe to print."""
    return _USERINFO_RE.sub(r'\1', (address or '').strip(), count=1)


def split_host_port(address: str) -> Tuple[str, int]:
    """Split `host:port` or `scheme://[user@]host:port/path` into host and port.

    Raises:
        ValidationError: if the address has no usable host or port
    """
    address = (address or '').strip()
    safe = redact_address(address)

    try:
        parts = _split(address)
    except ValueError as e:
        raise ValidationError(f"invalid address {safe}", field='address', value=safe, cause=e)

    try:
        host, port = parts.hostname, parts.port
    except ValueError as e:
        raise ValidationError(f"invalid port on {safe}", field='address', value=safe, cause=e)

    if not host or port is None:
        raise ValidationError(f"port is needed on {safe}", field='address', value=safe)

    try:
        host.encode('idna')
    except UnicodeError as e:
        raise ValidationError(f"invalid host on {safe}", field='address', value=safe, cause=e)

    return host, port


def is_reachable(address: str, timeout: Optional[float] = None) -> bool:
    """Check whether a TCP connection to `address` can be opened.

    The probe socket is closed straight after a successful connect.

    Args:
        address: `host:port` or URL with an explicit port
        timeout: Seconds to wait, defaults to the configured probe timeout

    Returns:
        True if the connection succeeded

    Raises:
        ValidationError: if the address has no usable host or port
    """
    host, port = split_host_port(address)
    timeout = timeout if timeout is not None else config.kafka.probe_timeout_seconds
    safe = redact_address(address)

    try:
        with socket.create_connection((host, port), timeout=timeout):
            logger.debug(f"Probe succeeded for {safe}")
            return True
    except (OSError, UnicodeError) as e:
        logger.warning(f"Probe failed for {safe}: {e}")
        return False
