from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional
from .exceptions import ValidationError

DEFAULT_ENDPOINT_URL = 'https://api.pinata.cloud'
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class PinataConfig:
    """Credentials and connection settings shared by every call.

    ``endpoint_url`` defaults to the public API when left unset; it is
    resolved per request through :attr:`base_url`, never cached elsewhere.
    """
    pinata_jwt: Optional[str] = None
    custom_headers: Mapping[str, str] = field(default_factory=dict)
    endpoint_url: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    @property
    def base_url(self) -> str:
        return (self.endpoint_url or DEFAULT_ENDPOINT_URL).rstrip('/')

    @classmethod
    def from_env(cls) -> 'PinataConfig':
        jwt = os.getenv('PINATA_JWT')
        if jwt is None or jwt.strip() == '':
            raise ValidationError('Missing required environment variable: PINATA_JWT')
        endpoint_url = os.getenv('PINATA_ENDPOINT_URL') or None
        timeout = DEFAULT_TIMEOUT
        timeout_value = os.getenv('PINATA_TIMEOUT')
        if timeout_value:
            try:
                timeout = float(timeout_value)
            except ValueError:
                timeout = DEFAULT_TIMEOUT
            if timeout <= 0:
                timeout = DEFAULT_TIMEOUT
        return cls(pinata_jwt=jwt.strip(), endpoint_url=endpoint_url, timeout=timeout)


def require_jwt(config: Optional[PinataConfig]) -> str:
    if config is None or not config.pinata_jwt:
        raise ValidationError('Pinata configuration or JWT is missing')
    return config.pinata_jwt
