"""Client for the Pinata IPFS pinning API.

Usage example:
    from pinata_client import PinataClient
    with PinataClient.from_env() as client:
        jobs = client.pin_jobs(status='prechecking')
        results = client.revoke_keys(['key1', 'key2'])
"""
from .batch import BatchItemResult, run_batch  # noqa: F401
from .client import PinataClient  # noqa: F401
from .config import PinataConfig  # noqa: F401
from .exceptions import (  # noqa: F401
    AuthenticationError,
    ErrorKind,
    GenericError,
    NetworkError,
    PinataError,
    ValidationError,
)
from .uploads import PinataMetadata, UploadOptions  # noqa: F401
