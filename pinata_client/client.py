from __future__ import annotations
from typing import Optional
import requests
from .config import PinataConfig
from .data import DataClient
from .groups import GroupsClient
from .keys import KeysClient
from .pinning import PinningClient


class PinataClient(DataClient, GroupsClient, PinningClient, KeysClient):
    """Every Pinata endpoint on one object sharing a config and a session."""

    @classmethod
    def from_env(cls, session: Optional[requests.Session] = None) -> 'PinataClient':
        return cls(PinataConfig.from_env(), session=session)
