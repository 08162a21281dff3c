from __future__ import annotations
import json
from typing import Any, Dict, List, Optional, Sequence
from .base_client import BaseClient
from .batch import run_batch
from .config import require_jwt
from .exceptions import ValidationError


class KeysClient(BaseClient):
    """API key management."""

    def create_key(self, key_name: str, permissions: Dict[str, Any], max_uses: Optional[int] = None) -> Dict[str, Any]:
        require_jwt(self.config)
        if not key_name:
            raise ValidationError('keyName is required')
        body: Dict[str, Any] = {'keyName': key_name, 'permissions': permissions}
        if max_uses is not None:
            body['maxUses'] = max_uses
        return self._request('POST', 'v3/pinata/keys', operation='createKey', json_body=body)

    def list_keys(
        self,
        offset: Optional[int] = None,
        revoked: Optional[bool] = None,
        limited_use: Optional[bool] = None,
        exhausted: Optional[bool] = None,
        name: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        require_jwt(self.config)
        params: Dict[str, str] = {}
        if offset:
            params['offset'] = str(offset)
        for field, value in (('revoked', revoked), ('limitedUse', limited_use), ('exhausted', exhausted)):
            if value is not None:
                params[field] = str(value).lower()
        if name:
            params['name'] = name
        data = self._request('GET', 'v3/pinata/keys', operation='listKeys', params=params)
        return self._rows(data, 'listKeys', 'keys')

    def revoke_keys(self, keys: Sequence[str]) -> List[Dict[str, str]]:
        """Revoke each key in turn.

        Returns one ``{"key", "status"}`` entry per input key, in order. A key
        that fails to revoke does not stop the others; its status carries the
        failure instead.
        """
        require_jwt(self.config)

        def _revoke_one(key: str) -> str:
            res = self._request('PUT', f"v3/pinata/keys/{key}", operation='revokeKeys')
            return res if isinstance(res, str) else json.dumps(res)

        results = run_batch(keys, _revoke_one, 'Error revoking key')
        return [r.as_dict('key') for r in results]
