from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence
from .base_client import BaseClient
from .config import require_jwt
from .exceptions import ValidationError


def _require_group_id(group_id: Optional[str]) -> str:
    if not group_id:
        raise ValidationError('groupId is required')
    return group_id


def _require_cids(cids: Sequence[str]) -> List[str]:
    if not cids:
        raise ValidationError('At least one CID is required')
    return list(cids)


class GroupsClient(BaseClient):
    """Group management: named collections of pinned CIDs."""

    def get_group(self, group_id: str) -> Dict[str, Any]:
        require_jwt(self.config)
        group_id = _require_group_id(group_id)
        return self._request('GET', f"groups/{group_id}", operation='getGroup')

    def list_groups(
        self,
        offset: Optional[int] = None,
        name_contains: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """List groups; ``name_contains`` is a case-insensitive partial match done server side."""
        require_jwt(self.config)
        params: Dict[str, str] = {}
        if offset:
            params['offset'] = str(offset)
        if name_contains is not None:
            params['nameContains'] = str(name_contains)
        if limit is not None:
            params['limit'] = str(limit)
        data = self._request('GET', 'groups', operation='listGroups', params=params)
        return self._rows(data, 'listGroups', 'groups', 'rows')

    def create_group(self, name: str) -> Dict[str, Any]:
        require_jwt(self.config)
        if not name:
            raise ValidationError('Group name is required')
        return self._request('POST', 'groups', operation='createGroup', json_body={'name': name})

    def update_group(self, group_id: str, name: str) -> Dict[str, Any]:
        require_jwt(self.config)
        group_id = _require_group_id(group_id)
        if not name:
            raise ValidationError('Group name is required')
        return self._request('PUT', f"groups/{group_id}", operation='updateGroup', json_body={'name': name})

    def delete_group(self, group_id: str) -> str:
        require_jwt(self.config)
        group_id = _require_group_id(group_id)
        return self._request('DELETE', f"groups/{group_id}", operation='deleteGroup', expect='text')

    def add_to_group(self, group_id: str, cids: Sequence[str]) -> str:
        require_jwt(self.config)
        group_id = _require_group_id(group_id)
        body = {'cids': _require_cids(cids)}
        return self._request('PUT', f"groups/{group_id}/cids", operation='addToGroup', json_body=body, expect='text')

    def remove_from_group(self, group_id: str, cids: Sequence[str]) -> str:
        """Detach CIDs from a group without unpinning them. Returns the response text as sent."""
        require_jwt(self.config)
        group_id = _require_group_id(group_id)
        body = {'cids': _require_cids(cids)}
        return self._request(
            'DELETE', f"groups/{group_id}/cids", operation='removeFromGroup', json_body=body, expect='text'
        )
