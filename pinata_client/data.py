from __future__ import annotations
from typing import Any, Dict, List, Optional
from .base_client import BaseClient
from .config import require_jwt
from .exceptions import ValidationError

PIN_JOB_STATUSES = (
    'prechecking',
    'retrieving',
    'expired',
    'over_free_limit',
    'over_max_size',
    'invalid_object',
    'bad_host_node',
)
SORT_ORDERS = ('ASC', 'DSC')


class DataClient(BaseClient):
    """Account data endpoints: pin job queue and credential check."""

    def test_authentication(self) -> Dict[str, Any]:
        require_jwt(self.config)
        return self._request('GET', 'data/testAuthentication', operation='testAuthentication')

    def pin_jobs(
        self,
        ipfs_pin_hash: Optional[str] = None,
        status: Optional[str] = None,
        sort: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """List pin jobs, optionally filtered by CID or status.

        The count is never requested (``includesCount=false``); only the
        ``rows`` of the response envelope are returned.
        """
        require_jwt(self.config)
        if status and status not in PIN_JOB_STATUSES:
            raise ValidationError(f"Unknown pin job status: {status}")
        if sort and sort not in SORT_ORDERS:
            raise ValidationError(f"Unknown sort order: {sort}")
        params = {'includesCount': 'false'}
        if ipfs_pin_hash:
            params['ipfs_pin_hash'] = str(ipfs_pin_hash)
        if status:
            params['status'] = str(status)
        if sort:
            params['sort'] = str(sort)
        if limit:
            params['limit'] = str(limit)
        if offset:
            params['offset'] = str(offset)
        data = self._request('GET', 'pinning/pinJobs', operation='pinJobs', params=params)
        return self._rows(data, 'pinJobs', 'rows')
