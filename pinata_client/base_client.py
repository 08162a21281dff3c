from __future__ import annotations
import json
import logging
from typing import Any, Dict, List, Optional
import requests
from .config import DEFAULT_TIMEOUT, PinataConfig, require_jwt
from .exceptions import AuthenticationError, GenericError, NetworkError, PinataError

logger = logging.getLogger(__name__)


def error_body(resp: requests.Response) -> Any:
    """Best-effort decode of an error response: JSON when possible, raw text otherwise."""
    try:
        return resp.json()
    except ValueError:
        return resp.text


def is_success(resp: requests.Response) -> bool:
    return 200 <= resp.status_code < 300


class BaseClient:
    """Base HTTP client: header merging, a single request per call and error classification."""

    def __init__(self, config: Optional[PinataConfig] = None, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session if session is not None else requests.Session()

    @property
    def timeout(self) -> float:
        return self.config.timeout if self.config else DEFAULT_TIMEOUT

    def _url(self, path: str) -> str:
        return self.config.base_url + '/' + path.lstrip('/')  # type: ignore[union-attr]

    def _headers(self, source: str, *, json_body: bool = False, jwt: Optional[str] = None) -> Dict[str, str]:
        headers = {'Authorization': f"Bearer {jwt or self.config.pinata_jwt}"}  # type: ignore[union-attr]
        if json_body:
            headers['Content-Type'] = 'application/json'
        headers.update(self.config.custom_headers or {})  # type: ignore[union-attr]
        if jwt:
            # per-call token wins over a configured Authorization header
            headers['Authorization'] = f"Bearer {jwt}"
        if not headers.get('Source'):
            headers['Source'] = f"sdk/{source}"
        return headers

    def _request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        params: Dict[str, str] | None = None,
        json_body: Any | None = None,
        files: Any | None = None,
        jwt: Optional[str] = None,
        expect: str = 'json',
    ) -> Any:
        require_jwt(self.config)
        url = self._url(path)
        headers = self._headers(operation, json_body=json_body is not None, jwt=jwt)
        logger.debug("pinata.request method=%s url=%s source=%s", method.upper(), url, headers.get('Source'))
        try:
            data = json.dumps(json_body) if json_body is not None else None
            resp = self.session.request(
                method.upper(), url, params=params, headers=headers, data=data, files=files, timeout=self.timeout
            )
            self._raise_for_status(resp, method, url)
            if expect == 'text':
                return resp.text
            try:
                return resp.json()
            except ValueError as e:
                raise GenericError(
                    f"Error processing {operation}: Failed to decode JSON response", resp.status_code, resp.text
                ) from e
        except PinataError:
            raise
        except Exception as e:
            raise GenericError(f"Error processing {operation}: {e}") from e

    @staticmethod
    def _raise_for_status(resp: requests.Response, method: str, url: str) -> None:
        if is_success(resp):
            return
        details = error_body(resp)
        logger.warning(
            "pinata.request.failed method=%s url=%s status=%s body=%s", method.upper(), url, resp.status_code, str(details)[:200]
        )
        if resp.status_code == 401:
            raise AuthenticationError('Authentication failed', resp.status_code, details)
        raise NetworkError(f"HTTP error! status: {resp.status_code}", resp.status_code, details)

    @staticmethod
    def _rows(payload: Any, operation: str, *keys: str) -> List[Any]:
        # list endpoints answer with a bare array or an object wrapping one
        if isinstance(payload, list):
            return payload
        if isinstance(payload, dict):
            for key in keys:
                items = payload.get(key)
                if isinstance(items, list):
                    return items
        raise GenericError(f"Error processing {operation}: unexpected response shape", details=payload)

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
