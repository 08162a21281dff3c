from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional, Sequence
import requests
from .base_client import BaseClient, error_body, is_success
from .batch import run_batch
from .config import require_jwt
from .exceptions import GenericError, NetworkError, ValidationError
from .uploads import (
    FileSource,
    UploadOptions,
    decode_base64,
    multipart_parts,
    pinata_metadata,
    pinata_options,
    read_file,
    upload_name,
)

logger = logging.getLogger(__name__)


class PinningClient(BaseClient):
    """Uploads (file, base64, URL, JSON), unpinning and pin metadata."""

    def _pin_file(self, content: bytes, name: str, options: Optional[UploadOptions], operation: str) -> Dict[str, Any]:
        return self._request(
            'POST',
            'pinning/pinFileToIPFS',
            operation=operation,
            files=multipart_parts(content, name, options),
            jwt=options.keys if options else None,
        )

    def upload_file(self, file: FileSource, options: Optional[UploadOptions] = None) -> Dict[str, Any]:
        """Pin the contents of a binary file object or a path."""
        require_jwt(self.config)
        content, file_name = read_file(file)
        name = upload_name(options, file_name)
        return self._pin_file(content, name, options, 'uploadFile')

    def upload_base64(self, base64_string: str, options: Optional[UploadOptions] = None) -> Dict[str, Any]:
        require_jwt(self.config)
        content = decode_base64(base64_string)
        name = upload_name(options, 'base64 string')
        return self._pin_file(content, name, options, 'uploadBase64')

    def upload_url(self, url: str, options: Optional[UploadOptions] = None) -> Dict[str, Any]:
        """Download ``url`` and pin the bytes.

        A failed download raises NetworkError and the upload request is never
        sent. The download carries none of the Pinata headers.
        """
        require_jwt(self.config)
        if not url:
            raise ValidationError('url is required')
        try:
            source = self.session.request('GET', url, timeout=self.timeout)
        except requests.RequestException as e:
            raise GenericError(f"Error processing url: {e}") from e
        if not is_success(source):
            logger.warning("pinata.upload_url.fetch_failed url=%s status=%s", url, source.status_code)
            raise NetworkError(f"HTTP error! status: {source.status_code}", source.status_code, error_body(source))
        name = upload_name(options, 'url_upload')
        return self._pin_file(source.content, name, options, 'uploadUrl')

    def upload_json(self, content: Any, options: Optional[UploadOptions] = None) -> Dict[str, Any]:
        require_jwt(self.config)
        name = upload_name(options, 'json')
        body = {
            'pinataContent': content,
            'pinataOptions': pinata_options(options),
            'pinataMetadata': pinata_metadata(name, options),
        }
        return self._request(
            'POST',
            'pinning/pinJSONToIPFS',
            operation='uploadJson',
            json_body=body,
            jwt=options.keys if options else None,
        )

    def unpin(self, cids: Sequence[str]) -> List[Dict[str, str]]:
        """Unpin each CID in turn; one ``{"hash", "status"}`` entry per CID, failures included."""
        require_jwt(self.config)

        def _unpin_one(cid: str) -> str:
            return self._request('DELETE', f"pinning/unpin/{cid}", operation='unpin', expect='text')

        results = run_batch(cids, _unpin_one, 'Error unpinning file')
        return [r.as_dict('hash') for r in results]

    def update_metadata(self, cid: str, name: Optional[str] = None, key_values: Optional[Dict[str, Any]] = None) -> str:
        require_jwt(self.config)
        if not cid:
            raise ValidationError('cid is required')
        body: Dict[str, Any] = {'ipfsPinHash': cid}
        if name is not None:
            body['name'] = name
        if key_values is not None:
            body['keyvalues'] = key_values
        return self._request('PUT', 'pinning/hashMetadata', operation='updateMetadata', json_body=body, expect='text')
