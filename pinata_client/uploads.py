"""Upload options and multipart body construction for the pinning endpoints."""
from __future__ import annotations
import base64
import binascii
import json
import os
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Dict, List, Optional, Tuple, Union
from .exceptions import ValidationError

FileSource = Union[str, 'os.PathLike[str]', BinaryIO]


@dataclass
class PinataMetadata:
    name: Optional[str] = None
    key_values: Dict[str, Any] = field(default_factory=dict)


@dataclass
class UploadOptions:
    metadata: Optional[PinataMetadata] = None
    cid_version: Optional[int] = None
    group_id: Optional[str] = None
    # overrides the configured JWT for this call only
    keys: Optional[str] = None


def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


def pinata_options(options: Optional[UploadOptions]) -> Dict[str, Any]:
    if options is None:
        return {}
    return _drop_none({'cidVersion': options.cid_version, 'groupId': options.group_id})


def pinata_metadata(name: str, options: Optional[UploadOptions]) -> Dict[str, Any]:
    key_values = options.metadata.key_values if options and options.metadata else None
    return _drop_none({'name': name, 'keyvalues': key_values or None})


def upload_name(options: Optional[UploadOptions], default: str) -> str:
    if options and options.metadata and options.metadata.name:
        return options.metadata.name
    return default


def multipart_parts(content: bytes, name: str, options: Optional[UploadOptions]) -> List[Tuple[str, Tuple[Optional[str], Any]]]:
    """Build the ``files=`` argument for requests: file, pinataOptions, pinataMetadata, in that order."""
    return [
        ('file', (name, content)),
        ('pinataOptions', (None, json.dumps(pinata_options(options)))),
        ('pinataMetadata', (None, json.dumps(pinata_metadata(name, options)))),
    ]


def read_file(file: FileSource) -> Tuple[bytes, str]:
    """Return the bytes of a path or binary file handle and its base name."""
    if isinstance(file, (str, os.PathLike)):
        path = os.fspath(file)
        try:
            with open(path, 'rb') as fh:
                return fh.read(), os.path.basename(path)
        except OSError as e:
            raise ValidationError(f"Cannot read upload source {path}: {e}") from e
    if not hasattr(file, 'read'):
        raise ValidationError('file must be a path or a binary file object')
    try:
        content = file.read()
    except (OSError, ValueError) as e:
        raise ValidationError(f"Cannot read upload source: {e}") from e
    if isinstance(content, str):
        raise ValidationError('file must be opened in binary mode')
    name = getattr(file, 'name', None)
    return content, os.path.basename(name) if isinstance(name, str) and name else 'file'


def decode_base64(value: str) -> bytes:
    if not value:
        raise ValidationError('base64 string is required')
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValidationError(f"Invalid base64 string: {e}") from e
