import base64
import io
import json
import pytest
import requests
from pinata_client import (
    AuthenticationError,
    GenericError,
    NetworkError,
    PinataConfig,
    PinataMetadata,
    UploadOptions,
    ValidationError,
)
from tests.helpers import StubResponse

PIN_RESPONSE = {'IpfsHash': 'QmHash', 'PinSize': 5, 'Timestamp': '2024-01-01T00:00:00Z'}


def _parts(call):
    return {name: value for name, value in call['files']}


def test_upload_file_multipart_parts(make_client):
    client, session = make_client(StubResponse(200, PIN_RESPONSE))
    fh = io.BytesIO(b'hello')
    fh.name = '/tmp/dir/hello.txt'
    options = UploadOptions(
        metadata=PinataMetadata(key_values={'env': 'test'}),
        cid_version=1,
        group_id='g1',
    )
    assert client.upload_file(fh, options) == PIN_RESPONSE
    call = session.calls[0]
    assert call['method'] == 'POST'
    assert call['url'] == 'https://api.pinata.cloud/pinning/pinFileToIPFS'
    assert [name for name, _ in call['files']] == ['file', 'pinataOptions', 'pinataMetadata']
    parts = _parts(call)
    assert parts['file'] == ('hello.txt', b'hello')
    assert json.loads(parts['pinataOptions'][1]) == {'cidVersion': 1, 'groupId': 'g1'}
    assert json.loads(parts['pinataMetadata'][1]) == {'name': 'hello.txt', 'keyvalues': {'env': 'test'}}
    # requests sets the multipart boundary itself
    assert 'Content-Type' not in call['headers']
    assert call['headers']['Source'] == 'sdk/uploadFile'


def test_upload_file_from_path(make_client, tmp_path):
    path = tmp_path / 'photo.png'
    path.write_bytes(b'\x89PNG')
    client, session = make_client(StubResponse(200, PIN_RESPONSE))
    client.upload_file(path, UploadOptions(metadata=PinataMetadata(name='custom')))
    parts = _parts(session.calls[0])
    assert parts['file'] == ('custom', b'\x89PNG')
    assert json.loads(parts['pinataOptions'][1]) == {}
    assert json.loads(parts['pinataMetadata'][1]) == {'name': 'custom'}


def test_upload_file_key_override(make_client):
    client, session = make_client(StubResponse(200, PIN_RESPONSE))
    client.upload_file(io.BytesIO(b'x'), UploadOptions(keys='scoped_jwt'))
    assert session.calls[0]['headers']['Authorization'] == 'Bearer scoped_jwt'


def test_upload_file_key_override_beats_custom_authorization(make_client):
    cfg = PinataConfig(pinata_jwt='test_jwt', custom_headers={'Authorization': 'Bearer custom'})
    client, session = make_client(StubResponse(200, PIN_RESPONSE), cfg=cfg)
    client.upload_file(io.BytesIO(b'x'), UploadOptions(keys='scoped'))
    assert session.calls[0]['headers']['Authorization'] == 'Bearer scoped'


def test_upload_file_closed_handle_rejected(make_client):
    client, session = make_client(StubResponse(200, PIN_RESPONSE))
    fh = io.BytesIO(b'gone')
    fh.close()
    with pytest.raises(ValidationError):
        client.upload_file(fh)
    assert session.calls == []


def test_upload_base64_rejects_non_alphabet_characters(make_client):
    client, session = make_client(StubResponse(200, PIN_RESPONSE))
    with pytest.raises(ValidationError):
        client.upload_base64('@@@@aGVsbG8=')
    assert session.calls == []


def test_upload_base64(make_client):
    client, session = make_client(StubResponse(200, PIN_RESPONSE))
    encoded = base64.b64encode(b'hello world').decode()
    client.upload_base64(encoded)
    parts = _parts(session.calls[0])
    assert parts['file'] == ('base64 string', b'hello world')
    assert json.loads(parts['pinataMetadata'][1]) == {'name': 'base64 string'}


def test_upload_base64_401(make_client):
    client, _ = make_client(StubResponse(401, {'error': 'Unauthorized'}))
    with pytest.raises(AuthenticationError):
        client.upload_base64(base64.b64encode(b'x').decode())


def test_upload_url_fetches_then_uploads(make_client):
    client, session = make_client(
        StubResponse(200, text='remote bytes'),
        StubResponse(200, PIN_RESPONSE),
    )
    assert client.upload_url('https://cdn.example.test/file.bin') == PIN_RESPONSE
    fetch, upload = session.calls
    assert fetch['method'] == 'GET'
    assert fetch['url'] == 'https://cdn.example.test/file.bin'
    assert 'headers' not in fetch
    assert upload['url'] == 'https://api.pinata.cloud/pinning/pinFileToIPFS'
    assert _parts(upload)['file'] == ('url_upload', b'remote bytes')
    assert upload['headers']['Source'] == 'sdk/uploadUrl'


def test_upload_url_failed_fetch_skips_upload(make_client):
    client, session = make_client(StubResponse(404, {'error': 'missing'}), StubResponse(200, PIN_RESPONSE))
    with pytest.raises(NetworkError) as exc_info:
        client.upload_url('https://cdn.example.test/missing.bin')
    assert exc_info.value.status_code == 404
    assert exc_info.value.details == {'error': 'missing'}
    assert len(session.calls) == 1


def test_upload_url_fetch_401_still_network_error(make_client):
    client, _ = make_client(StubResponse(401, text='denied'))
    with pytest.raises(NetworkError):
        client.upload_url('https://cdn.example.test/private.bin')


def test_upload_url_upload_401(make_client):
    client, _ = make_client(StubResponse(200, text='data'), StubResponse(401, {'error': 'Unauthorized'}))
    with pytest.raises(AuthenticationError) as exc_info:
        client.upload_url('https://cdn.example.test/file.bin')
    assert exc_info.value.details == {'error': 'Unauthorized'}


def test_upload_url_transport_error(make_client):
    client, _ = make_client(requests.ConnectionError('dns failure'))
    with pytest.raises(GenericError) as exc_info:
        client.upload_url('https://nowhere.test/file.bin')
    assert 'dns failure' in exc_info.value.message


def test_upload_json(make_client):
    client, session = make_client(StubResponse(200, PIN_RESPONSE))
    client.upload_json({'hello': 'world'}, UploadOptions(metadata=PinataMetadata(name='doc.json'), cid_version=0))
    call = session.calls[0]
    assert call['url'] == 'https://api.pinata.cloud/pinning/pinJSONToIPFS'
    assert call['headers']['Content-Type'] == 'application/json'
    assert json.loads(call['data']) == {
        'pinataContent': {'hello': 'world'},
        'pinataOptions': {'cidVersion': 0},
        'pinataMetadata': {'name': 'doc.json'},
    }


def test_unpin_isolates_failures(make_client):
    client, session = make_client(
        StubResponse(200, text='OK'),
        StubResponse(500, {'error': 'Server Error'}),
        StubResponse(200, text='OK'),
    )
    result = client.unpin(['QmA', 'QmB', 'QmC'])
    assert result == [
        {'hash': 'QmA', 'status': 'OK'},
        {'hash': 'QmB', 'status': 'HTTP error! status: 500'},
        {'hash': 'QmC', 'status': 'OK'},
    ]
    assert [c['url'].rsplit('/', 1)[-1] for c in session.calls] == ['QmA', 'QmB', 'QmC']
    assert all(c['method'] == 'DELETE' for c in session.calls)


def test_unpin_unexpected_error(make_client):
    client, _ = make_client(requests.Timeout('timed out'), StubResponse(200, text='OK'))
    result = client.unpin(['QmA', 'QmB'])
    assert result[0] == {'hash': 'QmA', 'status': 'Error unpinning file QmA: timed out'}
    assert result[1] == {'hash': 'QmB', 'status': 'OK'}


def test_update_metadata(make_client):
    client, session = make_client(StubResponse(200, text='OK'))
    assert client.update_metadata('QmA', name='renamed', key_values={'a': 1}) == 'OK'
    call = session.calls[0]
    assert call['method'] == 'PUT'
    assert json.loads(call['data']) == {'ipfsPinHash': 'QmA', 'name': 'renamed', 'keyvalues': {'a': 1}}
