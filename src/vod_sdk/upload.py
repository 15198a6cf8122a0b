from vod_sdk.errors import InvariantViolation
from vod_sdk.errors import StorageError
from vod_sdk.errors import TransportError
from vod_sdk.errors import ValidationError
from vod_sdk.interfaces import ICommitCoordinator
from vod_sdk.interfaces import IUploadCoordinator
from vod_sdk.models import UploadResult
from zope.interface import implementer

import json
import logging
import zlib


logger = logging.getLogger(__name__)

BAD_REQUEST = 400


def crc32_hex(data):
    """IEEE CRC-32 of ``data`` as 8 lowercase hex digits."""
    return f"{zlib.crc32(data) & 0xFFFFFFFF:08x}"


@implementer(IUploadCoordinator)
class UploadCoordinator:
    """Apply for an upload slot, PUT the bytes to TOS, verify the answer.

    One attempt per call, no retries. Every failure is raised as a
    VodError subclass whose ``status_code`` is 400, except errors from the
    apply call itself which carry apply's status.
    """

    def __init__(self, api, transport):
        self._api = api
        self._transport = transport

    def upload(self, data, space_name):
        if not data:
            raise ValidationError("file size is zero", BAD_REQUEST)

        address, _status = self._api.apply_upload_info(space_name)
        if address is None:
            raise ValidationError("upload address not exist", BAD_REQUEST)
        if not address.upload_hosts:
            raise ValidationError("no tos host found", BAD_REQUEST)
        if not address.store_infos:
            raise ValidationError("no store info found", BAD_REQUEST)

        host = address.upload_hosts[0]
        store = address.store_infos[0]
        url = f"http://{host}/{store.store_uri}"
        headers = {
            "Content-CRC32": crc32_hex(data),
            "Authorization": store.auth,
        }
        logger.debug("PUT %d bytes to %s", len(data), url)
        try:
            status, body = self._transport.put(url, data, headers)
        except TransportError as e:
            e.status_code = BAD_REQUEST
            raise
        _check_transfer(status, body, host)
        return UploadResult(store.store_uri, address.session_key)


def _check_transfer(status, body, host):
    """Classify a TOS answer: return on success, raise otherwise.

    HTTP 200 is not enough; the storage service also reports its own
    ``success`` field, 0 meaning stored.
    """
    if status != 200:
        text = body.decode("utf-8", "replace") if isinstance(body, bytes) else body
        logger.warning("TOS rejected upload to %s with status %s", host, status)
        raise TransportError(
            f"http status={status}, body={text}, remote_addr={host}", BAD_REQUEST
        )
    try:
        envelope = json.loads(body)
    except (TypeError, ValueError) as e:
        raise StorageError(
            f"tos err: undecodable response from {host}", BAD_REQUEST
        ) from e
    if not isinstance(envelope, dict):
        raise StorageError(f"tos err: malformed response from {host}", BAD_REQUEST)
    success = envelope.get("success")
    if success is None:
        success = 0
    # bool is an int subclass but not a valid success code
    if isinstance(success, bool) or not isinstance(success, int):
        raise StorageError(
            f"tos err: malformed success={success!r} from {host}", BAD_REQUEST
        )
    payload = envelope.get("payload")
    if success != 0:
        logger.warning("TOS upload to %s failed with success=%s", host, success)
        raise StorageError(
            f"tos err: success={success}, payload={payload}",
            BAD_REQUEST,
            payload=payload,
        )
    return payload


@implementer(ICommitCoordinator)
class CommitCoordinator:
    """Upload bytes and commit them with callback args and functions."""

    def __init__(self, uploader, api):
        self._uploader = uploader
        self._api = api

    def upload_with_callback(self, data, space_name, callback_args="", *functions):
        handle = self._uploader.upload(data, space_name)
        serialized = serialize_functions(functions)
        return self._api.commit_upload_info(
            space_name, handle.session_key, callback_args, serialized
        )


def serialize_functions(functions):
    """Serialise function specs to the JSON array string sent on commit."""
    try:
        return json.dumps([f.to_dict() for f in functions])
    except (TypeError, ValueError) as e:
        raise InvariantViolation(f"function specs are not serializable: {e}") from e
