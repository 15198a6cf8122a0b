from vod_sdk.errors import ApiError
from vod_sdk.errors import TransportError
from vod_sdk.models import CommitUploadResult
from vod_sdk.models import UploadAddress

import logging


logger = logging.getLogger(__name__)


class VodApi:
    """Typed calls to the apply/commit upload OpenAPI actions."""

    def __init__(self, transport):
        self._transport = transport

    def _call(self, action, params):
        """Run ``action`` and return ``(result, request_id, status)``.

        An error embedded in ResponseMetadata wins over the HTTP status.
        """
        status, body = self._transport.query(action, params)
        body = _section(body, action, status, "body")
        metadata = _section(body.get("ResponseMetadata"), action, status, "metadata")
        request_id = metadata.get("RequestId", "")
        error = metadata.get("Error")
        if error is not None:
            error = _section(error, action, status, "error")
            code = str(error.get("Code", ""))
            if code != "0":
                logger.debug(
                    "%s returned error code=%s request_id=%s",
                    action,
                    code,
                    request_id,
                )
                raise ApiError(
                    f"{action} failed: code={code}, "
                    f"message={error.get('Message', '')}",
                    status,
                    code=code,
                    request_id=request_id,
                )
        if status != 200:
            raise TransportError(
                f"api {action} http code {status} body {body}", status
            )
        result = _section(body.get("Result"), action, status, "result")
        return result, request_id, status

    def apply_upload_info(self, space_name):
        """Return ``(UploadAddress or None, status)``."""
        result, request_id, status = self._call(
            "ApplyUploadInfo", {"SpaceName": space_name}
        )
        data = _section(result.get("Data"), "ApplyUploadInfo", status, "data")
        address = data.get("UploadAddress")
        logger.debug(
            "Applied upload slot in space=%s request_id=%s", space_name, request_id
        )
        if address is None:
            return None, status
        address = _section(address, "ApplyUploadInfo", status, "upload address")
        return UploadAddress.from_dict(address), status

    def commit_upload_info(self, space_name, session_key, callback_args, functions):
        """Return ``(CommitUploadResult, status)``.

        ``functions`` is the already serialised JSON array.
        """
        result, request_id, status = self._call(
            "CommitUploadInfo",
            {
                "SpaceName": space_name,
                "SessionKey": session_key,
                "CallbackArgs": callback_args,
                "Functions": functions,
            },
        )
        commit = CommitUploadResult.from_dict(
            _section(result.get("Data"), "CommitUploadInfo", status, "data"),
            request_id=request_id,
        )
        logger.debug("Committed upload vid=%s request_id=%s", commit.vid, request_id)
        return commit, status


def _section(value, action, status, what):
    """Return ``value`` as a mapping; absent means empty, anything else is bad."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TransportError(
            f"api {action} http code {status} returned a malformed {what}: "
            f"{type(value).__name__}",
            status,
        )
    return value
