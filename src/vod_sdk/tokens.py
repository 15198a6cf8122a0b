from datetime import timedelta
from vod_sdk.errors import ValidationError
from vod_sdk.interfaces import IPlaybackTokenIssuer
from vod_sdk.interfaces import IUploadAuthIssuer
from vod_sdk.models import new_allow_statement
from vod_sdk.models import Policy
from zope.interface import implementer

import base64
import json
import logging


logger = logging.getLogger(__name__)

TOKEN_VERSION = "V2"
DEFAULT_UPLOAD_AUTH_EXPIRY = timedelta(hours=1)
UPLOAD_ACTIONS = ("vod:ApplyUploadInfo", "vod:CommitUploadInfo")

# (attribute, query parameter)
_PLAYBACK_FIELDS = (
    ("definition", "Definition"),
    ("file_type", "FileType"),
    ("codec", "Codec"),
    ("format", "Format"),
    ("base64", "Base64"),
    ("logo_type", "LogoType"),
    ("ssl", "Ssl"),
)


def _query_value(value):
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


@implementer(IPlaybackTokenIssuer)
class PlaybackTokenIssuer:
    def __init__(self, signer):
        self._signer = signer

    def build_query(self, request, expiry_seconds=0):
        """Query for GetPlayInfo holding only the fields that are set."""
        if not request.vid:
            raise ValidationError("vid is empty")
        query = {"Vid": request.vid}
        for attr, param in _PLAYBACK_FIELDS:
            value = getattr(request, attr)
            if value is None or value == "":
                continue
            query[param] = _query_value(value)
        if expiry_seconds > 0:
            query["X-Expires"] = str(expiry_seconds)
        return query

    def get_playback_token(self, request, expiry_seconds=0):
        query = self.build_query(request, expiry_seconds)
        signed_url = self._signer.sign_url("GetPlayInfo", query)
        token = {"GetPlayInfoToken": signed_url, "TokenVersion": TOKEN_VERSION}
        logger.debug("Issued playback token for vid=%s", request.vid)
        return base64.b64encode(json.dumps(token).encode("utf-8")).decode("ascii")


@implementer(IUploadAuthIssuer)
class UploadAuthIssuer:
    """Scoped STS2 credentials that may only apply for and commit uploads."""

    def __init__(self, signer):
        self._signer = signer

    def get_upload_auth(self, expiry=None):
        if expiry is None:
            expiry = DEFAULT_UPLOAD_AUTH_EXPIRY
        policy = Policy([new_allow_statement(UPLOAD_ACTIONS, [])])
        return self._signer.sign_sts2(policy, expiry)
