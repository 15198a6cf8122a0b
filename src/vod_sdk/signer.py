from botocore.auth import SigV4Auth
from botocore.auth import SigV4QueryAuth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials
from datetime import datetime
from datetime import timezone
from vod_sdk.interfaces import ISigner
from vod_sdk.models import SecurityToken2
from zope.interface import implementer

import base64
import hashlib
import hmac
import json
import logging
import secrets


logger = logging.getLogger(__name__)

STS2_PREFIX = "STS2"
TEMP_ACCESS_KEY_PREFIX = "AKTP"
DEFAULT_URL_EXPIRES = 3600


@implementer(ISigner)
class Signer:
    """HMAC-SHA256 signing for the VOD OpenAPI.

    Header and query signing use botocore's SigV4 authenticators
    (``AWS4-HMAC-SHA256``, ``<region>/vod/aws4_request`` scope) and the STS2
    session token uses this module's own layout. Neither matches the
    Volcengine signing scheme, so the hosted endpoint will not accept these
    signatures; pass a compatible ISigner to VodClient to talk to it.
    """

    def __init__(self, service_info, url_expires=DEFAULT_URL_EXPIRES):
        self._info = service_info
        creds = service_info.credentials
        self._credentials = Credentials(creds.access_key, creds.secret_key)
        self._url_expires = url_expires

    def _action_params(self, action, query):
        params = {"Action": action, "Version": self._info.api_version}
        params.update(query)
        return params

    def sign_request(self, request):
        creds = self._info.credentials
        SigV4Auth(self._credentials, creds.service, creds.region).add_auth(request)

    def sign_url(self, action, query):
        creds = self._info.credentials
        request = AWSRequest(
            method="GET",
            url=self._info.endpoint,
            params=self._action_params(action, query),
        )
        SigV4QueryAuth(
            self._credentials, creds.service, creds.region, expires=self._url_expires
        ).add_auth(request)
        logger.debug("Signed URL for action=%s", action)
        return request.url

    def sign_sts2(self, policy, duration):
        """Mint a temporary key pair bound to ``policy`` until now + ``duration``.

        The temporary secret is derived from the long-term secret, so the
        service can recompute it from the session token alone.
        """
        creds = self._info.credentials
        now = datetime.now(timezone.utc).replace(microsecond=0)
        expires = now + duration
        expired_ts = int(expires.timestamp())
        access_key_id = TEMP_ACCESS_KEY_PREFIX + secrets.token_hex(16)
        secret_access_key = base64.b64encode(
            _hmac(creds.secret_key, f"{access_key_id}{expired_ts}")
        ).decode("ascii")
        policy_string = json.dumps(policy.to_dict(), separators=(",", ":"))
        inner = {
            "LTAccessKeyId": creds.access_key,
            "AccessKeyId": access_key_id,
            "ExpiredTime": expired_ts,
            "PolicyString": policy_string,
        }
        inner["Signature"] = _hmac(
            creds.secret_key,
            "|".join(
                [creds.access_key, access_key_id, str(expired_ts), policy_string]
            ),
        ).hex()
        session_token = STS2_PREFIX + base64.b64encode(
            json.dumps(inner, separators=(",", ":")).encode("utf-8")
        ).decode("ascii")
        return SecurityToken2(
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            current_time=now.isoformat(),
            expired_time=expires.isoformat(),
        )


def _hmac(key, msg):
    return hmac.new(key.encode("utf-8"), msg.encode("utf-8"), hashlib.sha256).digest()
