from vod_sdk.api import VodApi
from vod_sdk.models import Credentials
from vod_sdk.models import DEFAULT_API_VERSION
from vod_sdk.models import DEFAULT_HOST
from vod_sdk.models import DEFAULT_REGION
from vod_sdk.models import ServiceInfo
from vod_sdk.signer import Signer
from vod_sdk.tokens import PlaybackTokenIssuer
from vod_sdk.tokens import UploadAuthIssuer
from vod_sdk.transport import HttpTransport
from vod_sdk.upload import CommitCoordinator
from vod_sdk.upload import UploadCoordinator

import logging
import os


logger = logging.getLogger(__name__)

ACCESS_KEY_ENV = "VOLC_ACCESSKEY"
SECRET_KEY_ENV = "VOLC_SECRETKEY"


class VodClient:
    """Entry point of the SDK.

    Owns one signer and one transport and hands them to the coordinators.
    Build one per set of credentials; instances hold no per-call state and
    can be shared between threads.
    """

    def __init__(
        self,
        access_key=None,
        secret_key=None,
        host=DEFAULT_HOST,
        region=DEFAULT_REGION,
        scheme="https",
        api_version=DEFAULT_API_VERSION,
        connect_timeout=60,
        read_timeout=60,
        signer=None,
        transport=None,
    ):
        access_key = access_key or os.environ.get(ACCESS_KEY_ENV)
        secret_key = secret_key or os.environ.get(SECRET_KEY_ENV)
        if not access_key or not secret_key:
            raise ValueError(
                "VOD credentials missing: pass access_key/secret_key or set "
                f"{ACCESS_KEY_ENV} and {SECRET_KEY_ENV}"
            )
        self.service_info = ServiceInfo(
            credentials=Credentials(access_key, secret_key, region=region),
            host=host,
            scheme=scheme,
            api_version=api_version,
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
        )
        self.signer = signer or Signer(self.service_info)
        self.transport = transport or HttpTransport(self.service_info, self.signer)
        self.api = VodApi(self.transport)
        self.uploader = UploadCoordinator(self.api, self.transport)
        self.committer = CommitCoordinator(self.uploader, self.api)
        self.playback_tokens = PlaybackTokenIssuer(self.signer)
        self.upload_auth = UploadAuthIssuer(self.signer)
        logger.debug("VOD client for %s in region %s", host, region)

    @classmethod
    def from_service_info(cls, info, signer=None, transport=None):
        creds = info.credentials
        return cls(
            access_key=creds.access_key,
            secret_key=creds.secret_key,
            host=info.host,
            region=creds.region,
            scheme=info.scheme,
            api_version=info.api_version,
            connect_timeout=info.connect_timeout,
            read_timeout=info.read_timeout,
            signer=signer,
            transport=transport,
        )

    def __repr__(self):
        return f"<VodClient {self.service_info.endpoint}>"

    def apply_upload_info(self, space_name):
        return self.api.apply_upload_info(space_name)

    def commit_upload_info(
        self, space_name, session_key, callback_args="", functions="[]"
    ):
        return self.api.commit_upload_info(
            space_name, session_key, callback_args, functions
        )

    def upload(self, data, space_name):
        return self.uploader.upload(data, space_name)

    def upload_media_with_callback(
        self, data, space_name, callback_args="", *functions
    ):
        return self.committer.upload_with_callback(
            data, space_name, callback_args, *functions
        )

    def get_play_auth_token(self, request, expiry_seconds=0):
        return self.playback_tokens.get_playback_token(request, expiry_seconds)

    def get_upload_auth(self):
        return self.upload_auth.get_upload_auth()

    def get_upload_auth_with_expired_time(self, expiry):
        return self.upload_auth.get_upload_auth(expiry)
