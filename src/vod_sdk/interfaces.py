from zope.interface import Interface


class ISigner(Interface):
    """Produces signatures and scoped credentials for the VOD service."""

    def sign_request(request):
        """Add authentication headers to an unsent botocore AWSRequest."""

    def sign_url(action, query):
        """Return a pre-signed GET URL for ``action`` with ``query``."""

    def sign_sts2(policy, duration):
        """Return a SecurityToken2 restricted to ``policy`` for ``duration``."""


class ITransport(Interface):
    """HTTP access to the OpenAPI endpoint and to object storage."""

    def query(action, params):
        """Issue a signed API call. Return ``(status, decoded_json_body)``."""

    def put(url, data, headers):
        """PUT raw bytes. Return ``(status, body_bytes)``."""


class IUploadCoordinator(Interface):
    """Apply for an upload slot, transfer bytes, verify."""

    def upload(data, space_name):
        """Return an UploadResult for the stored object."""


class ICommitCoordinator(Interface):
    """Upload and commit in one call."""

    def upload_with_callback(data, space_name, callback_args="", *functions):
        """Return ``(CommitUploadResult, status)``."""


class IPlaybackTokenIssuer(Interface):
    """Opaque tokens a player exchanges for playback info."""

    def get_playback_token(request, expiry_seconds=0):
        """Return an opaque base64 playback token."""


class IUploadAuthIssuer(Interface):
    """Short-lived credentials scoped to the upload actions."""

    def get_upload_auth(expiry=None):
        """Return a SecurityToken2 allowed to apply and commit uploads."""
