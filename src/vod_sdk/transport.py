from botocore.awsrequest import AWSRequest
from botocore.exceptions import BotoCoreError
from botocore.httpsession import URLLib3Session
from vod_sdk.errors import TransportError
from vod_sdk.interfaces import ITransport
from zope.interface import implementer

import json
import logging


logger = logging.getLogger(__name__)


@implementer(ITransport)
class HttpTransport:
    """Thin botocore HTTP wrapper for the OpenAPI endpoint and TOS hosts."""

    def __init__(self, service_info, signer, session=None):
        self._info = service_info
        self._signer = signer
        if service_info.scheme != "https":
            logger.warning(
                "VOD API scheme is %s; signed requests are sent in cleartext",
                service_info.scheme,
            )
        if session is None:
            session = URLLib3Session(
                timeout=(service_info.connect_timeout, service_info.read_timeout)
            )
        self._session = session

    def _wrap_error(self, e, operation, target):
        """Wrap a botocore error, logging the original at DEBUG."""
        logger.debug("%s failed for %s: %s", operation, target, e)
        raise TransportError(
            f"{operation} failed for {target}: {type(e).__name__}"
        ) from e

    def _send(self, request, operation, target):
        try:
            return self._session.send(request.prepare())
        except BotoCoreError as e:
            self._wrap_error(e, operation, target)

    def query(self, action, params):
        request = AWSRequest(
            method="GET",
            url=self._info.endpoint,
            params={"Action": action, "Version": self._info.api_version, **params},
            headers={"Accept": "application/json"},
        )
        self._signer.sign_request(request)
        response = self._send(request, action, self._info.host)
        try:
            body = json.loads(response.content or b"{}")
        except ValueError as e:
            raise TransportError(
                f"{action} returned an undecodable body, "
                f"http status={response.status_code}",
                response.status_code,
            ) from e
        return response.status_code, body

    def put(self, url, data, headers):
        request = AWSRequest(method="PUT", url=url, data=data, headers=headers)
        response = self._send(request, "PUT", url)
        return response.status_code, response.content
