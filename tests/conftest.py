from vod_sdk.api import VodApi
from vod_sdk.interfaces import ISigner
from vod_sdk.interfaces import ITransport
from vod_sdk.models import SecurityToken2
from vod_sdk.upload import CommitCoordinator
from vod_sdk.upload import UploadCoordinator
from zope.interface import implementer

import json
import pytest


STORE_OK = json.dumps({"success": 0, "payload": {"hash": "x"}}).encode()


@implementer(ITransport)
class FakeTransport:
    """Records every call and answers from canned responses."""

    def __init__(self):
        self.responses = {}
        self.put_response = (200, STORE_OK)
        self.queries = []
        self.puts = []

    def set_apply(self, hosts=("h",), stores=(("o123", "A1"),), session_key="s1"):
        address = {
            "UploadHosts": list(hosts),
            "StoreInfos": [{"StoreUri": uri, "Auth": auth} for uri, auth in stores],
            "SessionKey": session_key,
        }
        self.responses["ApplyUploadInfo"] = (
            200,
            {
                "ResponseMetadata": {"RequestId": "req-apply"},
                "Result": {"Data": {"UploadAddress": address}},
            },
        )

    def set_commit(self, vid="v123", status=200, error=None):
        metadata = {"RequestId": "req-commit"}
        if error is not None:
            metadata["Error"] = error
        self.responses["CommitUploadInfo"] = (
            status,
            {
                "ResponseMetadata": metadata,
                "Result": {"Data": {"Vid": vid, "PosterUri": "poster/1"}},
            },
        )

    def query(self, action, params):
        self.queries.append((action, dict(params)))
        return self.responses[action]

    def put(self, url, data, headers):
        self.puts.append((url, data, dict(headers)))
        if isinstance(self.put_response, Exception):
            raise self.put_response
        return self.put_response

    @property
    def actions(self):
        return [action for action, _params in self.queries]


@implementer(ISigner)
class FakeSigner:
    def __init__(self):
        self.url_calls = []
        self.sts_calls = []
        self.error = None

    def sign_request(self, request):
        request.headers["Authorization"] = "fake"

    def sign_url(self, action, query):
        self.url_calls.append((action, dict(query)))
        if self.error is not None:
            raise self.error
        return f"https://vod.example.com/?Action={action}&X-Signature=abc"

    def sign_sts2(self, policy, duration):
        self.sts_calls.append((policy, duration))
        return SecurityToken2("AKTPfake", "secret", "STS2fake", "now", "later")


@pytest.fixture
def transport():
    t = FakeTransport()
    t.set_apply()
    t.set_commit()
    return t


@pytest.fixture
def signer():
    return FakeSigner()


@pytest.fixture
def api(transport):
    return VodApi(transport)


@pytest.fixture
def uploader(api, transport):
    return UploadCoordinator(api, transport)


@pytest.fixture
def committer(uploader, api):
    return CommitCoordinator(uploader, api)
