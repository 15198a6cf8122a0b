from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Optional


DEFAULT_HOST = "vod.volcengineapi.com"
DEFAULT_REGION = "cn-north-1"
DEFAULT_API_VERSION = "2020-08-01"
SERVICE_NAME = "vod"


@dataclass(frozen=True)
class Credentials:
    access_key: str
    secret_key: str
    region: str = DEFAULT_REGION
    service: str = SERVICE_NAME


@dataclass(frozen=True)
class ServiceInfo:
    """Where and as whom to talk to the OpenAPI endpoint."""

    credentials: Credentials
    host: str = DEFAULT_HOST
    scheme: str = "https"
    api_version: str = DEFAULT_API_VERSION
    connect_timeout: int = 60
    read_timeout: int = 60

    @property
    def endpoint(self):
        return f"{self.scheme}://{self.host}/"


@dataclass(frozen=True)
class StoreInfo:
    store_uri: str
    auth: str

    @classmethod
    def from_dict(cls, data):
        return cls(store_uri=data.get("StoreUri", ""), auth=data.get("Auth", ""))


@dataclass(frozen=True)
class UploadAddress:
    upload_hosts: tuple = ()
    store_infos: tuple = ()
    session_key: str = ""

    @classmethod
    def from_dict(cls, data):
        return cls(
            upload_hosts=tuple(data.get("UploadHosts") or ()),
            store_infos=tuple(
                StoreInfo.from_dict(s) for s in data.get("StoreInfos") or () if s
            ),
            session_key=data.get("SessionKey", ""),
        )


@dataclass(frozen=True)
class UploadResult:
    object_id: str
    session_key: str
    status_code: int = 200


@dataclass(frozen=True)
class CommitUploadResult:
    vid: str = ""
    poster_uri: str = ""
    source_info: dict = field(default_factory=dict)
    callback_args: str = ""
    request_id: str = ""

    @classmethod
    def from_dict(cls, data, request_id=""):
        return cls(
            vid=data.get("Vid", ""),
            poster_uri=data.get("PosterUri", ""),
            source_info=data.get("SourceInfo") or {},
            callback_args=data.get("CallbackArgs", ""),
            request_id=request_id,
        )


@dataclass(frozen=True)
class FunctionSpec:
    """A post-processing directive attached to a commit."""

    name: str
    input: Any = None

    def to_dict(self):
        wire = {"Name": self.name}
        if self.input is not None:
            wire["Input"] = self.input
        return wire


def get_meta():
    return FunctionSpec("GetMeta")


def snapshot(snapshot_time):
    """Take the poster frame at ``snapshot_time`` seconds."""
    return FunctionSpec("Snapshot", {"SnapshotTime": snapshot_time})


def add_option_info(
    title=None,
    tags=None,
    description=None,
    category=None,
    record_type=None,
    format=None,
):
    option = {
        "Title": title,
        "Tags": tags,
        "Description": description,
        "Category": category,
        "RecordType": record_type,
        "Format": format,
    }
    return FunctionSpec(
        "AddOptionInfo", {k: v for k, v in option.items() if v is not None}
    )


def start_workflow(template_id):
    return FunctionSpec("StartWorkflow", {"TemplateId": template_id})


@dataclass
class PlaybackRequest:
    """Parameters of a GetPlayInfo call.

    ``None`` and ``""`` mean "not set" and are left out of the query.
    ``False`` and ``0`` are real values and are sent.
    """

    vid: str
    definition: Optional[str] = None
    file_type: Optional[str] = None
    codec: Optional[str] = None
    format: Optional[str] = None
    base64: Any = None
    logo_type: Optional[str] = None
    ssl: Any = None


@dataclass(frozen=True)
class Statement:
    effect: str
    actions: tuple
    resources: tuple = ()

    def to_dict(self):
        return {
            "Effect": self.effect,
            "Action": list(self.actions),
            "Resource": list(self.resources),
        }


def new_allow_statement(actions, resources):
    return Statement("Allow", tuple(actions), tuple(resources))


@dataclass
class Policy:
    statements: list = field(default_factory=list)

    def to_dict(self):
        return {"Statement": [s.to_dict() for s in self.statements]}


@dataclass(frozen=True)
class SecurityToken2:
    access_key_id: str
    secret_access_key: str
    session_token: str
    current_time: str
    expired_time: str
