import pytest
import ZConfig

from vod_sdk.client import VodClient
from vod_sdk.config import client_from_file
from vod_sdk.config import client_from_string


@pytest.fixture
def no_env_credentials(monkeypatch):
    monkeypatch.delenv("VOLC_ACCESSKEY", raising=False)
    monkeypatch.delenv("VOLC_SECRETKEY", raising=False)


class TestZConfig:
    def test_creates_client(self, no_env_credentials):
        client = client_from_string(
            """\
            <vodclient>
                access-key AKEXAMPLE
                secret-key SKEXAMPLE
            </vodclient>
            """
        )
        assert isinstance(client, VodClient)

    def test_all_options(self, no_env_credentials):
        client = client_from_string(
            """\
            <vodclient main>
                access-key AKEXAMPLE
                secret-key SKEXAMPLE
                host vod.example.com
                region ap-singapore-1
                scheme http
                api-version 2021-01-01
                connect-timeout 5
                read-timeout 30
            </vodclient>
            """
        )
        info = client.service_info
        assert info.credentials.access_key == "AKEXAMPLE"
        assert info.credentials.secret_key == "SKEXAMPLE"
        assert info.credentials.region == "ap-singapore-1"
        assert info.host == "vod.example.com"
        assert info.endpoint == "http://vod.example.com/"
        assert info.api_version == "2021-01-01"
        assert info.connect_timeout == 5
        assert info.read_timeout == 30

    def test_default_values(self, no_env_credentials):
        client = client_from_string(
            """\
            <vodclient>
                access-key AKEXAMPLE
                secret-key SKEXAMPLE
            </vodclient>
            """
        )
        info = client.service_info
        assert info.host == "vod.volcengineapi.com"
        assert info.scheme == "https"
        assert info.credentials.region == "cn-north-1"
        assert info.api_version == "2020-08-01"
        assert info.connect_timeout == 60
        assert info.read_timeout == 60

    def test_credentials_from_environment(self, monkeypatch):
        monkeypatch.setenv("VOLC_ACCESSKEY", "AKENV")
        monkeypatch.setenv("VOLC_SECRETKEY", "SKENV")
        client = client_from_string("<vodclient>\n</vodclient>\n")
        assert client.service_info.credentials.access_key == "AKENV"
        assert client.service_info.credentials.secret_key == "SKENV"

    def test_missing_credentials(self, no_env_credentials):
        with pytest.raises(ValueError, match="credentials missing"):
            client_from_string("<vodclient>\n</vodclient>\n")

    def test_unknown_key_rejected(self, no_env_credentials):
        with pytest.raises(ZConfig.ConfigurationError):
            client_from_string(
                """\
                <vodclient>
                    access-key AK
                    secret-key SK
                    bucket-name nope
                </vodclient>
                """
            )

    def test_bad_integer_rejected(self, no_env_credentials):
        with pytest.raises(ZConfig.ConfigurationError):
            client_from_string(
                """\
                <vodclient>
                    access-key AK
                    secret-key SK
                    read-timeout soon
                </vodclient>
                """
            )

    def test_from_file(self, no_env_credentials, tmp_path):
        path = tmp_path / "vod.conf"
        path.write_text(
            "<vodclient>\n"
            "  access-key AKFILE\n"
            "  secret-key SKFILE\n"
            "  host vod.file.example.com\n"
            "</vodclient>\n"
        )
        client = client_from_file(str(path))
        assert client.service_info.host == "vod.file.example.com"
        assert client.service_info.credentials.access_key == "AKFILE"
