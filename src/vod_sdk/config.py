from io import StringIO

import os
import ZConfig


_schema = None


class VodClientFactory:
    """ZConfig factory for VodClient."""

    def __init__(self, config):
        self.config = config
        self.name = config.getSectionName()

    def open(self):
        from vod_sdk.client import VodClient

        config = self.config
        return VodClient(
            access_key=config.access_key,
            secret_key=config.secret_key,
            host=config.host,
            region=config.region,
            scheme=config.scheme,
            api_version=config.api_version,
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
        )


def get_schema():
    global _schema
    if _schema is None:
        here = os.path.dirname(os.path.abspath(__file__))
        _schema = ZConfig.loadSchema(os.path.join(here, "schema.xml"))
    return _schema


def client_from_file(path):
    with open(path) as f:
        config, _handler = ZConfig.loadConfigFile(get_schema(), f)
    return config.client.open()


def client_from_string(text):
    config, _handler = ZConfig.loadConfigFile(get_schema(), StringIO(text))
    return config.client.open()
