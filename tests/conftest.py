import json
import logging

import httpx
import pytest

from purge_bridge.models.purge import PurgeConfig
from purge_bridge.utils.logs import ROOT_LOGGER

ZONE_ID = "023e105f4ecef8ad9ca31a8372d0c353"
API_TOKEN = "cf-test-token"


class RecordingHandler:
    """MockTransport handler that records requests and replays a response."""

    def __init__(self, body=None, status_code=200, exc=None, text=None):
        self.requests: list[httpx.Request] = []
        self.body = {"success": True} if body is None else body
        self.status_code = status_code
        self.exc = exc
        self.text = text

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc("simulated failure", request=request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, content=json.dumps(self.body))

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture
def config() -> PurgeConfig:
    return PurgeConfig(zone_id=ZONE_ID, api_token=API_TOKEN)


@pytest.fixture
def make_client():
    clients = []

    def factory(handler):
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()


@pytest.fixture(autouse=True)
def clean_logging(caplog):
    logger = logging.getLogger(ROOT_LOGGER)
    handlers = list(logger.handlers)
    caplog.set_level(logging.INFO, logger=ROOT_LOGGER)
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
