"""Common fixtures."""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock

import pytest

import adurosmart.devices
from adurosmart.definitions import DeviceDefinition, get_definition

_LOGGER = logging.getLogger(__name__)


class FailOnBadFormattingHandler(logging.Handler):
    def emit(self, record):
        try:
            record.msg % record.args
        except Exception as e:
            pytest.fail(
                f"Failed to format log message {record.msg!r} with {record.args!r}: {e}"
            )


@pytest.fixture(autouse=True)
def raise_on_bad_log_formatting():
    handler = FailOnBadFormattingHandler()

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)

    try:
        yield
    finally:
        root.removeHandler(handler)


class FakeEndpoint:
    """Endpoint implementing the host capability interface with mocks."""

    def __init__(self, endpoint_id: int) -> None:
        self.endpoint_id = endpoint_id
        self.read = AsyncMock(return_value=({}, {}))
        self.write = AsyncMock(return_value=None)
        self.bind = AsyncMock(return_value=None)
        self.configure_reporting = AsyncMock(return_value=None)


class FakeDevice:
    def __init__(
        self, model: str | None, manufacturer: str | None, endpoint_ids=(1,)
    ) -> None:
        self.model = model
        self.manufacturer = manufacturer
        self.endpoints = {ep_id: FakeEndpoint(ep_id) for ep_id in endpoint_ids}

    def get_endpoint(self, endpoint_id: int) -> FakeEndpoint:
        return self.endpoints[endpoint_id]


def make_device(model, manufacturer="AduroSmart", endpoint_ids=(1,)) -> FakeDevice:
    return FakeDevice(model, manufacturer, endpoint_ids)


@pytest.fixture
def endpoint() -> FakeEndpoint:
    return FakeEndpoint(1)


@pytest.fixture
def dimmer_device() -> FakeDevice:
    return make_device("DimmerM3002", "AduroSmart ERIA")


@pytest.fixture
def catalogue() -> None:
    adurosmart.devices.setup()


@pytest.fixture
def dimmer(catalogue) -> DeviceDefinition:
    definition = get_definition("DimmerM3002")
    assert definition is not None
    return definition
