"""Pytest configuration. Set env vars before any app imports that need config."""
import os

import httpx
import pytest

os.environ.setdefault("LOG_LEVEL", "INFO")
os.environ.setdefault("INTAKE_RELAY_ENDPOINT", "https://formspree.io/f/test1234")


class RelayRecorder:
    """Mock relay: records every request and answers with a fresh canned response."""

    def __init__(self, status_code: int = 200, exc: Exception | None = None, **response_kwargs):
        self.status_code = status_code
        self.response_kwargs = response_kwargs or {"json": {"ok": True}}
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, **self.response_kwargs)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def relay_url():
    return os.environ["INTAKE_RELAY_ENDPOINT"]


@pytest.fixture
def recorder_cls():
    return RelayRecorder


@pytest.fixture
def relay_ok():
    return RelayRecorder()


@pytest.fixture
def site(relay_url):
    from homecare_site.schemas import SiteConfig

    return SiteConfig(
        business_name="Deddeh & Tyler Homecare",
        phone_tel="+12536914318",
        display_phone="(253) 691-4318",
        intake_email="deddeh@deddehtylerhomecare.com",
        relay_endpoint=relay_url,
        skilled_clinical_services=False,
    )
