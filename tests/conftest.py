"""Shared test fixtures."""

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from nasa_apod.client import APODClient
from nasa_apod.config import Config

APOD_PATH = "/planetary/apod"

SAMPLE_APOD = {
    "copyright": "Jane Doe",
    "date": "2024-03-15",
    "explanation": "A spiral galaxy seen edge-on.",
    "hdurl": "https://apod.nasa.gov/apod/image/2403/galaxy_big.jpg",
    "media_type": "image",
    "service_version": "v1",
    "title": "Edge-On Galaxy",
    "url": "https://apod.nasa.gov/apod/image/2403/galaxy.jpg",
}


def make_apod(date: str, **overrides: Any) -> dict[str, Any]:
    return {**SAMPLE_APOD, "date": date, **overrides}


@dataclass
class FakeAPOD:
    """Local stand-in for the APOD endpoint that records every query."""

    status: int = 200
    body: Any = None
    text: Optional[str] = None
    raw: Optional[bytes] = None
    delay: float = 0
    responder: Optional[Callable[[dict[str, str]], tuple[int, Any]]] = None
    queries: list[dict[str, str]] = field(default_factory=list)

    async def handle(self, request: web.Request) -> web.Response:
        query = dict(request.query)
        self.queries.append(query)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.responder is not None:
            status, body = self.responder(query)
            return web.json_response(body, status=status)
        if self.raw is not None:
            return web.Response(status=self.status, body=self.raw)
        if self.text is not None:
            return web.Response(status=self.status, text=self.text)
        return web.json_response(self.body, status=self.status)

    def config(self, server: TestServer) -> Config:
        config = Config(api_key="test-key")
        config.set("base_url", str(server.make_url(APOD_PATH)))
        return config

    @asynccontextmanager
    async def serve(self, **settings: Any):
        app = web.Application()
        app.router.add_get(APOD_PATH, self.handle)
        async with TestServer(app) as server:
            config = self.config(server)
            for key, value in settings.items():
                config.set(key, value)
            async with APODClient(config) as client:
                yield client


@pytest.fixture
def fake_apod() -> FakeAPOD:
    return FakeAPOD()
