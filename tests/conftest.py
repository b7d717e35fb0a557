from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel

from project_errors.config import settings
from project_errors.exceptions import (
    GatewayTimeoutError,
    NotFoundError,
    ProjectMultiError,
    RejectedError,
)
from project_errors.handlers import register_error_handlers


class OrderIn(BaseModel):
    sku: str
    quantity: int


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test from the default settings, whatever the environment says."""
    monkeypatch.setattr(settings, "jsonapi_version", None)
    monkeypatch.setattr(settings, "log_unhandled", True)


@pytest.fixture
def app() -> FastAPI:
    """Small app whose routes raise each kind of failure the boundary handles."""
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/items/{item_id}")
    async def get_item(item_id: int) -> dict[str, int]:
        if item_id == 0:
            raise NotFoundError("Item 0 does not exist")
        return {"id": item_id}

    @app.get("/batch")
    async def batch() -> None:
        raise ProjectMultiError([NotFoundError(), RejectedError()])

    @app.get("/upstream")
    async def upstream() -> None:
        raise ProjectMultiError([NotFoundError(), GatewayTimeoutError()])

    @app.get("/empty")
    async def empty() -> None:
        raise ProjectMultiError()

    @app.post("/orders")
    async def create_order(order: OrderIn) -> dict[str, int]:
        return {"quantity": order.quantity}

    @app.get("/crash")
    async def crash() -> None:
        raise RuntimeError("database exploded")

    return app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """HTTP client bound to the test app.

    raise_app_exceptions=False: Starlette re-raises unhandled exceptions after
    the catch-all handler has sent its 500, and the tests assert on that 500.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as client:
        yield client
