"""Tests for the uvicorn-backed HTTP listener wrapper."""

from __future__ import annotations

import asyncio
import socket

import pytest
from fastapi import FastAPI

from papers_api.runtime import HttpServerStartupError, UvicornHttpServer


def test_http_server_reports_bind_failure_as_startup_error() -> None:
    """Convert uvicorn's bind-failure exit into a typed error."""

    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as occupied_socket:
        occupied_socket.bind(("127.0.0.1", 0))
        occupied_socket.listen()
        occupied_port = occupied_socket.getsockname()[1]
        server = UvicornHttpServer(application=FastAPI(), host="127.0.0.1", port=occupied_port)

        with pytest.raises(HttpServerStartupError):
            asyncio.run(server.http_serve())


def test_http_server_returns_after_stop_request() -> None:
    """Bind, observe the pending stop request and return without error."""

    server = UvicornHttpServer(application=FastAPI(), host="127.0.0.1", port=0)
    server.http_request_stop(force=True)

    asyncio.run(asyncio.wait_for(server.http_serve(), timeout=10))


def test_http_server_requires_application() -> None:
    """Reject a missing application."""

    with pytest.raises(ValueError):
        UvicornHttpServer(application=None, host="127.0.0.1", port=0)
