"""Pushy backend – pooled HTTPS client.

One long-lived client per server instance keeps connections (and their TLS
sessions) warm when many notifications per second go to the same host.
"""
from __future__ import annotations

import socket

import httpx
from httpx._utils import get_environment_proxies

from pushy_proxy.notifications.pushy.settings import PushySettings

# httpx applies this budget to the TLS handshake as well.
CONNECT_TIMEOUT = 30.0
KEEPALIVE_SECONDS = 30


def _keepalive_socket_options() -> list[tuple[int, int, int]]:
    options = [(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1)]
    if hasattr(socket, "TCP_KEEPIDLE"):
        options.append((socket.IPPROTO_TCP, socket.TCP_KEEPIDLE, KEEPALIVE_SECONDS))
    if hasattr(socket, "TCP_KEEPINTVL"):
        options.append((socket.IPPROTO_TCP, socket.TCP_KEEPINTVL, KEEPALIVE_SECONDS))
    return options


def build_limits(settings: PushySettings) -> httpx.Limits:
    """Keep-alive pool capped at ``max_conns``; total connections unbounded."""
    return httpx.Limits(
        max_connections=None,
        max_keepalive_connections=settings.max_conns,
        keepalive_expiry=float(settings.idle_conn_timeout),
    )


def build_timeout() -> httpx.Timeout:
    """Only connection setup is bounded; reads wait for the gateway."""
    return httpx.Timeout(None, connect=CONNECT_TIMEOUT)


def build_transport(settings: PushySettings, proxy: str | None = None) -> httpx.HTTPTransport:
    """HTTP/2 transport with the tuned pool, optionally through *proxy*."""
    return httpx.HTTPTransport(
        http2=True,
        limits=build_limits(settings),
        socket_options=_keepalive_socket_options(),
        proxy=proxy,
    )


def build_proxy_mounts(settings: PushySettings) -> dict[str, httpx.HTTPTransport | None]:
    """Transports for ``HTTP(S)_PROXY`` / ``ALL_PROXY``; ``NO_PROXY`` hosts map to ``None``.

    httpx ignores proxy variables once a custom transport is given, so the
    mounts are built here with the same pool tuning.
    """
    return {
        pattern: None if url is None else build_transport(settings, proxy=url)
        for pattern, url in get_environment_proxies().items()
    }


def build_http_client(settings: PushySettings) -> httpx.Client:
    """Allocate the pooled client. No network I/O happens here."""
    return httpx.Client(
        transport=build_transport(settings),
        mounts=build_proxy_mounts(settings),
        timeout=build_timeout(),
    )


__all__ = [
    "CONNECT_TIMEOUT",
    "KEEPALIVE_SECONDS",
    "build_http_client",
    "build_limits",
    "build_proxy_mounts",
    "build_timeout",
    "build_transport",
]
