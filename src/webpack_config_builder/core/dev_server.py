"""
Development server hook and the reverse proxy it forwards requests through.
"""

import logging
from typing import Any, Callable, Dict, Optional, Protocol

import httpx

logger = logging.getLogger(__name__)

# Hop-by-hop headers are connection specific and must not be forwarded
HOP_BY_HOP_HEADERS = {
    "connection",
    "keep-alive",
    "proxy-authenticate",
    "proxy-authorization",
    "te",
    "trailers",
    "transfer-encoding",
    "upgrade",
    "host",
    "content-length",
}

# httpx hands back a decoded body, so its encoding header no longer applies
DECODED_RESPONSE_SKIP_HEADERS = HOP_BY_HOP_HEADERS | {"content-encoding"}


class ReverseProxy(Protocol):
    """Anything able to forward one incoming request upstream."""

    def forward(self, request: Any, response: Any, options: Dict[str, Any],
                on_error: Callable[[Optional[Exception]], Any]) -> None:
        ...


class HttpxReverseProxy:
    """
    Reverse proxy built on ``httpx.Client``.

    Options:
        target: Upstream base URL (required)
        secure: Verify upstream TLS certificates
        timeout: Request timeout in seconds
        headers: Extra headers added to every upstream request

    The incoming ``request`` needs ``method``, ``url`` and ``headers``
    attributes and may carry ``body`` bytes. The ``response`` needs a
    writable ``status_code``, a ``headers`` mapping and ``write(bytes)``.
    """

    def __init__(self, options: Dict[str, Any], transport: Optional[httpx.BaseTransport] = None):
        if not options.get("target"):
            raise ValueError("Proxy options require a 'target' URL")
        self.options = dict(options)
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.options["target"],
                verify=self.options.get("secure", True),
                timeout=self.options.get("timeout", 30),
                headers=self.options.get("headers"),
                transport=self._transport,
            )
        return self._client

    def forward(self, request, response, options, on_error) -> None:
        """Send ``request`` upstream and copy the upstream answer into ``response``."""
        headers = {
            key: value for key, value in dict(request.headers or {}).items()
            if key.lower() not in HOP_BY_HOP_HEADERS
        }
        headers.update(options.get("headers", {}))

        try:
            upstream = self.client.request(
                request.method,
                request.url,
                headers=headers,
                content=getattr(request, "body", None),
            )
        except httpx.HTTPError as e:
            logger.warning(f"Proxy request {request.method} {request.url} failed: {e}")
            on_error(e)
            return

        response.status_code = upstream.status_code
        for key, value in upstream.headers.items():
            if key.lower() not in DECODED_RESPONSE_SKIP_HEADERS:
                response.headers[key] = value
        response.write(upstream.content)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None


class DevServerHook:
    """
    Server setup hook stored under ``devServer.after``.

    Called once by the development server with its application object; when
    proxy options were given it installs a middleware forwarding every
    request through a reverse proxy. Proxies created here stay open for the
    life of the server; call ``close()`` when the server shuts down.
    """

    def __init__(self, proxy_options: Optional[Dict[str, Any]] = None,
                 proxy_factory: Optional[Callable[[Dict[str, Any]], ReverseProxy]] = None,
                 log_prefix: str = "webpack-dev-middleware: proxy:"):
        self.proxy_options = proxy_options
        self.proxy_factory = proxy_factory
        self.log_prefix = log_prefix
        self.proxies = []

    def __call__(self, app, *args, **kwargs) -> None:
        if self.proxy_options is None:
            return
        if self.proxy_factory is None:
            logger.debug("No reverse proxy available, proxy options ignored")
            return

        proxy = self.proxy_factory(self.proxy_options)
        self.proxies.append(proxy)
        log_prefix = self.log_prefix

        def proxy_middleware(req, res, next):
            logger.info(f"{log_prefix} {req.method} {req.url}")

            def on_error(err):
                if err:
                    return next(err)

            proxy.forward(req, res, {}, on_error)

        app.use(proxy_middleware)

    def close(self) -> None:
        """Close every proxy this hook created."""
        for proxy in self.proxies:
            close = getattr(proxy, "close", None)
            if close is not None:
                close()
        self.proxies = []

    def __repr__(self):
        return f"DevServerHook(proxy_options={self.proxy_options!r})"
