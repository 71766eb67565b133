from enum import Enum
from logging import getLogger
from typing import Any, Optional, Union

from httpx import (
    AsyncBaseTransport,
    AsyncClient,
    BaseTransport,
    Client,
    Request,
    Response,
    TransportError,
)

from ._config import ClientConfig
from ._utils import (
    RequestSpec,
    decode_body,
    encode_body,
    merge_headers,
    negotiate_content,
    normalize_url,
    setup_logging,
)
from ._utils.constants import HttpMethod
from .models import ResolvedRequest, ResponseEnvelope


def normalize_method(method: Union[str, HttpMethod, None]) -> str:
    """Uppercase the method name, defaulting to GET."""
    if not method:
        return HttpMethod.GET.value
    if isinstance(method, Enum):
        method = method.value
    return str(method).upper()


class HttpClient:
    """
    Thin HTTP/HTTPS client with base URL resolution and JSON/form bodies.

    Every call resolves the request (URL, headers, body), sends it over a
    dedicated ``httpx`` client and decodes the response body according to its
    ``Content-Type``. Redirects are not followed, no timeout is applied and
    nothing is retried. Transport failures propagate as the original ``httpx``
    exception.

    Example:
        ```python
        client = HttpClient(base_url="https://api.example.com", headers=JSON_HEADERS)
        result = client.post("/users", {"name": "x"})
        print(result.body)
        ```
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
        *,
        config: Optional[ClientConfig] = None,
        transport: Optional[BaseTransport] = None,
        async_transport: Optional[AsyncBaseTransport] = None,
        debug: bool = False,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url (Optional[str]): Prefix for relative request URLs.
            headers (Optional[dict[str, str]]): Headers sent with every request.
                Per-call headers with the same key take precedence.
            config (Optional[ClientConfig]): A prebuilt configuration. Cannot be
                combined with ``base_url`` or ``headers``.
            transport (Optional[BaseTransport]): ``httpx`` transport used by the
                synchronous methods. Defaults to the standard HTTP transport.
            async_transport (Optional[AsyncBaseTransport]): ``httpx`` transport
                used by the asynchronous methods.
            debug (bool): Enable debug logging if set to True. Defaults to False.
        """
        if config is not None and (base_url is not None or headers is not None):
            raise ValueError("Pass either config or base_url/headers, not both")

        self._logger = getLogger("jsonhttp")
        self._config = config or ClientConfig(base_url=base_url, headers=headers or {})
        self._transport = transport
        self._async_transport = async_transport

        if debug:
            setup_logging(debug)

        self._logger.debug(f"HEADERS: {self._config.headers}")

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> Optional[str]:
        return self._config.base_url

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._config.headers)

    def resolve_request(
        self, spec: Optional[RequestSpec] = None, **kwargs: Any
    ) -> ResolvedRequest:
        """
        Compute the transport-ready request without sending it.

        Args:
            spec (Optional[RequestSpec]): The logical request. Alternatively pass
                ``url``, ``method``, ``query``, ``data`` and ``headers`` as
                keyword arguments.

        Returns:
            ResolvedRequest: Method, URL parts, merged headers and serialized body.

        Raises:
            InvalidUrlError: If the URL cannot be resolved to an absolute http(s) URL.
        """
        spec = self._coerce_spec(spec, kwargs)

        method = normalize_method(spec.method)
        headers = merge_headers(self._config.headers, spec.headers)
        url = normalize_url(spec.url, spec.query, self._config.base_url)
        body = encode_body(spec.data, negotiate_content(headers))

        return ResolvedRequest(
            method=method,
            url=str(url),
            protocol=url.scheme,
            hostname=url.host,
            port=url.port,
            path=url.raw_path.decode("ascii"),
            headers=headers,
            body=body,
        )

    def request(
        self, spec: Optional[RequestSpec] = None, **kwargs: Any
    ) -> ResponseEnvelope:
        """
        Send a request and decode the response.

        Args:
            spec (Optional[RequestSpec]): The logical request, or the same fields
                as keyword arguments.

        Returns:
            ResponseEnvelope: Decoded body, response headers and the raw response.

        Raises:
            InvalidUrlError: If the URL cannot be resolved.
            TransportError: If the connection fails. The ``httpx`` exception is
                re-raised unchanged.
        """
        resolved = self.resolve_request(spec, **kwargs)
        http_request = self._build_request(resolved)

        with Client(
            transport=self._transport, timeout=None, follow_redirects=False
        ) as client:
            try:
                response = client.send(http_request)
            except TransportError as e:
                self._logger.debug(
                    f"Transport error: {resolved.method} {resolved.url}: {e!r}"
                )
                raise

        return self._build_envelope(response)

    async def request_async(
        self, spec: Optional[RequestSpec] = None, **kwargs: Any
    ) -> ResponseEnvelope:
        """
        Asynchronous version of :meth:`request`.

        Returns:
            ResponseEnvelope: Decoded body, response headers and the raw response.

        Raises:
            InvalidUrlError: If the URL cannot be resolved.
            TransportError: If the connection fails. The ``httpx`` exception is
                re-raised unchanged.
        """
        resolved = self.resolve_request(spec, **kwargs)
        http_request = self._build_request(resolved)

        async with AsyncClient(
            transport=self._async_transport, timeout=None, follow_redirects=False
        ) as client:
            try:
                response = await client.send(http_request)
            except TransportError as e:
                self._logger.debug(
                    f"Transport error: {resolved.method} {resolved.url}: {e!r}"
                )
                raise

        return self._build_envelope(response)

    def get(
        self,
        url: str,
        *,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> ResponseEnvelope:
        return self.request(
            RequestSpec(
                method=HttpMethod.GET,
                url=url,
                query=query or {},
                headers=headers or {},
            )
        )

    def post(
        self,
        url: str,
        data: Any = None,
        *,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> ResponseEnvelope:
        return self.request(
            RequestSpec(
                method=HttpMethod.POST,
                url=url,
                query=query or {},
                data=data,
                headers=headers or {},
            )
        )

    def put(
        self,
        url: str,
        data: Any = None,
        *,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> ResponseEnvelope:
        return self.request(
            RequestSpec(
                method=HttpMethod.PUT,
                url=url,
                query=query or {},
                data=data,
                headers=headers or {},
            )
        )

    def delete(
        self,
        url: str,
        data: Any = None,
        *,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> ResponseEnvelope:
        return self.request(
            RequestSpec(
                method=HttpMethod.DELETE,
                url=url,
                query=query or {},
                data=data,
                headers=headers or {},
            )
        )

    def head(
        self,
        url: str,
        *,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> ResponseEnvelope:
        return self.request(
            RequestSpec(
                method=HttpMethod.HEAD,
                url=url,
                query=query or {},
                headers=headers or {},
            )
        )

    async def get_async(
        self,
        url: str,
        *,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> ResponseEnvelope:
        return await self.request_async(
            RequestSpec(
                method=HttpMethod.GET,
                url=url,
                query=query or {},
                headers=headers or {},
            )
        )

    async def post_async(
        self,
        url: str,
        data: Any = None,
        *,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> ResponseEnvelope:
        return await self.request_async(
            RequestSpec(
                method=HttpMethod.POST,
                url=url,
                query=query or {},
                data=data,
                headers=headers or {},
            )
        )

    async def put_async(
        self,
        url: str,
        data: Any = None,
        *,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> ResponseEnvelope:
        return await self.request_async(
            RequestSpec(
                method=HttpMethod.PUT,
                url=url,
                query=query or {},
                data=data,
                headers=headers or {},
            )
        )

    async def delete_async(
        self,
        url: str,
        data: Any = None,
        *,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> ResponseEnvelope:
        return await self.request_async(
            RequestSpec(
                method=HttpMethod.DELETE,
                url=url,
                query=query or {},
                data=data,
                headers=headers or {},
            )
        )

    async def head_async(
        self,
        url: str,
        *,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> ResponseEnvelope:
        return await self.request_async(
            RequestSpec(
                method=HttpMethod.HEAD,
                url=url,
                query=query or {},
                headers=headers or {},
            )
        )

    def _coerce_spec(
        self, spec: Optional[RequestSpec], kwargs: dict[str, Any]
    ) -> RequestSpec:
        if spec is not None and kwargs:
            raise ValueError("Pass either a RequestSpec or keyword arguments, not both")
        if spec is None:
            if "url" not in kwargs:
                raise TypeError("request() missing required argument: 'url'")
            spec = RequestSpec(
                url=kwargs.pop("url"),
                method=kwargs.pop("method", None) or HttpMethod.GET,
                query=kwargs.pop("query", None) or {},
                data=kwargs.pop("data", None),
                headers=kwargs.pop("headers", None) or {},
            )
            if kwargs:
                raise TypeError(f"Unexpected request arguments: {sorted(kwargs)}")
        return spec

    def _build_request(self, resolved: ResolvedRequest) -> Request:
        self._logger.debug(f"Request: {resolved.method} {resolved.url}")
        self._logger.debug(f"HEADERS: {resolved.headers}")

        return Request(
            resolved.method,
            resolved.url,
            headers=resolved.headers,
            content=resolved.body,
        )

    def _build_envelope(self, response: Response) -> ResponseEnvelope:
        headers = dict(response.headers)
        self._logger.debug(f"Response: {response.status_code} {response.url}")

        return ResponseEnvelope(
            body=decode_body(response.text, headers),
            headers=headers,
            response=response,
        )
