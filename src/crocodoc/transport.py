"""
HTTP transport for the Crocodoc API.

This module provides the request collaborator that API resource clients
delegate to. It resolves a resource name into a URL, attaches the API token,
performs the request with a retrying ``requests`` session and turns failures
into the exceptions defined in :mod:`crocodoc.exceptions`.
"""

import importlib.metadata
from typing import Any, Dict, Mapping, Optional, Protocol, Union

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry  # type: ignore

from crocodoc.config import get_api_token, get_base_url, get_timeout
from crocodoc.constants import (
    CROCODOC_API_BASE_URL,
    DEFAULT_BACKOFF_FACTOR,
    DEFAULT_CONNECT_RETRIES,
    DEFAULT_REQUEST_TIMEOUT,
    HTTP_4XX_ERROR_CODES,
    RETRY_STATUS_FORCELIST,
)
from crocodoc.exceptions import APIError, NetworkError
from crocodoc.log_utils import logger

ParamValue = Union[str, int]

_USER_AGENT_CACHE: Optional[str] = None


def get_user_agent() -> str:
    """
    Get the User-Agent string used for HTTP requests.

    Returns:
        The string `crocodoc/{version}`, where `{version}` is the installed package version or `unknown` if the version cannot be determined.
    """
    global _USER_AGENT_CACHE

    if _USER_AGENT_CACHE is None:
        try:
            app_version = importlib.metadata.version("crocodoc")
        except importlib.metadata.PackageNotFoundError:
            app_version = "unknown"

        _USER_AGENT_CACHE = f"crocodoc/{app_version}"

    return _USER_AGENT_CACHE


class Requester(Protocol):
    """The request capability API resource clients depend on."""

    def request(
        self,
        resource: str,
        params: Optional[Mapping[str, ParamValue]],
        body: Optional[Mapping[str, Any]] = None,
        expect_json: bool = True,
    ) -> Any: ...


def build_session() -> requests.Session:
    """
    Create a requests session with the client's retry policy mounted.

    Only idempotent methods are retried; the final status is left for the
    caller to inspect.
    """
    session = requests.Session()
    retry_strategy: Retry = Retry(
        total=DEFAULT_CONNECT_RETRIES,
        connect=DEFAULT_CONNECT_RETRIES,
        read=DEFAULT_CONNECT_RETRIES,
        status=DEFAULT_CONNECT_RETRIES,
        backoff_factor=DEFAULT_BACKOFF_FACTOR,
        status_forcelist=list(RETRY_STATUS_FORCELIST),
        allowed_methods=frozenset({"GET", "HEAD"}),
        raise_on_status=False,
        respect_retry_after_header=True,
    )
    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers["User-Agent"] = get_user_agent()
    return session


class CrocodocTransport:
    """
    Performs requests against one Crocodoc API path.

    Usage:
        transport = CrocodocTransport(api_token="...", path="/download/")
        content = transport.request("text", {"uuid": uuid}, None, False)

    The token is sent as the ``token`` parameter: in the query string for GET
    requests, in the form body for POST requests.
    """

    def __init__(
        self,
        api_token: str,
        path: str,
        base_url: str = CROCODOC_API_BASE_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.api_token = api_token
        self.path = path
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else build_session()

    @classmethod
    def from_config(cls, config: Dict[str, Any], path: str) -> "CrocodocTransport":
        """
        Create a transport for `path` from a loaded configuration.

        Raises:
            ConfigurationError: If no API token is configured or a setting is invalid.
        """
        return cls(
            api_token=get_api_token(config),
            path=path,
            base_url=get_base_url(config),
            timeout=get_timeout(config),
        )

    def __enter__(self) -> "CrocodocTransport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def build_url(self, resource: str) -> str:
        return f"{self.base_url}{self.path}{resource}"

    def request(
        self,
        resource: str,
        params: Optional[Mapping[str, ParamValue]],
        body: Optional[Mapping[str, Any]] = None,
        expect_json: bool = True,
    ) -> Any:
        """
        Send a request for `resource` and return its decoded result.

        Parameters:
            resource (str): Resource name relative to this transport's path (e.g. "document").
            params (Optional[Mapping]): Query parameters.
            body (Optional[Mapping]): Form fields; when given the request is a POST.
            expect_json (bool): Decode the response as JSON instead of returning raw bytes.

        Returns:
            Any: The decoded JSON value when `expect_json` is True, otherwise the response bytes.

        Raises:
            NetworkError: If the request could not be completed.
            APIError: If the response reports an error, has an error status,
                or is not valid JSON when JSON was expected.
        """
        url = self.build_url(resource)
        query: Dict[str, Any] = dict(params or {})

        try:
            if body is not None:
                form = dict(body)
                form["token"] = self.api_token
                logger.debug(f"POST {url}")
                response = self.session.post(
                    url, params=query, data=form, timeout=self.timeout
                )
            else:
                query["token"] = self.api_token
                logger.debug(f"GET {url}")
                response = self.session.get(url, params=query, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(
                f"Request to {url} failed", url=url, details=str(e)
            ) from e

        logger.debug(
            f"Received HTTP response status code: {response.status_code} for URL: {url}"
        )
        return self._handle_response(resource, response, expect_json)

    def _error(
        self,
        error_code: str,
        resource: str,
        response: requests.Response,
    ) -> APIError:
        logger.debug(f"Crocodoc API error {error_code} for {self.path}{resource}")
        return APIError(
            error_code,
            type(self).__name__,
            f"{self.path.strip('/')}/{resource}",
            status_code=response.status_code,
            response=response.content,
        )

    def _handle_response(
        self, resource: str, response: requests.Response, expect_json: bool
    ) -> Any:
        result: Any = response.content

        if expect_json:
            try:
                result = response.json()
            except ValueError:
                raise self._error(
                    "server_response_not_valid_json", resource, response
                ) from None
            if result is None or result is False:
                raise self._error("server_response_not_valid_json", resource, response)
            if isinstance(result, dict) and result.get("error"):
                raise self._error(str(result["error"]), resource, response)

        status = response.status_code
        if status in HTTP_4XX_ERROR_CODES:
            raise self._error(
                f"server_error_{status}_{HTTP_4XX_ERROR_CODES[status]}",
                resource,
                response,
            )
        if 500 <= status < 600:
            raise self._error(f"server_error_{status}_unknown", resource, response)

        return result
