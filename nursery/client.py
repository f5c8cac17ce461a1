"""
HTTP client for the nursery inventory API.

Wraps httpx with the behavior the admin dashboard relies on:

- list/get results are cached per (resource, path, query) and every
  mutation of a resource drops that resource's cached queries
- a request answered with a 5xx status is retried once after a fixed delay
- failures raise ApiError carrying the server's message

Payloads can be plain dicts (camelCase keys) or the pydantic schemas from
nursery.api.schemas, which are serialized with their camelCase aliases.

Reference: https://www.python-httpx.org/advanced/clients/
"""
import logging
import time
from typing import Any, Dict, Hashable, List, Optional, Tuple, Union

import httpx
from pydantic import BaseModel

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error - please check your connection"
SERVER_ERROR_MESSAGE = "Server error occurred"

# URL segment under the API prefix for each resource
RESOURCES = (
    "plants",
    "categories",
    "colors",
    "tags",
    "tag-groups",
    "fertilizers",
    "variants",
    "care-guidelines",
    "fertilizer-schedules",
    "size-profiles",
    "variant-tags",
)

Payload = Union[BaseModel, Dict[str, Any]]
CacheKey = Tuple[str, str, Tuple[Tuple[str, Hashable], ...]]


class ApiError(Exception):
    """
    Error returned by the API or raised while reaching it

    Attributes:
        message: Server-provided message, or a generic network/server message
        status: HTTP status code (None when no response was received)
        data: Decoded response body, if any
    """
    def __init__(self, message: str, status: Optional[int] = None, data: Any = None):
        self.message = message
        self.status = status
        self.data = data
        super().__init__(message)


class NurseryClient:
    """
    Client for the REST API with a per-resource query cache.

    Usage:
        with NurseryClient("http://localhost:5000") as client:
            category = client.create("categories", {"name": "Indoor Plants"})
            plant = client.create("plants", PlantCreate(name="Monstera", category_id=category["id"]))
            variants = client.list("variants", plantId=plant["id"])
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        *,
        api_prefix: str = "/api",
        timeout: float = 10.0,
        retry_delay: float = 1.0,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Args:
            base_url: Server address (ignored when http_client is given)
            api_prefix: Path prefix of the API routes
            timeout: Request timeout in seconds
            retry_delay: Seconds to wait before retrying a 5xx response
            http_client: Preconfigured httpx.Client (e.g. FastAPI's TestClient)
        """
        self.api_prefix = api_prefix.rstrip("/")
        self.retry_delay = retry_delay
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(base_url=base_url, timeout=timeout)
        self._cache: Dict[CacheKey, Any] = {}

    def __enter__(self) -> "NurseryClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    # Low-level request handling

    def _url(self, resource: str, record_id: Optional[str] = None) -> str:
        if resource not in RESOURCES:
            raise ValueError(f"Unknown resource '{resource}'")
        url = f"{self.api_prefix}/{resource}"
        return f"{url}/{record_id}" if record_id else url

    def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            return self._http.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"{method} {url} failed: {type(e).__name__}: {e}")
            raise ApiError(NETWORK_ERROR_MESSAGE) from e

    def request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        """
        Send a request and decode the JSON body.

        A 5xx response is retried once after retry_delay seconds.

        Raises:
            ApiError: On a non-2xx response or when the server is unreachable
        """
        logger.debug(f"{method} {url} params={params}")
        response = self._send(method, url, params=params, json=json)
        if response.status_code >= 500:
            logger.warning(
                f"{method} {url} returned {response.status_code}, retrying in {self.retry_delay}s"
            )
            time.sleep(self.retry_delay)
            response = self._send(method, url, params=params, json=json)

        if response.is_error:
            try:
                data = response.json()
            except ValueError:
                data = None
            message = SERVER_ERROR_MESSAGE
            if isinstance(data, dict) and data.get("message"):
                message = data["message"]
            logger.error(f"{method} {url} failed with {response.status_code}: {message}")
            raise ApiError(message, status=response.status_code, data=data)

        return response.json()

    # Query cache

    def _cached(self, resource: str, url: str, params: Dict[str, Any]) -> Any:
        clean = {key: value for key, value in params.items() if value is not None}
        key: CacheKey = (resource, url, tuple(sorted(clean.items())))
        if key not in self._cache:
            self._cache[key] = self.request("GET", url, params=clean or None)
        return self._cache[key]

    def invalidate(self, resource: Optional[str] = None) -> None:
        """Drop cached queries of one resource, or of all resources."""
        if resource is None:
            self._cache.clear()
            return
        for key in [key for key in self._cache if key[0] == resource]:
            del self._cache[key]

    # CRUD

    def list(self, resource: str, **filters: Optional[str]) -> List[Dict[str, Any]]:
        """
        List records, e.g. ``client.list("variants", plantId=plant_id)``.
        Filters with a None value are dropped.
        """
        return self._cached(resource, self._url(resource), filters)

    def get(self, resource: str, record_id: str) -> Dict[str, Any]:
        return self._cached(resource, self._url(resource, record_id), {})

    def create(self, resource: str, payload: Payload) -> Dict[str, Any]:
        record = self.request("POST", self._url(resource), json=_to_json(payload))
        self.invalidate(resource)
        return record

    def update(self, resource: str, record_id: str, payload: Payload) -> Dict[str, Any]:
        record = self.request("PUT", self._url(resource, record_id), json=_to_json(payload))
        self.invalidate(resource)
        return record

    def delete(self, resource: str, record_id: str) -> Dict[str, Any]:
        result = self.request("DELETE", self._url(resource, record_id))
        self.invalidate(resource)
        return result


def _to_json(payload: Payload) -> Dict[str, Any]:
    if isinstance(payload, BaseModel):
        # exclude_unset keeps partial updates partial
        return payload.model_dump(mode="json", by_alias=True, exclude_unset=True)
    return payload
