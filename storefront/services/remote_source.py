"""
Remote Catalog Client

HTTP client for a REST document store holding the product collection.
Translates store responses into the catalog source error taxonomy.
"""

import logging
from typing import Any, Optional

import httpx

from ..core.errors import (
    DocumentNotFoundError,
    OrderingUnsupportedError,
    RemoteUnavailableError,
)
from ..database.documents import CREATED_AT, Document, RemoteCatalogSource

logger = logging.getLogger(__name__)

# Store status reported when a query needs an index that does not exist
FAILED_PRECONDITION = "FAILED_PRECONDITION"


class HttpDocumentSource(RemoteCatalogSource):
    """
    Document collection reached over HTTP.

    Endpoints, relative to base_url:
        GET    /{collection}?orderBy=createdAt&direction=desc[&where=f&equals=v]
        GET    /{collection}/{id}
        PATCH  /{collection}/{id}
        DELETE /{collection}/{id}
        POST   /{collection}
    """

    def __init__(
        self,
        base_url: str,
        collection: str = "products",
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Base URL of the document store API
            collection: Name of the product collection
            api_key: Optional bearer token sent with every request
            timeout: Request timeout in seconds
            http_client: Preconfigured client (tests inject a mock transport)
        """
        self.base_url = base_url.rstrip("/")
        self.collection = collection
        self._api_key = api_key
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    @staticmethod
    def _error_status(response: httpx.Response) -> Optional[str]:
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            return body["error"].get("status")
        return None

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        body: Optional[dict[str, Any]] = None,
        document_id: Optional[str] = None,
    ) -> Any:
        """Make an HTTP request and map failures to source errors"""
        url = f"{self.base_url}/{self.collection}{path}"

        try:
            response = await self._http_client.request(
                method=method,
                url=url,
                headers=self._headers(),
                params=params,
                json=body,
            )
        except httpx.HTTPError as e:
            raise RemoteUnavailableError(f"{method} {url} failed: {e}") from e

        if response.status_code >= 400:
            if response.status_code in (400, 412) and self._error_status(response) == FAILED_PRECONDITION:
                raise OrderingUnsupportedError(response.text)
            if response.status_code == 404 and document_id is not None:
                raise DocumentNotFoundError(document_id)
            logger.error(f"Request failed: {response.status_code} - {response.text}")
            raise RemoteUnavailableError(f"{method} {url} returned {response.status_code}")

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise RemoteUnavailableError(f"{method} {url} returned a non-JSON body") from e

    @staticmethod
    def _document(item: Any) -> Document:
        try:
            data = item.get("data") or {}
            if not isinstance(data, dict):
                raise TypeError(f"data is {type(data).__name__}")
            return Document(id=str(item["id"]), data=data)
        except (AttributeError, KeyError, TypeError) as e:
            raise RemoteUnavailableError(f"Malformed document in response: {item!r}") from e

    def _documents(self, payload: Any) -> list[Document]:
        items = payload.get("documents") if isinstance(payload, dict) else None
        if not isinstance(items, list):
            raise RemoteUnavailableError(f"Malformed document list in response: {payload!r}")
        return [self._document(item) for item in items]

    @staticmethod
    def _order_params(order_by_recent: bool) -> dict[str, Any]:
        if not order_by_recent:
            return {}
        return {"orderBy": CREATED_AT, "direction": "desc"}

    async def list_documents(self, order_by_recent: bool = True) -> list[Document]:
        payload = await self._request("GET", "", params=self._order_params(order_by_recent))
        return self._documents(payload)

    async def query_documents(
        self,
        field_name: str,
        value: Any,
        order_by_recent: bool = True,
    ) -> list[Document]:
        params = {"where": field_name, "equals": value, **self._order_params(order_by_recent)}
        payload = await self._request("GET", "", params=params)
        return self._documents(payload)

    async def get_document(self, document_id: str) -> Document:
        payload = await self._request("GET", f"/{document_id}", document_id=document_id)
        return self._document(payload)

    async def update_document(self, document_id: str, fields: dict[str, Any]) -> None:
        await self._request("PATCH", f"/{document_id}", body={"fields": fields}, document_id=document_id)

    async def delete_document(self, document_id: str) -> None:
        await self._request("DELETE", f"/{document_id}", document_id=document_id)

    async def create_document(self, data: dict[str, Any]) -> str:
        payload = await self._request("POST", "", body={"data": data})
        if not isinstance(payload, dict) or not payload.get("id"):
            raise RemoteUnavailableError(f"Create response has no document id: {payload!r}")
        return str(payload["id"])
