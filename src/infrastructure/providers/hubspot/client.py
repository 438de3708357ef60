"""
HubSpot API client.
"""

import json
import time
from typing import Any, Dict, List, Optional

import httpx
import structlog

from src.domain.exceptions.crm_error import CRMAPIError, CRMConfigurationError
from src.infrastructure.external.http_client import HTTPClient
from src.infrastructure.monitoring.metrics import record_crm_request
from src.infrastructure.providers.hubspot.models import (
    HubSpotAssociation,
    HubSpotObject,
    HubSpotSearchRequest,
)

logger = structlog.get_logger()


class HubSpotClient:
    """HubSpot CRM and Files API client."""

    def __init__(
        self,
        access_token: Optional[str],
        base_url: str = "https://api.hubapi.com",
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
        associations_page_size: int = 500,
    ):
        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.associations_page_size = associations_page_size
        self.http = HTTPClient(timeout=timeout, client=http_client)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def search_objects(
        self, object_type: str, search: HubSpotSearchRequest
    ) -> List[HubSpotObject]:
        """Search objects with a property filter."""
        data = await self._request(
            f"search_{object_type}",
            "POST",
            f"/crm/v3/objects/{object_type}/search",
            json=search.to_dict(),
        )
        return [HubSpotObject.from_api(item) for item in data.get("results") or []]

    async def get_association_ids(
        self, from_type: str, object_id: str, to_type: str
    ) -> List[str]:
        """Get ids of all objects of ``to_type`` associated to an object."""
        ids: List[str] = []
        after: Optional[str] = None

        while True:
            params: Dict[str, Any] = {"limit": self.associations_page_size}
            if after:
                params["after"] = after

            data = await self._request(
                f"associations_{from_type}_{to_type}",
                "GET",
                f"/crm/v4/objects/{from_type}/{object_id}/associations/{to_type}",
                params=params,
            )
            ids.extend(str(item["toObjectId"]) for item in data.get("results") or [])

            after = ((data.get("paging") or {}).get("next") or {}).get("after")
            if not after:
                return ids

    async def batch_read(
        self, object_type: str, ids: List[str], properties: List[str]
    ) -> List[HubSpotObject]:
        """Read several objects of the same type at once."""
        if not ids:
            return []

        data = await self._request(
            f"batch_read_{object_type}",
            "POST",
            f"/crm/v3/objects/{object_type}/batch/read",
            json={
                "inputs": [{"id": object_id} for object_id in ids],
                "properties": properties,
            },
        )
        return [HubSpotObject.from_api(item) for item in data.get("results") or []]

    async def get_object(
        self, object_type: str, object_id: str, properties: List[str]
    ) -> HubSpotObject:
        """Read a single object."""
        data = await self._request(
            f"get_{object_type}",
            "GET",
            f"/crm/v3/objects/{object_type}/{object_id}",
            params={"properties": ",".join(properties)},
        )
        return HubSpotObject.from_api(data)

    async def create_object(
        self,
        object_type: str,
        properties: Dict[str, Any],
        associations: Optional[List[HubSpotAssociation]] = None,
    ) -> HubSpotObject:
        """Create an object with its associations."""
        data = await self._request(
            f"create_{object_type}",
            "POST",
            f"/crm/v3/objects/{object_type}",
            json={
                "properties": properties,
                "associations": [a.to_dict() for a in associations or []],
            },
        )
        return HubSpotObject.from_api(data)

    async def upload_file(
        self,
        name: str,
        content: bytes,
        content_type: str,
        folder_id: str,
        ttl: str,
    ) -> Dict[str, Any]:
        """Upload a file to the file manager."""
        options = {"access": "PUBLIC_NOT_INDEXABLE", "ttl": ttl, "overwrite": False}
        return await self._request(
            "upload_file",
            "POST",
            "/files/v3/files",
            data={"folderId": folder_id, "options": json.dumps(options)},
            files={"file": (name, content, content_type)},
            json_body=False,
        )

    async def get_file(self, file_id: str) -> Dict[str, Any]:
        """Get a file's metadata. The Files API has no batch read."""
        return await self._request("get_file", "GET", f"/files/v3/files/{file_id}")

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        json: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Any] = None,
        json_body: bool = True,
    ) -> Dict[str, Any]:
        """Send an authenticated request and return the decoded body."""
        headers = self._get_auth_headers(json_body=json_body)
        start_time = time.time()

        try:
            response = await self.http.request(
                method,
                f"{self.base_url}{path}",
                json=json,
                data=data,
                files=files,
                params=params,
                headers=headers,
            )
        except httpx.TimeoutException:
            record_crm_request(operation, 504, time.time() - start_time)
            raise CRMAPIError(504, "Request timeout")
        except httpx.RequestError as e:
            record_crm_request(operation, 502, time.time() - start_time)
            raise CRMAPIError(502, f"Network error: {str(e)}")

        record_crm_request(operation, response.status_code, time.time() - start_time)

        if not response.is_success:
            details = self._decode(response)
            logger.error(
                "HubSpot API error",
                operation=operation,
                status_code=response.status_code,
                details=details,
            )
            raise CRMAPIError(
                response.status_code,
                f"Failed to {operation.replace('_', ' ')}",
                details=details,
            )

        if not response.content:
            return {}
        return response.json()

    def _get_auth_headers(self, json_body: bool = True) -> Dict[str, str]:
        """Get authentication headers with the private app token."""
        if not self.access_token:
            logger.error("HubSpot access token not configured")
            raise CRMConfigurationError("HubSpot access token not configured")

        headers = {"Authorization": f"Bearer {self.access_token}"}
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text
