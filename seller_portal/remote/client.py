"""
Client for the hosted backend, built on supabase-py

One httpx.AsyncClient is shared by every supabase client the app creates.
Per-request clients carry the signed-in user's bearer token so the backend's
row-level security applies.
"""

from typing import Any, Dict, List, Optional
import logging

import httpx
from supabase import AsyncClient, AsyncClientOptions, acreate_client

from .auth import IdentityClient
from .errors import remote_errors

logger = logging.getLogger(__name__)

class SupabaseGateway:
    """Shared connection to the hosted backend"""

    def __init__(self, url: str, anon_key: str, http: httpx.AsyncClient, client: AsyncClient):
        self.url = url.rstrip("/")
        self.anon_key = anon_key
        self.http = http
        self.client = client
        self.auth = IdentityClient(self)

    @classmethod
    async def connect(
        cls,
        url: str,
        anon_key: str,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "SupabaseGateway":
        """Open the shared HTTP pool and the anonymous supabase client"""
        http = httpx.AsyncClient(timeout=timeout, transport=transport)
        client = await acreate_client(url, anon_key, options=_client_options(http))
        return cls(url, anon_key, http, client)

    async def connect_client(self) -> AsyncClient:
        """Fresh anonymous client with its own auth state"""
        return await acreate_client(self.url, self.anon_key, options=_client_options(self.http))

    def data(self, access_token: Optional[str] = None) -> "RemoteDataClient":
        """Data/storage view acting as the given user (anon when None)"""
        if access_token is None:
            return RemoteDataClient(self.client)

        options = _client_options(self.http, {"Authorization": f"Bearer {access_token}"})
        return RemoteDataClient(AsyncClient(self.url, self.anon_key, options))

    async def aclose(self) -> None:
        await self.http.aclose()

def _client_options(http: httpx.AsyncClient, headers: Optional[Dict[str, str]] = None) -> AsyncClientOptions:
    options = AsyncClientOptions(
        auto_refresh_token=False,
        persist_session=False,
        httpx_client=http
    )
    if headers:
        options.headers.update(headers)
    return options

class RemoteDataClient:
    """
    Remote collections and the object store for one user

    Example:
        rows = await remote.execute(
            remote.table("products").select("id").eq("seller_id", sid),
            "list products"
        )
    """

    def __init__(self, client: AsyncClient):
        self.client = client

    def table(self, name: str):
        return self.client.table(name)

    async def execute(self, query, context: str = "remote query") -> List[Dict[str, Any]]:
        """Run a built query and return the affected/selected rows"""
        with remote_errors(context):
            response = await query.execute()

        data = response.data
        if not data:
            return []
        if isinstance(data, dict):
            return [data]
        return data

    async def first(self, query, context: str = "remote query") -> Optional[Dict[str, Any]]:
        """First row or None"""
        rows = await self.execute(query.limit(1), context)
        return rows[0] if rows else None

    async def upload_file(
        self,
        bucket: str,
        path: str,
        content: bytes,
        content_type: str
    ) -> str:
        """
        Upload one object to storage

        Returns:
            Public URL of the stored object
        """
        store = self.client.storage.from_(bucket)

        with remote_errors(f"upload {bucket}/{path}"):
            await store.upload(path, content, {"content-type": content_type, "upsert": "false"})
            return await store.get_public_url(path)
