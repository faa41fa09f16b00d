from urllib.parse import quote

import httpx

from cedulas.config.settings import Settings
from cedulas.documents.exceptions import StorageError
from cedulas.documents.models import SourceDocument


def storage_object_url(base_url: str, bucket: str, path: str) -> str:
    """Build the object URL: {base_url}/storage/v1/object/{bucket}/{path}"""
    return f"{base_url.rstrip('/')}/storage/v1/object/{bucket}/{quote(path)}"


def split_storage_path(path: str) -> list[str]:
    """Split `<user_id>/<file>` storage paths, rejecting shorter ones.

    Raises:
        ValueError: if the path has fewer than two segments.
    """
    parts = [part for part in path.split("/") if part]
    if len(parts) < 2:
        raise ValueError(f"Invalid storage path: {path!r}")
    return parts


class StorageLoader:
    """Downloads documents from the object store by path."""

    def __init__(
        self,
        *,
        base_url: str,
        service_key: str,
        bucket: str,
        timeout_seconds: int = 30,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._service_key = service_key
        self._bucket = bucket
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    def load(self, path: str) -> SourceDocument:
        """Download a stored document.

        Raises:
            ValueError: if the path is malformed.
            StorageError: if the store is not configured or the download fails.
        """
        parts = split_storage_path(path)
        if not self._base_url:
            raise StorageError("Object store URL is not configured")
        url = storage_object_url(self._base_url, self._bucket, path)
        headers = {
            "Authorization": f"Bearer {self._service_key}",
            "apikey": self._service_key,
        }
        try:
            with httpx.Client(
                timeout=self._timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.get(url, headers=headers)
        except httpx.HTTPError as exc:
            raise StorageError(f"Download of {path!r} failed: {exc}") from exc
        if response.status_code != 200:
            raise StorageError(
                f"Download of {path!r} failed with status {response.status_code}"
            )
        return SourceDocument(
            content=response.content,
            filename=parts[-1],
            mime_type=response.headers.get("content-type"),
        )


def build_storage_loader(settings: Settings) -> StorageLoader:
    return StorageLoader(
        base_url=settings.supabase_url,
        service_key=settings.supabase_service_role_key,
        bucket=settings.storage_bucket,
        timeout_seconds=settings.storage_timeout_seconds,
    )
