from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class UploadTarget:
    """Destination of an upload: the key is the local path, verbatim."""

    bucket: str
    key: str

    @classmethod
    def from_path(cls, local_path: str, bucket: str) -> "UploadTarget":
        return cls(bucket=bucket, key=local_path)

    @property
    def uri(self) -> str:
        return f"s3://{self.bucket}/{self.key}"


@dataclass(frozen=True)
class RemoteObjectMetadata:
    size_bytes: Optional[int]
    content_tag: Optional[str]

    @classmethod
    def from_head_response(cls, resp: Mapping[str, Any]) -> "RemoteObjectMetadata":
        return cls(size_bytes=resp.get("ContentLength"), content_tag=resp.get("ETag"))

    @property
    def etag_checksum(self) -> Optional[str]:
        if self.content_tag is None:
            return None
        return self.content_tag.replace('"', "")

    @property
    def is_multipart_etag(self) -> bool:
        # Multipart ETags look like "<md5-of-part-md5s>-<part count>"
        checksum = self.etag_checksum
        return checksum is not None and "-" in checksum


@dataclass(frozen=True)
class LocalFileDigest:
    size_bytes: int
    checksum: str
