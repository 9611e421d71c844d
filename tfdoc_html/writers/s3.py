"""Upload the generated document to S3."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

try:
    import boto3  # type: ignore[import-not-found]
    from botocore.exceptions import (  # type: ignore[import-not-found]
        BotoCoreError,
        ClientError,
    )
except ImportError as exc:
    raise SystemExit(
        "Missing dependency 'boto3'. Install with pip install boto3"
    ) from exc

from ..errors import InvalidS3UriError, OutputError

S3_SCHEME = "s3://"
HTML_CONTENT_TYPE = "text/html; charset=utf-8"
MARKDOWN_CONTENT_TYPE = "text/markdown; charset=utf-8"


@dataclass(slots=True, frozen=True)
class S3Target:
    """Bucket and key addressed by an ``s3://`` URI."""

    bucket: str
    key: str

    @property
    def uri(self) -> str:
        return f"{S3_SCHEME}{self.bucket}/{self.key}"


def parse_uri(uri: str) -> S3Target:
    """Split a fully qualified S3 URI into bucket and key."""

    if not uri.startswith(S3_SCHEME):
        raise InvalidS3UriError(f"URI '{uri}' is not a valid S3 URI")
    bucket, _, key = uri[len(S3_SCHEME):].partition("/")
    if not bucket or not key:
        raise InvalidS3UriError(f"URI '{uri}' is not a valid S3 URI")
    return S3Target(bucket=bucket, key=key)


def get_client() -> Any:
    """Return an S3 client built from the default credential chain."""

    return boto3.session.Session().client("s3")


def s3_upload(
    uri: str,
    document: str,
    *,
    content_type: str = HTML_CONTENT_TYPE,
    client: Optional[Any] = None,
) -> dict:
    """Put ``document`` at ``uri`` and return the PutObject response."""

    target = parse_uri(uri)
    try:
        s3 = client if client is not None else get_client()
        return s3.put_object(
            Bucket=target.bucket,
            Key=target.key,
            Body=document.encode("utf-8"),
            ContentType=content_type,
        )
    except (BotoCoreError, ClientError) as exc:
        raise OutputError(f"Unable to upload to {target.uri}: {exc}") from exc
