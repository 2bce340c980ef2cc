from __future__ import annotations

import logging
import urllib.error
import urllib.request
from typing import Any, BinaryIO, Optional
from urllib.parse import urlparse

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..constants import OriginKind
from .base import ResourceOrigin

LOGGER = logging.getLogger(__name__)


class RemoteUrlOrigin(ResourceOrigin):
    """Opens resources addressed by URL.

    ``s3://bucket/key`` URLs are read through boto3; every other scheme is
    handed to ``urllib.request``. Identifiers that do not parse as URLs, and
    URLs that cannot be opened, are reported as not found. No timeout is
    applied to the connection.
    """

    kind = OriginKind.REMOTE_URL

    def __init__(self, s3_client=None, opener=None) -> None:
        self._s3_client = s3_client
        self._opener = opener or urllib.request.urlopen

    def open(self, resource_path: str, reference: Any = None) -> Optional[BinaryIO]:
        try:
            parsed = urlparse(resource_path)
        except ValueError:
            return None

        # A single letter is a Windows drive, not a scheme.
        if len(parsed.scheme) < 2:
            LOGGER.debug("Not a URL", extra={"resourcePath": resource_path})
            return None

        if parsed.scheme == "s3":
            return self._open_s3(resource_path, parsed.netloc, parsed.path.lstrip("/"))

        try:
            return self._opener(resource_path)
        except (urllib.error.URLError, ValueError, OSError) as exc:
            LOGGER.debug(
                "URL could not be opened",
                extra={"resourcePath": resource_path, "error": str(exc)},
            )
            return None

    def _open_s3(self, uri: str, bucket: str, key: str) -> Optional[BinaryIO]:
        if not bucket or not key:
            return None
        try:
            response = self._client().get_object(Bucket=bucket, Key=key)
        except (ClientError, BotoCoreError) as exc:
            LOGGER.debug("S3 object could not be read", extra={"resourcePath": uri, "error": str(exc)})
            return None
        return response["Body"]

    def _client(self):
        if self._s3_client is None:
            self._s3_client = boto3.client("s3")
        return self._s3_client
