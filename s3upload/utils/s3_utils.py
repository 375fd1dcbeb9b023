import logging
import threading

import boto3
from boto3.s3.transfer import TransferConfig
from botocore.exceptions import ClientError

from s3upload.config.config import AWS_REGION, PART_SIZE
from s3upload.models import RemoteObjectMetadata, UploadTarget

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = {"404", "NotFound", "NoSuchKey"}


def create_s3_client(region: str = AWS_REGION):
    session = boto3.Session(region_name=region)
    return session.client("s3")


def head_object_metadata(s3, bucket: str, key: str) -> RemoteObjectMetadata | None:
    try:
        resp = s3.head_object(Bucket=bucket, Key=key)
    except ClientError as e:
        if e.response["Error"]["Code"] in NOT_FOUND_CODES:
            return None
        raise
    return RemoteObjectMetadata.from_head_response(resp)


class UploadProgress:
    """boto3 transfer callback; called from worker threads."""

    def __init__(self, local_path: str, total_bytes: int, report_every: int = PART_SIZE):
        self.local_path = local_path
        self.total_bytes = total_bytes
        self.report_every = report_every
        self._bytes_sent = 0
        self._next_report = report_every
        self._finished = False
        self._lock = threading.Lock()

    @property
    def bytes_sent(self) -> int:
        with self._lock:
            return self._bytes_sent

    def __call__(self, bytes_amount: int) -> None:
        # boto3 reports a retried part as a negative amount.
        with self._lock:
            self._bytes_sent += bytes_amount
            sent = self._bytes_sent
            if self._finished:
                return
            done = sent >= self.total_bytes
            if not done and sent < self._next_report:
                return
            while self._next_report <= sent:
                self._next_report += self.report_every
            self._finished = done
        pct = 100.0 if self.total_bytes == 0 else min(sent / self.total_bytes, 1.0) * 100
        logger.info("progress %s %d/%d bytes (%.0f%%)", self.local_path, sent, self.total_bytes, pct)


def upload_file_to_s3(local_path: str, bucket: str, s3, progress: UploadProgress | None = None) -> dict:
    target = UploadTarget.from_path(local_path, bucket)
    config = TransferConfig(multipart_threshold=PART_SIZE, multipart_chunksize=PART_SIZE)

    s3.upload_file(local_path, target.bucket, target.key, Config=config, Callback=progress)
    return {"Bucket": target.bucket, "Key": target.key, "Location": target.uri}
