import logging

from botocore.exceptions import BotoCoreError, ClientError

from s3upload.models import LocalFileDigest
from s3upload.utils.file_utils import compute_md5, file_size
from s3upload.utils.s3_utils import head_object_metadata

logger = logging.getLogger(__name__)


def is_file_uploaded(local_path: str, bucket: str, s3) -> bool:
    # Raises on metadata errors other than not-found and on unreadable local files.
    remote = head_object_metadata(s3, bucket, local_path)
    if remote is None or remote.size_bytes is None:
        return False

    size = file_size(local_path)
    if size != remote.size_bytes:
        logger.info("size-mismatch %s", local_path)
        return False

    local = LocalFileDigest(size_bytes=size, checksum=compute_md5(local_path))
    if local.checksum == remote.etag_checksum:
        logger.info("already-uploaded %s", local_path)
        return True

    # Multipart ETags never equal a plain MD5.
    if remote.is_multipart_etag:
        logger.debug("multipart etag %s on %s", remote.content_tag, local_path)
    logger.info("md5-mismatch %s", local_path)
    return False


def should_upload(local_path: str, bucket: str, s3) -> bool:
    # Fail open: a check that errors out never blocks the upload.
    try:
        return not is_file_uploaded(local_path, bucket, s3)
    except (ClientError, BotoCoreError, OSError) as e:
        logger.warning("metadata-check-failed %s: %s", local_path, e)
        return True
