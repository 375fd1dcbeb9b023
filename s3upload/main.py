import argparse
import logging
import os
from collections.abc import Sequence

from boto3.exceptions import S3UploadFailedError
from botocore.exceptions import BotoCoreError, ClientError

from s3upload.config.config import AWS_REGION, LOG_LEVEL, S3_BUCKET
from s3upload.decider import should_upload
from s3upload.utils.s3_utils import UploadProgress, create_s3_client, upload_file_to_s3

logger = logging.getLogger(__name__)


def configure_logging(level: str = LOG_LEVEL) -> None:
    resolved = logging.getLevelName(level.upper())
    known = isinstance(resolved, int)
    logging.basicConfig(
        level=resolved if known else logging.INFO,
        format="%(asctime)s %(filename)s:%(lineno)d: %(message)s",
        datefmt="%Y/%m/%d",
    )
    if not known:
        logger.warning("unknown LOG_LEVEL %r, using INFO", level)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Upload a file to S3 unless an identical object is already there."
    )
    p.add_argument("path", help="Local file to upload; also used as the object key")
    p.add_argument("--bucket", default=S3_BUCKET, help="bucket to put files")
    return p.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    configure_logging()
    args = parse_args(argv)
    bucket, key = args.bucket, args.path

    logger.info("%s %s", bucket, key)

    try:
        with open(key, "rb") as f:
            total_bytes = os.fstat(f.fileno()).st_size
    except OSError as e:
        raise SystemExit(f"cannot open {key}: {e}") from e

    os.environ["AWS_REGION"] = AWS_REGION
    try:
        s3 = create_s3_client(AWS_REGION)
    except BotoCoreError as e:
        raise SystemExit(f"cannot create S3 session: {e}") from e

    if not should_upload(key, bucket, s3):
        return

    progress = UploadProgress(key, total_bytes)
    try:
        result = upload_file_to_s3(key, bucket, s3, progress=progress)
    except (S3UploadFailedError, ClientError, BotoCoreError) as e:
        logger.error("upload-failed %s: %s", key, e)
        return

    logger.info("uploaded %s", result)


if __name__ == "__main__":
    main()
