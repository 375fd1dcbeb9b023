import os
from dotenv import load_dotenv

load_dotenv()

S3_BUCKET = os.getenv("S3_BUCKET", "cloudlabs.blobs.us-west-2")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Region is pinned; it overrides whatever the environment supplies.
AWS_REGION = "us-west-2"
PART_SIZE = 64 * 1024 * 1024
