import hashlib
import os

CHUNK_SIZE = 1024 * 1024


def file_size(local_path: str) -> int:
    with open(local_path, "rb") as f:
        return os.fstat(f.fileno()).st_size


def compute_md5(local_path: str) -> str:
    md5 = hashlib.md5()
    with open(local_path, "rb") as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
            md5.update(chunk)
    return md5.hexdigest()
