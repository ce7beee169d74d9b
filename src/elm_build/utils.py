from __future__ import annotations

import hashlib
from pathlib import Path


def read_text(path: Path, encoding: str = "utf-8") -> str:
    # Decoded from bytes so line endings pass through untouched.
    return path.read_bytes().decode(encoding)


def write_text(path: Path, text: str, encoding: str = "utf-8") -> int:
    """
    Create or truncate `path` and write `text`. The parent directory is not
    created: a missing destination directory is an error for the caller.
    Returns the number of bytes written.
    """
    data = text.encode(encoding)
    with path.open("wb") as f:
        f.write(data)
    return len(data)


def sha256_file(path: Path, chunk_size: int = 1024 * 1024) -> str:
    """
    sha256 fingerprint of a written artifact, for comparing builds.
    """
    h = hashlib.sha256()
    with path.open("rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            h.update(chunk)
    return h.hexdigest()
