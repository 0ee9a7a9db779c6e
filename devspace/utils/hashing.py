"""Content fingerprints used to derive image and container names."""

import hashlib
from pathlib import Path
from typing import Union

CHUNK_SIZE = 64 * 1024


def md5sum(prefix: str, *files: Union[str, Path]) -> str:
    """Return the md5 hex digest of ``prefix`` followed by each file's bytes.

    Files are read in the order given. Any unreadable file raises ``OSError``.
    """
    digest = hashlib.md5(prefix.encode('utf-8'))
    for path in files:
        with open(path, 'rb') as f:
            for chunk in iter(lambda: f.read(CHUNK_SIZE), b''):
                digest.update(chunk)
    return digest.hexdigest()
