import hashlib


def compute_content_hash(data: bytes) -> str:
    """SHA-256 hex digest of the exact bytes on disk, byte-order mark included."""
    return hashlib.sha256(data).hexdigest()
