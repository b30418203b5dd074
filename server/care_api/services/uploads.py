"""Disk storage for uploaded reports and SOS audio."""
import logging
import os
import re
import time

from fastapi import HTTPException, UploadFile

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


def _safe_name(filename: str) -> str:
    """Strip directories and characters that do not belong in a file name."""
    base = os.path.basename(filename or "upload")
    cleaned = re.sub(r"[^A-Za-z0-9._-]", "_", base)
    return cleaned or "upload"


async def save_upload(upload: UploadFile, directory: str, max_bytes: int) -> str:
    """
    Write an upload to ``directory`` as ``{epoch_ms}-{name}``.

    Returns:
        Path of the stored file

    Raises:
        HTTPException: 413 if the upload exceeds max_bytes
    """
    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, f"{int(time.time() * 1000)}-{_safe_name(upload.filename)}")

    written = 0
    with open(path, "wb") as out:
        while True:
            chunk = await upload.read(CHUNK_SIZE)
            if not chunk:
                break
            written += len(chunk)
            if written > max_bytes:
                break
            out.write(chunk)

    if written > max_bytes:
        os.remove(path)
        logger.warning(f"[UPLOADS] Rejected {upload.filename}: over {max_bytes} bytes")
        raise HTTPException(status_code=413, detail="Uploaded file is too large")

    logger.info(f"[UPLOADS] Stored {written} bytes at {path}")
    return path


async def read_upload(upload: UploadFile, max_bytes: int) -> bytes:
    """
    Read an upload into memory, stopping as soon as it passes max_bytes.

    Raises:
        HTTPException: 413 if the upload exceeds max_bytes
    """
    chunks = []
    read = 0
    while True:
        chunk = await upload.read(CHUNK_SIZE)
        if not chunk:
            break
        read += len(chunk)
        if read > max_bytes:
            logger.warning(f"[UPLOADS] Rejected {upload.filename}: over {max_bytes} bytes")
            raise HTTPException(status_code=413, detail="Uploaded file is too large")
        chunks.append(chunk)
    return b"".join(chunks)


def remove_file(path: str) -> bool:
    """Delete a stored file; returns False if it was already gone."""
    if path and os.path.exists(path):
        os.remove(path)
        logger.info(f"[UPLOADS] Removed {path}")
        return True
    return False
