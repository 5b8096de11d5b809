"""
Storage for uploaded profile files.

Files are written under the configured upload directory with a generated
name of the form ``<epoch-ms>-<original filename>``. Only that name is kept
in the database. Files are never removed when their record is deleted.
"""

import logging
import shutil
import time
from pathlib import Path, PureWindowsPath
from typing import Optional, Union

from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

logger = logging.getLogger(__name__)


def generate_upload_name(original_filename: Optional[str], now: Optional[float] = None) -> str:
    """
    Build the stored filename for an upload.

    Directory components sent by the client are dropped so the file always
    lands directly in the upload directory.

    Args:
        original_filename: Filename reported by the client
        now: Timestamp in seconds, defaults to the current time

    Returns:
        str: ``<epoch-ms>-<basename>``
    """
    basename = PureWindowsPath(original_filename or "").name or "upload"
    timestamp = int((time.time() if now is None else now) * 1000)
    return f"{timestamp}-{basename}"


def _write_file(source, destination: Path) -> None:
    with open(destination, "wb") as target:
        shutil.copyfileobj(source, target)


async def store_upload(upload: UploadFile, upload_dir: Union[str, Path]) -> str:
    """
    Persist an uploaded file and return its generated name.

    Args:
        upload: The multipart file part
        upload_dir: Directory that receives the file

    Returns:
        str: The generated filename to store in the record
    """
    directory = Path(upload_dir)
    directory.mkdir(parents=True, exist_ok=True)

    filename = generate_upload_name(upload.filename)
    await upload.seek(0)
    await run_in_threadpool(_write_file, upload.file, directory / filename)

    logger.info(f"Stored upload {upload.filename!r} as {filename}")
    return filename
