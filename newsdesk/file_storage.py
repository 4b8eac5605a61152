"""
File Storage for Post Images
Writes uploaded images under the public upload directory and derives their URLs
"""

import os
import time
from contextlib import suppress
from urllib.parse import quote, unquote
import aiofiles
from fastapi import UploadFile

UPLOAD_URL_PREFIX = "/uploads"


class UploadStorage:
    """Stores uploaded post images on local disk"""

    def __init__(self, directory: str, url_prefix: str = UPLOAD_URL_PREFIX):
        self.directory = directory
        self.url_prefix = url_prefix.rstrip('/')
        os.makedirs(self.directory, exist_ok=True)

    @staticmethod
    def generate_filename(original_filename: str) -> str:
        """Prefix the original name with the current time in milliseconds"""
        name = os.path.basename(original_filename.replace('\\', '/'))
        return f"{int(time.time() * 1000)}-{name}"

    def get_file_path(self, filename: str) -> str:
        return os.path.join(self.directory, filename)

    def get_public_url(self, filename: str) -> str:
        return f"{self.url_prefix}/{quote(filename)}"

    async def save(self, file: UploadFile) -> str:
        """Save the upload and return its public URL"""
        filename = self.generate_filename(file.filename or "upload")
        file_path = self.get_file_path(filename)

        content = await file.read()
        async with aiofiles.open(file_path, 'wb') as f:
            await f.write(content)

        return self.get_public_url(filename)

    def delete(self, public_url: str) -> bool:
        """Remove a stored file given the URL save() returned"""
        filename = unquote(public_url.rsplit('/', 1)[-1])
        with suppress(OSError):
            os.remove(self.get_file_path(filename))
            return True
        return False


def has_file(file) -> bool:
    """Browsers submit an empty part with no filename when nothing was picked."""
    return file is not None and bool(getattr(file, 'filename', None))
