import io
import re

import pytest
from fastapi import UploadFile

from newsdesk.file_storage import UploadStorage, has_file


def test_generate_filename_prefixes_millis():
    name = UploadStorage.generate_filename('cat.png')
    assert re.fullmatch(r'\d{13}-cat\.png', name)


def test_generate_filename_drops_directories():
    assert UploadStorage.generate_filename('../../etc/passwd').endswith('-passwd')
    assert UploadStorage.generate_filename('C:\\photos\\dog.jpg').endswith('-dog.jpg')


def test_directory_is_created(tmp_path):
    target = tmp_path / 'public' / 'uploads'
    UploadStorage(str(target))
    assert target.is_dir()


@pytest.mark.asyncio
async def test_save_writes_file_and_returns_public_url(tmp_path):
    storage = UploadStorage(str(tmp_path))
    upload = UploadFile(file=io.BytesIO(b'image-bytes'), filename='cat.png')

    url = await storage.save(upload)

    assert url.startswith('/uploads/')
    assert url.endswith('-cat.png')
    filename = url.rsplit('/', 1)[1]
    assert (tmp_path / filename).read_bytes() == b'image-bytes'


def test_has_file():
    assert not has_file(None)
    assert not has_file(UploadFile(file=io.BytesIO(b''), filename=''))
    assert has_file(UploadFile(file=io.BytesIO(b'x'), filename='a.png'))


def test_public_url_escapes_reserved_characters(tmp_path):
    storage = UploadStorage(str(tmp_path))
    assert storage.get_public_url('1-issue #4.png') == '/uploads/1-issue%20%234.png'
    assert storage.get_public_url('1-what?.png') == '/uploads/1-what%3F.png'


@pytest.mark.asyncio
async def test_delete_removes_saved_file(tmp_path):
    storage = UploadStorage(str(tmp_path))
    url = await storage.save(UploadFile(file=io.BytesIO(b'x'), filename='issue #4.png'))

    assert storage.delete(url)
    assert list(tmp_path.iterdir()) == []
    assert not storage.delete(url)
