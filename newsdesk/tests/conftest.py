from datetime import datetime, timezone

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

from newsdesk.config import Settings
from newsdesk.file_storage import UploadStorage
from newsdesk.main import create_app
from newsdesk.schemas import NewPost, Post
from newsdesk.store import StoreUnavailable, parse_id

ADMIN_USERNAME = 'editor'
ADMIN_PASSWORD = 'hunter2'


class FakePostStore:
    """In-memory stand-in for PostStore, injected through create_app."""

    def __init__(self):
        self.docs = []
        self.available = True
        self.fail = False

    async def connect(self):
        pass

    def close(self):
        pass

    def _check(self):
        if self.fail:
            raise StoreUnavailable('document store is not connected')

    async def insert(self, post: NewPost) -> str:
        self._check()
        doc = Post(id=str(ObjectId()), date=datetime.now(timezone.utc), **post.model_dump())
        self.docs.append(doc)
        return doc.id

    async def find_all_sorted_by_date_desc(self):
        self._check()
        return sorted(self.docs, key=lambda p: (p.date, p.id), reverse=True)

    async def delete_by_id(self, post_id: str) -> None:
        self._check()
        if parse_id(post_id) is None:
            return
        self.docs = [p for p in self.docs if p.id != post_id]


@pytest.fixture
def settings(tmp_path):
    return Settings(
        session_secret='test-secret',
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
        upload_dir=str(tmp_path / 'uploads'),
    )


@pytest.fixture
def store():
    return FakePostStore()


@pytest.fixture
def app(settings, store):
    return create_app(settings, store=store, uploads=UploadStorage(settings.upload_dir))


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url='http://test') as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_client(client):
    res = await client.post('/admin/login', data={'username': ADMIN_USERNAME, 'password': ADMIN_PASSWORD})
    assert res.status_code == 302, res.text
    return client
