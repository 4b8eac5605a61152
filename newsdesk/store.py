"""
Document store adapter for news posts.
Wraps the single MongoDB collection that holds Post documents.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import DESCENDING
from pymongo.errors import ConfigurationError, PyMongoError

from .schemas import NewPost, Post

logger = logging.getLogger(__name__)

COLLECTION_NAME = 'newsposts'


class StoreUnavailable(Exception):
    """Raised when an operation runs without a usable database client."""


# everything a handler turns into a generic 500
STORE_FAILURES = (StoreUnavailable, PyMongoError)


class PostStore:
    def __init__(self, uri: str, database: str, collection_name: str = COLLECTION_NAME):
        self.uri = uri
        self.database = database
        self.collection_name = collection_name
        self.client = None
        self.collection = None

    @property
    def available(self) -> bool:
        return self.collection is not None

    async def connect(self) -> None:
        """Open the client once and ping it. Failures are logged, never retried."""
        try:
            self.client = AsyncIOMotorClient(
                self.uri,
                tz_aware=True,
                serverSelectionTimeoutMS=5000,
                connectTimeoutMS=5000,
                socketTimeoutMS=5000,
            )
        except (ConfigurationError, ValueError) as e:
            logger.error(f'MongoDB connection error: {e}')
            self.client = None
            return

        self.collection = self.client[self.database][self.collection_name]

        try:
            await self.client.admin.command('ping')
            logger.info('MongoDB connected successfully')
        except Exception as e:
            # the client stays; each request will fail on its own until the server comes back
            logger.error(f'MongoDB connection error: {e}')

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
            logger.info('MongoDB connection closed')
        self.client = None
        self.collection = None

    def _require_collection(self):
        if self.collection is None:
            raise StoreUnavailable('document store is not connected')
        return self.collection

    async def insert(self, post: NewPost) -> str:
        collection = self._require_collection()
        doc = {
            'title': post.title,
            'imageUrl': post.imageUrl,
            'content': post.content,
            'date': datetime.now(timezone.utc),
        }
        result = await collection.insert_one(doc)
        return str(result.inserted_id)

    async def find_all_sorted_by_date_desc(self) -> List[Post]:
        collection = self._require_collection()
        cursor = collection.find().sort([('date', DESCENDING), ('_id', DESCENDING)])
        docs = await cursor.to_list(length=None)
        return [to_post(d) for d in docs]

    async def delete_by_id(self, post_id: str) -> None:
        """Delete one post. Unknown or malformed ids are a no-op."""
        collection = self._require_collection()
        oid = parse_id(post_id)
        if oid is None:
            return
        await collection.delete_one({'_id': oid})


def parse_id(post_id: str) -> Optional[ObjectId]:
    if not ObjectId.is_valid(post_id):
        return None
    return ObjectId(post_id)


def to_post(doc: dict) -> Post:
    return Post(
        id=str(doc['_id']),
        title=doc.get('title') or '',
        imageUrl=doc.get('imageUrl') or '',
        content=doc.get('content') or '',
        date=doc['date'],
    )
