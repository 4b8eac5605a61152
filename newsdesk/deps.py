from fastapi import Request

from .config import Settings
from .file_storage import UploadStorage
from .store import PostStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> PostStore:
    return request.app.state.store


def get_uploads(request: Request) -> UploadStorage:
    return request.app.state.uploads
