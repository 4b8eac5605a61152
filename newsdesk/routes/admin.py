"""
Admin Routes
Login/logout and post management behind the admin session gate
"""

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from typing import Optional
import logging

from ..auth import (
    check_credentials,
    clear_session_cookie,
    create_session_token,
    require_admin,
    set_session_cookie,
)
from ..config import Settings
from ..core import LOGIN_ATTEMPTS, POSTS_CREATED, POSTS_DELETED, STORE_ERRORS
from ..deps import get_settings, get_store, get_uploads
from ..file_storage import UploadStorage, has_file
from ..schemas import NewPost
from ..store import PostStore, STORE_FAILURES
from ..views import format_date, render

logger = logging.getLogger(__name__)

router = APIRouter()

DASHBOARD_PATH = '/admin/dashboard'
INVALID_CREDENTIALS = 'Invalid Credentials.'


def redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=302)


# ==================== SESSION ====================

@router.get('/login', response_class=HTMLResponse)
async def login_form(request: Request):
    return render(request, 'login.html', {'error': None})


@router.post('/login')
async def login(
    request: Request,
    username: str = Form(''),
    password: str = Form(''),
    settings: Settings = Depends(get_settings),
):
    if not check_credentials(settings, username, password):
        LOGIN_ATTEMPTS.labels(outcome='failure').inc()
        logger.info({'msg': 'admin_login_failed'})
        return render(request, 'login.html', {'error': INVALID_CREDENTIALS})

    LOGIN_ATTEMPTS.labels(outcome='success').inc()
    logger.info({'msg': 'admin_login'})
    response = redirect(DASHBOARD_PATH)
    set_session_cookie(response, create_session_token(settings.session_secret))
    return response


@router.get('/logout')
async def logout():
    response = redirect('/')
    clear_session_cookie(response)
    return response


# ==================== POST MANAGEMENT ====================

@router.get('/dashboard', response_class=HTMLResponse, dependencies=[Depends(require_admin)])
async def dashboard(request: Request, store: PostStore = Depends(get_store)):
    try:
        posts = await store.find_all_sorted_by_date_desc()
    except STORE_FAILURES as e:
        logger.error({'msg': 'dashboard_load_failed', 'error': str(e)})
        STORE_ERRORS.labels(operation='list').inc()
        return PlainTextResponse('Error loading dashboard.', status_code=500)
    return render(request, 'admin.html', {'posts': posts, 'format': format_date})


@router.post('/add-post', dependencies=[Depends(require_admin)])
async def add_post(
    title: str = Form(''),
    content: str = Form(''),
    imageUrl: str = Form(''),
    imageFile: Optional[UploadFile] = File(None),
    store: PostStore = Depends(get_store),
    uploads: UploadStorage = Depends(get_uploads),
):
    if not title or not content:
        logger.warning({'msg': 'add_post_rejected', 'reason': 'missing title or content'})
        return PlainTextResponse('Title and Content are required.', status_code=400)

    # an uploaded file wins over a typed-in URL
    uploaded = None
    if has_file(imageFile):
        imageUrl = uploaded = await uploads.save(imageFile)
        logger.info({'msg': 'image_uploaded', 'url': imageUrl})

    try:
        post_id = await store.insert(NewPost(title=title, content=content, imageUrl=imageUrl))
    except STORE_FAILURES as e:
        logger.error({'msg': 'add_post_failed', 'error': str(e)})
        STORE_ERRORS.labels(operation='insert').inc()
        if uploaded:
            uploads.delete(uploaded)
        return PlainTextResponse('Error creating post.', status_code=500)

    POSTS_CREATED.inc()
    logger.info({'msg': 'post_created', 'id': post_id})
    return redirect(DASHBOARD_PATH)


@router.post('/delete-post/{post_id}', dependencies=[Depends(require_admin)])
async def delete_post(post_id: str, store: PostStore = Depends(get_store)):
    try:
        await store.delete_by_id(post_id)
    except STORE_FAILURES as e:
        logger.error({'msg': 'delete_post_failed', 'id': post_id, 'error': str(e)})
        STORE_ERRORS.labels(operation='delete').inc()
        return PlainTextResponse('Error deleting post.', status_code=500)

    POSTS_DELETED.inc()
    logger.info({'msg': 'post_deleted', 'id': post_id})
    return redirect(DASHBOARD_PATH)
