from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
import logging

from ..core import STORE_ERRORS
from ..deps import get_store
from ..store import PostStore, STORE_FAILURES
from ..views import render

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get('/', response_class=HTMLResponse)
async def index(request: Request, store: PostStore = Depends(get_store)):
    try:
        posts = await store.find_all_sorted_by_date_desc()
    except STORE_FAILURES as e:
        logger.error({'msg': 'list_posts_failed', 'error': str(e)})
        STORE_ERRORS.labels(operation='list').inc()
        return PlainTextResponse('Error loading posts.', status_code=500)
    return render(request, 'index.html', {'posts': posts})
