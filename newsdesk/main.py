from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
import logging
from pythonjsonlogger import jsonlogger

from .auth import AdminRequired, LOGIN_PATH
from .config import Settings
from .core import init_metrics
from .file_storage import UploadStorage
from .routes import router
from .store import PostStore

logger = logging.getLogger('newsdesk')


def configure_logging(level: str = 'INFO'):
    """Attach a JSON handler to the package logger once."""
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = jsonlogger.JsonFormatter('%(asctime)s %(levelname)s %(name)s %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level.upper())


def create_app(settings: Settings = None, store: PostStore = None, uploads: UploadStorage = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    settings.warn_insecure_defaults()

    store = store or PostStore(settings.mongo_uri, settings.mongo_db)
    uploads = uploads or UploadStorage(settings.upload_dir)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # a failed connection is logged inside connect(); the app still serves
        await store.connect()
        init_metrics(settings.metrics_port)
        yield
        logger.info("Shutting down connections...")
        store.close()

    app = FastAPI(title="newsdesk", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store
    app.state.uploads = uploads

    app.include_router(router)
    app.mount(uploads.url_prefix, StaticFiles(directory=uploads.directory), name='uploads')

    @app.exception_handler(AdminRequired)
    async def admin_required(request: Request, exc: AdminRequired):
        return RedirectResponse(LOGIN_PATH, status_code=302)

    @app.get('/healthz')
    async def healthz():
        ok = app.state.store.available
        return {'status': 'ok' if ok else 'degraded', 'store': ok}

    @app.middleware('http')
    async def log_requests(request: Request, call_next):
        logger.info({'msg': 'request_start', 'method': request.method, 'path': request.url.path})
        response = await call_next(request)
        logger.info({'msg': 'request_end', 'status': response.status_code})
        return response

    return app
