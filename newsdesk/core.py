from prometheus_client import Counter, start_http_server
import logging

logger = logging.getLogger(__name__)

POSTS_CREATED = Counter('newsdesk_posts_created_total', 'News posts created')
POSTS_DELETED = Counter('newsdesk_posts_deleted_total', 'Delete requests handled')
LOGIN_ATTEMPTS = Counter('newsdesk_login_attempts_total', 'Admin login attempts', ['outcome'])
STORE_ERRORS = Counter('newsdesk_store_errors_total', 'Failed document store calls', ['operation'])


def init_metrics(port: int = 0):
    """Start the Prometheus exporter. Port 0 leaves it disabled."""
    if not port:
        return
    try:
        start_http_server(port)
        logger.info(f"Prometheus metrics server started on port {port}")
    except Exception as e:
        logger.warning(f'Prometheus start failed: {e}')
