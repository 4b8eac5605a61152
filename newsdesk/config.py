import os
import logging
from dotenv import load_dotenv
from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_SESSION_SECRET = 'devsecret'


class Settings(BaseModel):
    """Runtime configuration, sourced from the environment (and `.env` when present)."""
    port: int = 3000
    mongo_uri: str = 'mongodb://localhost:27017'
    mongo_db: str = 'newsdesk'
    session_secret: str = DEFAULT_SESSION_SECRET
    admin_username: str = ''
    admin_password: str = ''
    upload_dir: str = os.path.join('public', 'uploads')
    log_level: str = 'INFO'
    metrics_port: int = 0

    @classmethod
    def from_env(cls) -> 'Settings':
        load_dotenv()
        settings = cls(
            port=int(os.getenv('PORT', '3000')),
            mongo_uri=os.getenv('MONGO_URI', 'mongodb://localhost:27017'),
            mongo_db=os.getenv('MONGO_DB', 'newsdesk'),
            session_secret=os.getenv('SESSION_SECRET') or DEFAULT_SESSION_SECRET,
            admin_username=os.getenv('ADMIN_USERNAME', ''),
            admin_password=os.getenv('ADMIN_PASSWORD', ''),
            upload_dir=os.getenv('UPLOAD_DIR', os.path.join('public', 'uploads')),
            log_level=os.getenv('LOG_LEVEL', 'INFO'),
            metrics_port=int(os.getenv('METRICS_PORT', '0')),
        )
        return settings

    def warn_insecure_defaults(self):
        """Log what is left at an unsafe or disabling default. Call once logging is configured."""
        if self.session_secret == DEFAULT_SESSION_SECRET:
            logger.warning('SESSION_SECRET is not set; using the development default')
        if not (self.admin_username and self.admin_password):
            logger.warning('ADMIN_USERNAME/ADMIN_PASSWORD not set; admin login is disabled')
