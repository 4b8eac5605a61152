import uvicorn

from .config import Settings
from .main import create_app


def main():
    settings = Settings.from_env()
    app = create_app(settings)
    uvicorn.run(app, host='0.0.0.0', port=settings.port, log_level=settings.log_level.lower())


if __name__ == '__main__':
    main()
