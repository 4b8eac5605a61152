from datetime import datetime
from pathlib import Path
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent / 'templates'

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def format_date(value: datetime) -> str:
    """en-GB style timestamp, e.g. 18/10/2026, 09:05:00"""
    return value.strftime('%d/%m/%Y, %H:%M:%S')


def render(request, name: str, context: dict = None):
    return templates.TemplateResponse(request, name, context or {})
