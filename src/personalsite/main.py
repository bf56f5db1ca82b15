"""Welcome page FastAPI application."""

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from personalsite.config import settings
from personalsite.core.errors import ProfileDecodeError
from personalsite.core.profile import ProfileService

logger = logging.getLogger(__name__)

# Initialize app
app = FastAPI(
    title=settings.app_title,
    debug=settings.debug,
)

templates_path = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(templates_path))

profile_service = ProfileService(settings.public_dir)


@app.get("/", response_class=HTMLResponse)
async def welcome(request: Request):
    """Welcome page rendered from the profile, or without one."""
    try:
        me = profile_service.get_profile()
    except FileNotFoundError:
        logger.warning("Profile not found at %s", profile_service.path)
        me = None
    except ProfileDecodeError:
        logger.warning("Profile could not be decoded", exc_info=True)
        me = None

    return templates.TemplateResponse(
        request,
        "welcome.html",
        {"app_title": settings.app_title, "me": me},
    )
