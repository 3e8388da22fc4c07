from typing import List, Optional
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from ..generator.comments import comment_styles, extension_of
from ..generator.config import parse_config, parse_config_text
from ..generator.renderer import TemplateRenderer
from ..utils import log
from ..utils.settings import APP_VERSION, Settings, SettingsError, load_settings, resolve_config_path

app = FastAPI(title="Autotouch API", version=APP_VERSION)


class RenderReq(BaseModel):
    filename: str
    config: Optional[str] = None


class RenderResp(BaseModel):
    filename: str
    extension: str
    content: str
    issues: List[str]


def current_settings() -> Settings:
    """Settings for one request; a broken settings file falls back to defaults."""
    try:
        settings = load_settings()
    except SettingsError as e:
        log.error(str(e))
        return Settings()
    if settings.debug:
        log.set_debug(True)
    return settings


@app.get("/comment-styles")
def list_comment_styles():
    return {"items": comment_styles(current_settings().comment_styles)}


@app.post("/render", response_model=RenderResp)
def render(req: RenderReq):
    if not req.filename.strip():
        raise HTTPException(status_code=400, detail="filename required")
    settings = current_settings()
    extension = extension_of(req.filename)
    if req.config is None:
        parsed = parse_config(resolve_config_path(settings=settings), extension)
    else:
        parsed = parse_config_text(req.config, extension)
    r = TemplateRenderer(parsed, comment_styles(settings.comment_styles))
    return RenderResp(
        filename=req.filename,
        extension=extension,
        content=log.display_text(r.render(extension, req.filename)),
        issues=[str(issue) for issue in parsed.issues],
    )
