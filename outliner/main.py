# outliner/main.py
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Form, HTTPException
from pydantic import ValidationError

from .backend_client import BackendError, create_presentation, update_presentation
from .config import (
    DEFAULT_DETAIL_LEVEL,
    DEFAULT_LANGUAGE,
    DEFAULT_SLIDE_COUNT,
    DEFAULT_STYLE,
    DEFAULT_TEMPLATE,
    MAX_SLIDES,
)
from .logging_config import setup_logging
from .outline import build_outline, parse_outline, resize_outline, sanitize
from .schemas import OutlineResponse, ResizeRequest, SectionsRequest, SectionsResponse
from .session import OutlineSession
from .topic import normalize_topic

setup_logging()

app = FastAPI(title="outliner", version="1.0.0", docs_url="/docs")


@app.get("/healthz")
def healthz():
    return {"ok": True, "ts": datetime.now(timezone.utc).isoformat()}


@app.post("/api/outline", response_model=OutlineResponse)
def generate_outline(
    prompt: str = Form("", description="Free-form description of the presentation"),
    slides: int = Form(DEFAULT_SLIDE_COUNT, le=MAX_SLIDES, description="Number of sections to produce"),
    language: str = Form(DEFAULT_LANGUAGE, description="Language code or name, e.g. 'en' or 'Español'"),
):
    try:
        sections = build_outline(prompt, slides, language)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return OutlineResponse(topic=normalize_topic(prompt, language), sections=sections)


@app.post("/api/outline/sanitize", response_model=SectionsResponse)
def sanitize_outline(body: SectionsRequest):
    return SectionsResponse(sections=sanitize(body.sections, body.language))


@app.post("/api/outline/resize", response_model=SectionsResponse)
def resize(body: ResizeRequest):
    return SectionsResponse(sections=resize_outline(sanitize(body.sections, body.language), body.slide_count, body.language))


@app.post("/api/presentations")
def save_presentation(
    prompt: str = Form("", description="Prompt the outline was generated from"),
    title: Optional[str] = Form(None, description="Presentation title (defaults to the prompt)"),
    slides: int = Form(DEFAULT_SLIDE_COUNT, le=MAX_SLIDES),
    language: str = Form(DEFAULT_LANGUAGE),
    style: str = Form(DEFAULT_STYLE),
    detail_level: str = Form(DEFAULT_DETAIL_LEVEL),
    template: str = Form(DEFAULT_TEMPLATE),
    outline: Optional[str] = Form(None, description="Hand-edited outline as a JSON list of strings"),
    presentation_id: Optional[str] = Form(None, description="Update this presentation instead of creating one"),
    token: Optional[str] = Form(None, description="Backend bearer token (never stored)"),
):
    try:
        session = OutlineSession(prompt=prompt, slide_count=slides, language=language)
        if outline:
            session.load_outline(parse_outline(outline, session.language))
            session.set_slide_count(slides)
        payload = session.to_payload(title=title, template=template, style=style, detail_level=detail_level)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False, include_input=False))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        if presentation_id:
            return update_presentation(presentation_id, payload, token=token)
        return create_presentation(payload, token=token)
    except BackendError as e:
        raise HTTPException(status_code=502, detail=str(e))
