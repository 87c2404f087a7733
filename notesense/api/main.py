"""FastAPI application hosting the notes detector."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncIterator, Callable

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from pydantic import ValidationError

from .. import __version__
from ..config import Config, setup_logging
from ..detector import SemanticDetector
from ..issues import (
    CreateBodyIssuesRequest,
    EmptyIssuesError,
    UnknownBodyPartError,
    build_create_request,
    expand_raw_issues,
)
from ..schemas import DetectionResult, Vocabulary
from ..vocabulary import vocabulary
from .models import (
    DetectRequest,
    HealthResponse,
    IssuePreview,
    NormalizeRequest,
    PreviewRequest,
    PreviewResponse,
)

log = logging.getLogger(__name__)

DEFAULT_MEMOIZE_SIZE = 256


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    detector: SemanticDetector = app.state.detector
    log.info("notesense API started (max_text_length=%d)", detector.max_text_length)
    yield
    log.info("notesense API shutting down.")


def create_app(config: Config | None = None) -> FastAPI:
    config = config or Config.load()
    setup_logging(config)

    detection_config = config.section("detection")
    api_config = config.section("api")

    detector = SemanticDetector.from_config(detection_config)
    memoize_size = detection_config.get("memoize_size", DEFAULT_MEMOIZE_SIZE)
    if not isinstance(memoize_size, int) or memoize_size <= 0:
        memoize_size = DEFAULT_MEMOIZE_SIZE

    app = FastAPI(
        title=api_config.get("title", "notesense API"),
        version=__version__,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_config.get("cors_origins", ["*"]),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.cfg = config
    app.state.detector = detector
    # Detection is pure, so caching on the text alone is safe.
    app.state.detect = lru_cache(maxsize=memoize_size)(detector.detect)
    _register_routes(app)
    return app


def get_detect(request: Request) -> Callable[[str], DetectionResult]:
    detector: SemanticDetector = request.app.state.detector
    cached = request.app.state.detect

    def _detect(text: str) -> DetectionResult:
        if not detector.accepts(text):
            log.warning("Rejected note of %d characters (limit %d)", len(text), detector.max_text_length)
            raise HTTPException(
                status_code=413,
                detail=f"Text exceeds {detector.max_text_length} characters",
            )
        return cached(text)

    return _detect


def _register_routes(app: FastAPI) -> None:
    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse()

    @app.post("/detect", response_model=DetectionResult)
    async def detect_text(
        payload: DetectRequest,
        detect: Callable[[str], DetectionResult] = Depends(get_detect),
    ) -> DetectionResult:
        return detect(payload.text)

    @app.get("/body-issues/vocabulary", response_model=Vocabulary)
    async def body_issue_vocabulary() -> Vocabulary:
        return vocabulary()

    @app.post("/body-issues/preview", response_model=PreviewResponse)
    async def preview_body_issues(
        payload: PreviewRequest,
        detect: Callable[[str], DetectionResult] = Depends(get_detect),
    ) -> PreviewResponse:
        result = detect(payload.text)
        try:
            request = build_create_request(payload.date, result.issues, session_id=payload.session_id)
        except EmptyIssuesError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except ValidationError as exc:
            raise HTTPException(status_code=422, detail=_error_detail(exc)) from exc
        previews = [
            IssuePreview(
                body_part=item.body_part,
                symptom=item.symptom,
                severity=item.severity,
                raw_text=item.raw_text,
                session_id=item.session_id,
            )
            for item in request.issues
        ]
        return PreviewResponse(date=request.date, issues=previews, count=len(previews))

    @app.post("/body-issues/normalize", response_model=CreateBodyIssuesRequest)
    async def normalize_body_issues(payload: NormalizeRequest) -> CreateBodyIssuesRequest:
        try:
            inputs = expand_raw_issues(payload.issues)
            return CreateBodyIssuesRequest(date=payload.date, issues=inputs)
        except UnknownBodyPartError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except ValidationError as exc:
            raise HTTPException(status_code=422, detail=_error_detail(exc)) from exc


def _error_detail(exc: ValidationError) -> list:
    return exc.errors(include_url=False, include_context=False, include_input=False)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(create_app(), host="127.0.0.1", port=8011, log_level="info")
