## Main application entry point
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from learnpath.agents.llm.base import LLMClient, LLMError
from learnpath.agents.llm.client import build_llm_client
from learnpath.agents.parsing import MalformedPayload, RoadmapError
from learnpath.auth.deps import NotAuthenticated
from learnpath.auth.routes import router as auth_router
from learnpath.db import models  # noqa: F401  registers every table on Base.metadata
from learnpath.db.base import Base
from learnpath.db.session import build_engine, build_session_factory
from learnpath.events.routes import router as events_router
from learnpath.mail import Mailer, build_mailer
from learnpath.quizzes.routes import router as quizzes_router
from learnpath.roadmaps.routes import router as roadmaps_router
from learnpath.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    llm_client: LLMClient | None = None,
    mailer: Mailer | None = None,
) -> FastAPI:
    """
    Build the API. Collaborators not passed in are constructed from settings
    when the app starts and torn down when it stops.
    """
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(settings.database_url)
        Base.metadata.create_all(engine)
        app.state.settings = settings
        app.state.session_factory = build_session_factory(engine)
        app.state.llm = llm_client if llm_client is not None else build_llm_client(settings)
        app.state.mailer = mailer if mailer is not None else build_mailer(settings)
        logger.info("Started (env=%s, llm_provider=%s)", settings.env, settings.llm_provider)
        try:
            yield
        finally:
            engine.dispose()
            logger.info("Stopped")

    app = FastAPI(title="learnpath", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    @app.get("/", response_class=PlainTextResponse)
    async def home():
        return "learnpath API"

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.exception_handler(NotAuthenticated)
    async def not_authenticated_handler(request: Request, exc: NotAuthenticated):
        return JSONResponse({"detail": "Not authenticated"}, status_code=401)

    @app.exception_handler(RoadmapError)
    async def roadmap_error_handler(request: Request, exc: RoadmapError):
        kind = "malformed" if isinstance(exc, MalformedPayload) else "schema"
        logger.warning("Unusable roadmap from model (%s) on %s: %s", kind, request.url.path, exc)
        return JSONResponse(
            {"error": "Failed to generate roadmap", "details": str(exc)},
            status_code=502,
        )

    @app.exception_handler(LLMError)
    async def llm_error_handler(request: Request, exc: LLMError):
        logger.error("LLM call failed on %s: %s", request.url.path, exc)
        return JSONResponse(
            {"error": "AI provider request failed", "details": str(exc)},
            status_code=502,
        )

    app.include_router(auth_router)
    app.include_router(quizzes_router)
    app.include_router(events_router)
    app.include_router(roadmaps_router)
    return app


app = create_app()
