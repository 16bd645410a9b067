## Request-scoped dependencies backed by objects built in the app lifespan
from typing import Iterator

from fastapi import Request
from sqlalchemy.orm import Session

from learnpath.agents.llm.base import LLMClient
from learnpath.mail import Mailer
from learnpath.settings import Settings


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_llm(request: Request) -> LLMClient:
    return request.app.state.llm


def get_mailer(request: Request) -> Mailer:
    return request.app.state.mailer
