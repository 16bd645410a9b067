## Pydantic Schemas for the roadmap document returned by the LLM
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class Resource(BaseModel):
    """Carried through to the caller as-is; nothing here is rendered or checked."""
    model_config = ConfigDict(frozen=True)

    name: str = ""
    url: str = ""
    type: str = ""  # prompt asks for documentation | video | tutorial | course | github
    duration: str = ""


class Stage(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str = ""
    duration: str = ""
    concepts: Tuple[str, ...]
    resources: Tuple[Resource, ...] = ()


class RoadmapDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    prerequisites: Tuple[str, ...] = ()
    stages: Tuple[Stage, ...]
