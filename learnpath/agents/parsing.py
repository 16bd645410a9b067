## Parse LLM text output into a validated RoadmapDocument
import json

from pydantic import ValidationError

from learnpath.agents.schemas import RoadmapDocument

JSON_FENCE = "```json"
FENCE = "```"


class RoadmapError(ValueError):
    pass


class MalformedPayload(RoadmapError):
    """The text is not valid JSON once the code fences are removed."""

    def __init__(self, error: json.JSONDecodeError):
        super().__init__(f"Roadmap payload is not valid JSON: {error}")
        self.error = error


class SchemaViolation(RoadmapError):
    """The JSON decoded but does not have the roadmap shape."""

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message)
        self.errors = errors or []


def strip_code_fences(text: str) -> str:
    """
    Remove a leading ```json (or bare ```) marker and a trailing ``` marker.
    Only the marker tokens are dropped; everything between them is kept as-is.
    """
    body = text.strip()
    if body.startswith(JSON_FENCE):
        body = body[len(JSON_FENCE):]
    elif body.startswith(FENCE):
        body = body[len(FENCE):]
    if body.endswith(FENCE):
        body = body[:-len(FENCE)]
    return body


def _describe(err: ValidationError) -> str:
    parts = []
    for e in err.errors():
        loc = ".".join(str(p) for p in e["loc"]) or "<root>"
        parts.append(f"{loc}: {e['msg']}")
    return "; ".join(parts)


def parse_roadmap(raw_text: str) -> RoadmapDocument:
    try:
        data = json.loads(strip_code_fences(raw_text))
    except json.JSONDecodeError as e:
        raise MalformedPayload(e) from e

    if not isinstance(data, dict):
        raise SchemaViolation(f"Roadmap payload must be a JSON object, got {type(data).__name__}")

    try:
        return RoadmapDocument.model_validate(data)
    except ValidationError as e:
        raise SchemaViolation(f"Invalid roadmap: {_describe(e)}", e.errors()) from e
