import httpx
from google import genai
from google.genai import errors as genai_errors

from .base import LLMClient, LLMError

class GeminiClient(LLMClient):
    def __init__(self, * , api_key: str, model: str, timeout: float = 120):
        # http_options timeout is in milliseconds
        self.client = genai.Client(api_key=api_key, http_options={"timeout": int(timeout * 1000)})
        self.model = model

    def generate_text(self, *, system: str, user: str, temperature: float = 0.2) -> str:
        # httpx connect/timeout errors escape the SDK once its own retries are spent
        try:
            resp = self.client.models.generate_content(
                model=self.model,
                contents=user,
                config={
                    "system_instruction": system,
                    "temperature": temperature,
                },
            )
        except (genai_errors.APIError, httpx.HTTPError) as e:
            raise LLMError(f"Gemini request failed: {e}") from e
        return (getattr(resp, "text", None) or "").strip()
