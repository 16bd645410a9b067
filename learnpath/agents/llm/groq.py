import httpx
from openai import OpenAI, OpenAIError
from .base import LLMClient, LLMError

class GroqOpenAIClient(LLMClient):
    def __init__(self, * , api_key: str, base_url: str, model: str, timeout: float = 120,
    max_retries: int = 2, http_client: httpx.Client | None = None):
        self.client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout,
        max_retries=max_retries, http_client=http_client)
        self.model = model

    def generate_text(self, *, system: str, user: str, temperature: float = 0.2) -> str:
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                temperature=temperature,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
            )
        except OpenAIError as e:
            raise LLMError(f"Groq request failed: {e}") from e
        return (resp.choices[0].message.content or "").strip()
