from learnpath.settings import Settings
from learnpath.agents.llm.base import LLMClient
from learnpath.agents.llm.gemini import GeminiClient
from learnpath.agents.llm.ollama import OllamaOpenAIClient
from learnpath.agents.llm.groq import GroqOpenAIClient

def build_llm_client(settings: Settings) -> LLMClient:
    provider = settings.llm_provider.lower()

    if provider == "groq":
        return GroqOpenAIClient(
            api_key=settings.groq_api_key,
            base_url=settings.groq_base_url,
            model=settings.groq_model,
            timeout=settings.llm_timeout_seconds,
        )

    if provider == "ollama":
        return OllamaOpenAIClient(
            base_url = settings.ollama_base_url,
            model = settings.ollama_model,
            timeout = settings.llm_timeout_seconds,
        )

    if provider == "gemini":
        return GeminiClient(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            timeout=settings.llm_timeout_seconds,
        )

    raise ValueError(f"Unknown LLM provider: {settings.llm_provider!r}")
