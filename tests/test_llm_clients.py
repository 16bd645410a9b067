import json
from types import SimpleNamespace

import httpx
import pytest

from learnpath.agents.llm.base import LLMError
from learnpath.agents.llm.client import build_llm_client
from learnpath.agents.llm.gemini import GeminiClient
from learnpath.agents.llm.groq import GroqOpenAIClient
from learnpath.agents.llm.ollama import OllamaOpenAIClient
from learnpath.settings import Settings


def _ollama(handler):
    return OllamaOpenAIClient(
        base_url="http://ollama.test/v1/", model="llama3.1", transport=httpx.MockTransport(handler),
    )


def test_ollama_posts_openai_chat_payload():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"choices": [{"message": {"content": "hello"}}]})

    out = _ollama(handler).generate_text(system="sys", user="hi", temperature=0.3)

    assert out == "hello"
    assert seen["url"] == "http://ollama.test/v1/chat/completions"
    assert seen["body"]["model"] == "llama3.1"
    assert seen["body"]["temperature"] == 0.3
    assert seen["body"]["messages"] == [
        {"role": "system", "content": "sys"},
        {"role": "user", "content": "hi"},
    ]


def test_ollama_http_error_becomes_llm_error():
    client = _ollama(lambda request: httpx.Response(500, text="boom"))
    with pytest.raises(LLMError):
        client.generate_text(system="s", user="u")


def test_ollama_unexpected_shape():
    client = _ollama(lambda request: httpx.Response(200, json={"choices": []}))
    with pytest.raises(LLMError):
        client.generate_text(system="s", user="u")


def test_build_llm_client_selects_provider():
    ollama = build_llm_client(Settings(_env_file=None, llm_provider="ollama", ollama_model="m"))
    assert isinstance(ollama, OllamaOpenAIClient)
    assert ollama.model == "m"

    groq = build_llm_client(Settings(_env_file=None, llm_provider="GROQ", groq_api_key="k"))
    assert isinstance(groq, GroqOpenAIClient)


def test_build_llm_client_unknown_provider():
    with pytest.raises(ValueError):
        build_llm_client(Settings(_env_file=None, llm_provider="bard"))


def _gemini(generate_content):
    client = GeminiClient(api_key="k", model="gemini-test")
    client.client = SimpleNamespace(models=SimpleNamespace(generate_content=generate_content))
    return client


def test_gemini_maps_system_and_temperature():
    seen = {}

    def generate_content(**kwargs):
        seen.update(kwargs)
        return SimpleNamespace(text="  roadmap json \n")

    out = _gemini(generate_content).generate_text(system="sys", user="hi", temperature=0.7)

    assert out == "roadmap json"
    assert seen["model"] == "gemini-test"
    assert seen["contents"] == "hi"
    assert seen["config"] == {"system_instruction": "sys", "temperature": 0.7}


def test_gemini_empty_text():
    assert _gemini(lambda **kwargs: SimpleNamespace(text=None)).generate_text(system="s", user="u") == ""


@pytest.mark.parametrize("error", [
    httpx.ConnectError("unreachable"),
    httpx.ReadTimeout("too slow"),
])
def test_gemini_transport_error_becomes_llm_error(error):
    def generate_content(**kwargs):
        raise error

    with pytest.raises(LLMError) as exc_info:
        _gemini(generate_content).generate_text(system="s", user="u")
    assert exc_info.value.__cause__ is error


def _groq(handler):
    return GroqOpenAIClient(
        api_key="k",
        base_url="http://groq.test/openai/v1",
        model="llama-test",
        max_retries=0,
        http_client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


def test_groq_generate_text():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={
            "id": "chatcmpl-1",
            "object": "chat.completion",
            "created": 0,
            "model": "llama-test",
            "choices": [{
                "index": 0,
                "message": {"role": "assistant", "content": "  hello \n"},
                "finish_reason": "stop",
            }],
        })

    out = _groq(handler).generate_text(system="sys", user="hi", temperature=0.1)

    assert out == "hello"
    assert seen["url"] == "http://groq.test/openai/v1/chat/completions"
    assert seen["body"]["model"] == "llama-test"
    assert seen["body"]["temperature"] == 0.1
    assert seen["body"]["messages"][0] == {"role": "system", "content": "sys"}


def test_groq_api_error_becomes_llm_error():
    client = _groq(lambda request: httpx.Response(401, json={"error": {"message": "bad key"}}))
    with pytest.raises(LLMError):
        client.generate_text(system="s", user="u")


def test_build_llm_client_gemini():
    client = build_llm_client(Settings(_env_file=None, llm_provider="gemini", gemini_api_key="k", gemini_model="g"))
    assert isinstance(client, GeminiClient)
    assert client.model == "g"
