import json

import pytest

from learnpath.agents.llm.base import LLMError

ROADMAP = {
    "prerequisites": ["Algebra"],
    "stages": [
        {
            "name": "Basics",
            "description": "Syntax and types.",
            "duration": "1 week",
            "concepts": ["Vars", "Loops"],
            "resources": [
                {"name": "Tutorial", "url": "https://docs.python.org/3/tutorial/", "type": "tutorial", "duration": "3h"},
            ],
        }
    ],
}


@pytest.mark.parametrize("path", ["/get-roadmap", "/pictoflow"])
def test_roadmap_endpoints(client, llm, path):
    llm.replies.append("```json\n" + json.dumps(ROADMAP) + "\n```")

    r = client.post(path, json={"topic": "Python"})

    assert r.status_code == 200, r.text
    data = r.json()
    assert data["success"] is True
    assert data["roadmap"]["prerequisites"] == ["Algebra"]
    assert data["roadmap"]["stages"][0]["resources"][0]["type"] == "tutorial"
    assert data["mermaidDiagram"].startswith("graph TD\n")
    assert "    Stage0 --> Concept0_1;" in data["mermaidDiagram"]
    assert "Python" in llm.calls[0]["user"]


def test_roadmap_requires_topic(client, llm):
    assert client.post("/get-roadmap", json={}).status_code == 422
    assert client.post("/get-roadmap", json={"topic": ""}).status_code == 422
    assert llm.calls == []


def test_malformed_model_output(client, llm):
    llm.replies.append("Sorry, I can't help with that.")
    r = client.post("/get-roadmap", json={"topic": "Python"})
    assert r.status_code == 502
    assert r.json()["error"] == "Failed to generate roadmap"
    assert "not valid JSON" in r.json()["details"]


def test_schema_violation_in_model_output(client, llm):
    llm.replies.append('{"prerequisites": []}')
    r = client.post("/pictoflow", json={"topic": "Python"})
    assert r.status_code == 502
    assert "stages" in r.json()["details"]


def test_provider_failure(client, llm):
    llm.replies.append(LLMError("quota exceeded"))
    r = client.post("/get-roadmap", json={"topic": "Python"})
    assert r.status_code == 502
    assert r.json() == {"error": "AI provider request failed", "details": "quota exceeded"}


def test_report_default_profile(client, llm):
    llm.replies.append("## Overview\nYou did well.")
    r = client.post("/get-report")
    assert r.status_code == 200
    assert r.json() == {"success": True, "report": "## Overview\nYou did well."}
    prompt = llm.calls[0]["user"]
    assert "14/20" in prompt
    assert "10 minutes per week" in prompt


def test_report_custom_profile(client, llm):
    llm.replies.append("plan")
    r = client.post("/get-report", json={
        "quizScore": 18, "quizTotal": 25, "learningStyle": "Auditory", "weeklyMinutes": 90,
    })
    assert r.status_code == 200
    prompt = llm.calls[0]["user"]
    assert "18/25" in prompt
    assert "Auditory" in prompt
    assert "90 minutes per week" in prompt


def test_home_and_health(client):
    assert client.get("/").text == "learnpath API"
    assert client.get("/health").json() == {"status": "ok"}


def test_unlisted_resource_type_still_renders(client, llm):
    payload = {
        "stages": [
            {
                "name": "Basics",
                "concepts": ["Vars"],
                "resources": [{"name": "A blog post", "url": "https://example.com/post", "type": "blog"}],
            }
        ]
    }
    llm.replies.append(json.dumps(payload))

    r = client.post("/get-roadmap", json={"topic": "Python"})

    assert r.status_code == 200, r.text
    assert r.json()["roadmap"]["stages"][0]["resources"][0]["type"] == "blog"


def test_time_budget_reaches_prompt(client, llm):
    llm.replies.extend(['{"stages": []}', '{"stages": []}'])

    assert client.post("/get-roadmap", json={"topic": "Python", "timeBudget": "3 hours"}).status_code == 200
    assert client.post("/pictoflow", json={"topic": "Python"}).status_code == 200

    assert "learn this in 3 hours" in llm.calls[0]["user"]
    assert "learn this in" not in llm.calls[1]["user"]
