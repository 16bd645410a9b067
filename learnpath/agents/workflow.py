# learnpath/agents/workflow.py
import logging
from dataclasses import dataclass

from learnpath.agents.diagram import render_mermaid
from learnpath.agents.llm.base import LLMClient
from learnpath.agents.parsing import parse_roadmap
from learnpath.agents.schemas import RoadmapDocument

logger = logging.getLogger(__name__)


SYSTEM_ROADMAP = """You are a curriculum planner.

You must return ONLY valid JSON matching the requested structure.
No commentary before or after the JSON.
"""

SYSTEM_REPORT = """You are an AI assistant that generates personalized learning pathways
for students based on their quiz performance, learning preferences, and
available study time.
"""


def build_roadmap_prompt(topic: str, time_budget: str | None = None) -> str:
    budget_rule = ""
    if time_budget:
        budget_rule = f"\n- The learner wants to learn this in {time_budget}; size stages and resources to fit."
    return f"""
Create a detailed learning roadmap for {topic}. Include:

1. Clear learning path with main concepts
2. Highly specific, working resource links (IMPORTANT: Only include:)
   - Official documentation links
   - Specific YouTube video links (full URLs)
   - GitHub repositories with tutorials/examples
   - Free online course links (Coursera, edX, etc.)
   - Popular blog tutorials from well-known platforms
3. Realistic time estimates for each section
4. Essential prerequisites

Format the response as a JSON object with this structure:
{{
  "prerequisites": ["string"],
  "stages": [
    {{
      "name": "string",
      "description": "string",
      "duration": "string",
      "concepts": ["string"],
      "resources": [
        {{
          "name": "string",
          "url": "string",
          "type": "documentation | video | tutorial | course | github",
          "duration": "string"
        }}
      ]
    }}
  ]
}}

Rules:
- Ensure all URLs are complete and from reputable sources.
- Include a mix of resource types for each stage.
- 3-5 key concepts per stage, focused and specific.
- Order stages from basic to advanced.
- Include 3-5 high-quality resources per stage with descriptive names.
- Provide realistic time estimates.{budget_rule}
""".strip()


@dataclass(frozen=True)
class StudentProfile:
    quiz_score: int = 14
    quiz_total: int = 20
    learning_style: str = "Visual, prefers video-based learning"
    weekly_minutes: int = 10


def build_report_prompt(profile: StudentProfile) -> str:
    return f"""
*Student Profile:*
- *Quiz Score*: {profile.quiz_score}/{profile.quiz_total}
- *Learning Style*: {profile.learning_style}
- *Available Study Time*: {profile.weekly_minutes} minutes per week

*Task:*
1. Based on the quiz score, identify areas where the student is strong and where they need improvement.
2. Recommend a *personalized learning pathway* with topics arranged in an *optimal sequence* to strengthen weak areas and build upon existing knowledge.
3. Suggest resources tailored to the student's learning style.
4. Break down the pathway into *weekly learning plans* that fit within {profile.weekly_minutes} minutes of study per week.
5. Keep the pathway *engaging, structured, and goal-oriented* to maximize efficiency.

*Output Format:*
- *Overview of Strengths & Weaknesses*
- *Week-by-Week Learning Plan* (with specific topics and short explanations)
- *Recommended Resources* (YouTube, Coursera, Udemy, etc.)
- *Final Milestone & Expected Learning Outcome*

Generate the response in a *clear, structured format*, ensuring the plan is achievable within the given time constraints.
""".strip()


def generate_roadmap(llm: LLMClient, topic: str, time_budget: str | None = None) -> tuple[RoadmapDocument, str]:
    """
    Ask the model for a roadmap on `topic`, validate it and render the diagram.

    Raises LLMError when the provider call fails and RoadmapError when the
    model output cannot be turned into a RoadmapDocument. No retries.
    """
    raw_text = llm.generate_text(system=SYSTEM_ROADMAP, user=build_roadmap_prompt(topic, time_budget))
    document = parse_roadmap(raw_text)
    logger.info("Roadmap for %r: %d prerequisites, %d stages",
    topic, len(document.prerequisites), len(document.stages))
    return document, render_mermaid(document)


def generate_report(llm: LLMClient, profile: StudentProfile) -> str:
    return llm.generate_text(system=SYSTEM_REPORT, user=build_report_prompt(profile), temperature=0.4)
