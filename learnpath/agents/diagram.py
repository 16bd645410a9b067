## Mermaid flowchart rendering for roadmap documents
from learnpath.agents.schemas import RoadmapDocument

HEADER = "graph TD"
INDENT = "    "


def _label(text: str, safe: bool) -> str:
    if not safe:
        return f"[{text}]"
    # Quoted labels let brackets through; quotes need the entity code
    return '["' + text.replace('"', "#quot;") + '"]'


def render_mermaid(document: RoadmapDocument, *, safe_labels: bool = False) -> str:
    """
    Render a roadmap as a top-down Mermaid graph.

    Prerequisites hang off a single "Prerequisites" node which also feeds the
    first stage. Stages are chained in document order and each stage fans out
    to its concepts. Labels are inserted verbatim unless safe_labels is set.
    """
    lines = [HEADER]

    def node(node_id: str, text: str) -> None:
        lines.append(f"{INDENT}{node_id}{_label(text, safe_labels)};")

    def edge(src: str, dst: str) -> None:
        lines.append(f"{INDENT}{src} --> {dst};")

    has_prereqs = len(document.prerequisites) > 0
    if has_prereqs:
        node("Prerequisites", "Prerequisites")
        for i, prereq in enumerate(document.prerequisites):
            node(f"Prereq{i}", prereq)
            edge("Prerequisites", f"Prereq{i}")

    for s, stage in enumerate(document.stages):
        stage_id = f"Stage{s}"
        node(stage_id, stage.name)
        if s > 0:
            edge(f"Stage{s - 1}", stage_id)
        elif has_prereqs:
            edge("Prerequisites", stage_id)

        for c, concept in enumerate(stage.concepts):
            concept_id = f"Concept{s}_{c}"
            node(concept_id, concept)
            edge(stage_id, concept_id)

    return "\n".join(lines)
