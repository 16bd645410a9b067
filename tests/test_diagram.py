import pytest

from learnpath.agents.diagram import HEADER, render_mermaid
from learnpath.agents.parsing import parse_roadmap
from learnpath.agents.schemas import RoadmapDocument, Stage


def _doc(prereqs, concepts_per_stage):
    return RoadmapDocument(
        prerequisites=tuple(f"P{i}" for i in range(prereqs)),
        stages=tuple(
            Stage(name=f"S{s}", concepts=tuple(f"C{s}.{c}" for c in range(n)))
            for s, n in enumerate(concepts_per_stage)
        ),
    )


def _split(diagram):
    body = diagram.split("\n")[1:]
    edges = [line for line in body if "-->" in line]
    nodes = [line for line in body if "-->" not in line]
    return nodes, edges


def test_scenario_a():
    doc = parse_roadmap(
        '{"prerequisites":["Algebra"],"stages":[{"name":"Basics","concepts":["Vars","Loops"]}]}'
    )
    assert render_mermaid(doc).split("\n") == [
        "graph TD",
        "    Prerequisites[Prerequisites];",
        "    Prereq0[Algebra];",
        "    Prerequisites --> Prereq0;",
        "    Stage0[Basics];",
        "    Prerequisites --> Stage0;",
        "    Concept0_0[Vars];",
        "    Stage0 --> Concept0_0;",
        "    Concept0_1[Loops];",
        "    Stage0 --> Concept0_1;",
    ]


def test_scenario_b():
    diagram = render_mermaid(_doc(0, [0, 0]))
    assert diagram == "graph TD\n    Stage0[S0];\n    Stage1[S1];\n    Stage0 --> Stage1;"
    assert "Prerequisites" not in diagram
    assert "Concept" not in diagram


def test_empty_document_is_header_only():
    assert render_mermaid(RoadmapDocument(stages=())) == HEADER


def test_prerequisites_without_stages():
    nodes, edges = _split(render_mermaid(_doc(2, [])))
    assert len(nodes) == 3
    assert edges == ["    Prerequisites --> Prereq0;", "    Prerequisites --> Prereq1;"]


@pytest.mark.parametrize("prereqs, concepts", [
    (0, []),
    (3, []),
    (0, [2]),
    (1, [0]),
    (2, [3, 0, 1]),
    (0, [1, 1, 1, 1]),
    (4, [5, 2]),
])
def test_node_and_edge_counts(prereqs, concepts):
    doc = _doc(prereqs, concepts)
    diagram = render_mermaid(doc)
    nodes, edges = _split(diagram)

    n = len(concepts)
    expected_nodes = (1 + prereqs if prereqs else 0) + n + sum(concepts)
    expected_edges = prereqs + (n - 1 if n else 0) + (1 if prereqs and n else 0) + sum(concepts)
    assert len(nodes) == expected_nodes
    assert len(edges) == expected_edges
    assert diagram.startswith(HEADER + "\n") or diagram == HEADER


def test_render_is_deterministic():
    doc = _doc(2, [3, 1])
    assert render_mermaid(doc) == render_mermaid(doc)


def test_node_ids_are_unique():
    nodes, _ = _split(render_mermaid(_doc(3, [2, 2, 2])))
    ids = [line.strip().split("[", 1)[0] for line in nodes]
    assert len(ids) == len(set(ids))


def test_labels_verbatim_by_default():
    doc = RoadmapDocument(stages=(Stage(name='Lists [a] "b"', concepts=()),))
    assert render_mermaid(doc).split("\n")[1] == '    Stage0[Lists [a] "b"];'


def test_safe_labels_quotes_and_escapes():
    doc = RoadmapDocument(
        prerequisites=("C++",),
        stages=(Stage(name='Lists [a] "b"', concepts=("x",)),),
    )
    lines = render_mermaid(doc, safe_labels=True).split("\n")
    assert lines[1] == '    Prerequisites["Prerequisites"];'
    assert lines[2] == '    Prereq0["C++"];'
    assert lines[4] == '    Stage0["Lists [a] #quot;b#quot;"];'
    assert "    Stage0 --> Concept0_0;" in lines
