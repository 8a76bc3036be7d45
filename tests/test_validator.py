"""
Tests de la validación estructural de workflows.

Verifica:
1) Escenarios básicos (vacío, mínimo válido, nodos incompletos)
2) Orden de los issues (nodes → connections → nodos por índice)
3) Input malformado nunca lanza
4) valid ⇔ sin issues, y pureza
"""

import copy

import pytest

from workflow_copilot.validator import (
    CONNECTIONS_OBJECT_ISSUE,
    NODES_ARRAY_ISSUE,
    is_blank,
    validate_workflow,
)


def test_empty_workflow_reports_nodes_and_connections():
    result = validate_workflow({})
    assert result.valid is False
    assert result.issues == [NODES_ARRAY_ISSUE, CONNECTIONS_OBJECT_ISSUE]
    assert result.issues == [
        "Workflow must have a nodes array",
        "Workflow must have a connections object",
    ]


def test_minimal_workflow_is_valid():
    result = validate_workflow({"nodes": [], "connections": {}})
    assert result.valid is True
    assert result.issues == []


def test_node_missing_name():
    result = validate_workflow({"nodes": [{"type": "http"}], "connections": {}})
    assert result.to_dict() == {"valid": False, "issues": ["Node at index 0 is missing a name"]}


def test_complete_workflow_is_valid():
    workflow = {"nodes": [{"type": "http", "name": "Fetch"}], "connections": {"A": []}}
    assert validate_workflow(workflow).to_dict() == {"valid": True, "issues": []}


def test_issue_order_follows_rules_and_indexes():
    workflow = {
        "nodes": [{"name": "A"}, {}, {"type": "set", "name": "C"}],
    }
    assert validate_workflow(workflow).issues == [
        CONNECTIONS_OBJECT_ISSUE,
        "Node at index 0 is missing a type",
        "Node at index 1 is missing a type",
        "Node at index 1 is missing a name",
    ]


def test_nodes_not_a_list_skips_per_node_checks():
    result = validate_workflow({"nodes": "not-a-list", "connections": {}})
    assert result.issues == [NODES_ARRAY_ISSUE]


def test_nodes_as_object_is_not_an_array():
    result = validate_workflow({"nodes": {"0": {"type": "http"}}, "connections": {}})
    assert result.issues == [NODES_ARRAY_ISSUE]


def test_connections_as_list_is_not_an_object():
    result = validate_workflow({"nodes": [], "connections": []})
    assert result.issues == [CONNECTIONS_OBJECT_ISSUE]


@pytest.mark.parametrize("connections", [None, "x", 3, True])
def test_connections_scalar_values(connections):
    result = validate_workflow({"nodes": [], "connections": connections})
    assert result.issues == [CONNECTIONS_OBJECT_ISSUE]


@pytest.mark.parametrize("node", [None, "http", 42, ["type", "name"]])
def test_non_object_nodes_miss_both_fields(node):
    result = validate_workflow({"nodes": [node], "connections": {}})
    assert result.issues == [
        "Node at index 0 is missing a type",
        "Node at index 0 is missing a name",
    ]


@pytest.mark.parametrize("blank", [None, "", 0, False, float("nan")])
def test_blank_type_and_name_are_missing(blank):
    result = validate_workflow({"nodes": [{"type": blank, "name": blank}], "connections": {}})
    assert result.issues == [
        "Node at index 0 is missing a type",
        "Node at index 0 is missing a name",
    ]


@pytest.mark.parametrize("workflow", [None, [], "workflow", 7, True])
def test_non_object_workflow_has_no_fields(workflow):
    assert validate_workflow(workflow).issues == [NODES_ARRAY_ISSUE, CONNECTIONS_OBJECT_ISSUE]


def test_node_issues_reference_valid_indexes():
    nodes = [{}, {"type": "a"}, {"name": "b"}, {"type": "c", "name": "c"}, 5]
    result = validate_workflow({"nodes": nodes, "connections": {}})

    assert len(result.issues) <= 2 * len(nodes)
    for issue in result.issues:
        index = int(issue.split("Node at index ")[1].split(" ")[0])
        assert 0 <= index < len(nodes)


def test_validation_is_pure_and_deterministic():
    workflow = {"nodes": [{"type": "http"}, {"name": "x"}], "connections": None}
    snapshot = copy.deepcopy(workflow)

    first = validate_workflow(workflow)
    second = validate_workflow(workflow)

    assert first == second
    assert workflow == snapshot


@pytest.mark.parametrize(
    "workflow",
    [
        {},
        {"nodes": [], "connections": {}},
        {"nodes": [{"type": "http"}], "connections": {}},
        {"nodes": [{"type": "http", "name": "Fetch"}], "connections": {"A": []}},
        {"nodes": None},
    ],
)
def test_valid_iff_no_issues(workflow):
    result = validate_workflow(workflow)
    assert result.valid == (len(result.issues) == 0)


def test_is_blank_follows_json_falsiness():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank(0)
    assert is_blank(0.0)
    assert is_blank(float("nan"))
    assert is_blank(False)
    assert not is_blank({})
    assert not is_blank([])
    assert not is_blank("0")
    assert not is_blank(True)
    assert not is_blank(1)
