from qlib.domain.defs import QuestDef, QuestRequest, RequestType
from qlib.services.quest_graph import build_touch_index, link_touch_edges, validate_prerequisites


def test_build_touch_index_inverts_prerequisites() -> None:
    catalog = _catalog({1: (), 2: (1,), 3: (1, 2), 4: (2, 2)})

    index = build_touch_index(catalog)

    assert index == {1: [2, 3], 2: [3, 4], 3: [], 4: []}
    assert all(definition.touch == [] for definition in catalog.values())


def test_link_touch_edges_fills_definitions() -> None:
    catalog = _catalog({1: (), 2: (1,), 3: (1,)})

    link_touch_edges(catalog)

    assert catalog[1].touch == [2, 3]
    assert catalog[2].touch == []


def test_valid_chain_has_no_issues() -> None:
    catalog = _catalog({1: (), 2: (1,), 3: (2,)})

    assert validate_prerequisites(catalog) == []


def test_missing_and_self_prerequisites_are_reported() -> None:
    catalog = _catalog({1: (1,), 2: (99,)})

    issues = validate_prerequisites(catalog)

    assert [(issue.code, issue.context["quest_id"]) for issue in issues] == [
        ("SELF_PREREQUISITE", "1"),
        ("MISSING_PREREQUISITE", "2"),
    ]
    assert issues[1].context["referenced_id"] == "99"


def test_prerequisite_cycle_is_reported() -> None:
    catalog = _catalog({1: (3,), 2: (1,), 3: (2,), 4: ()})

    issues = validate_prerequisites(catalog)

    assert [issue.code for issue in issues] == ["PREREQUISITE_CYCLE"]
    assert issues[0].context["cycle"] == "1 -> 3 -> 2 -> 1"


def _catalog(prereqs: dict[int, tuple[int, ...]]) -> dict[int, QuestDef]:
    return {
        quest_id: QuestDef(
            id=quest_id,
            description=f"Quest {quest_id}",
            ongoing=None,
            onfinished=None,
            quest_givers=(),
            quest_requests=frozenset({QuestRequest(quest_id, RequestType.VISIT, 1)}),
            prerequisites=required,
            pre_dialogue_lines=(),
        )
        for quest_id, required in prereqs.items()
    }
