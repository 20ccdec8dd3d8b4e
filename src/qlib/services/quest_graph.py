"""Prerequisite graph utilities over a loaded quest catalog."""
from __future__ import annotations

from typing import Dict, List, Mapping

from qlib.data.issues import Issue
from qlib.domain.defs import QuestDef


def build_touch_index(catalog: Mapping[int, QuestDef]) -> Dict[int, List[int]]:
    """Map each quest id to the sorted ids of quests that require it.

    Prerequisites pointing outside the catalog are ignored here; see
    validate_prerequisites.
    """
    index: Dict[int, List[int]] = {quest_id: [] for quest_id in catalog}
    for quest_id in sorted(catalog):
        for prereq_id in catalog[quest_id].prerequisites:
            if prereq_id in index and quest_id not in index[prereq_id]:
                index[prereq_id].append(quest_id)
    return index


def link_touch_edges(catalog: Mapping[int, QuestDef]) -> None:
    """Record reverse edges on every definition. Call once per catalog."""
    for quest_id, dependents in build_touch_index(catalog).items():
        definition = catalog[quest_id]
        for dependent_id in dependents:
            definition.add_touch(dependent_id)


def validate_prerequisites(catalog: Mapping[int, QuestDef]) -> list[Issue]:
    issues: list[Issue] = []
    for quest_id in sorted(catalog):
        for index, prereq_id in enumerate(catalog[quest_id].prerequisites):
            field_path = f"prerequisites[{index}]"
            if prereq_id == quest_id:
                issues.append(
                    Issue(
                        severity="ERROR",
                        code="SELF_PREREQUISITE",
                        message="Quest lists itself as a prerequisite.",
                        context={"quest_id": str(quest_id), "field_path": field_path},
                    )
                )
            elif prereq_id not in catalog:
                issues.append(
                    Issue(
                        severity="ERROR",
                        code="MISSING_PREREQUISITE",
                        message="Prerequisite references missing quest.",
                        context={
                            "quest_id": str(quest_id),
                            "field_path": field_path,
                            "referenced_id": str(prereq_id),
                        },
                    )
                )
    for cycle in _find_cycles(catalog):
        cycle_path = " -> ".join(str(quest_id) for quest_id in cycle + [cycle[0]])
        issues.append(
            Issue(
                severity="ERROR",
                code="PREREQUISITE_CYCLE",
                message="Prerequisite cycle detected.",
                context={"cycle": cycle_path},
            )
        )
    return issues


def _find_cycles(catalog: Mapping[int, QuestDef]) -> list[list[int]]:
    adjacency = {
        quest_id: [
            prereq_id
            for prereq_id in catalog[quest_id].prerequisites
            if prereq_id in catalog and prereq_id != quest_id
        ]
        for quest_id in catalog
    }
    visited: set[int] = set()
    stack: list[int] = []
    stack_set: set[int] = set()
    cycles: list[list[int]] = []

    def dfs(current: int) -> None:
        visited.add(current)
        stack.append(current)
        stack_set.add(current)
        for next_id in adjacency[current]:
            if next_id not in visited:
                dfs(next_id)
            elif next_id in stack_set:
                cycles.append(stack[stack.index(next_id) :])
        stack.pop()
        stack_set.remove(current)

    for quest_id in sorted(adjacency):
        if quest_id not in visited:
            dfs(quest_id)
    return cycles
