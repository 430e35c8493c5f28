"""
목표 트리 구성

목표는 id, parent_id, sort_order 속성만 있으면 됩니다 (ORM 객체, pydantic 모델 모두 가능).
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Set


@dataclass
class GoalTreeNode:
    goal: Any
    children: List["GoalTreeNode"] = field(default_factory=list)
    depth: int = 0


def build_goal_tree(goals: List[Any]) -> List[GoalTreeNode]:
    """
    평면 목표 목록으로 숲(forest)을 구성

    부모가 목록에 없는 목표는 루트로 취급합니다.
    형제는 sort_order로 정렬하며 같으면 입력 순서를 유지합니다.
    """
    nodes: Dict[int, GoalTreeNode] = {g.id: GoalTreeNode(goal=g) for g in goals}
    roots: List[GoalTreeNode] = []

    for g in goals:
        node = nodes[g.id]
        parent = nodes.get(g.parent_id) if g.parent_id is not None else None
        if parent is not None and parent is not node:
            parent.children.append(node)
        else:
            roots.append(node)

    def by_order(node: GoalTreeNode):
        return node.goal.sort_order

    # 깊이 지정은 반복으로 (순환이 섞여도 멈추도록 방문 집합 사용)
    roots.sort(key=by_order)
    seen: Set[int] = set()
    stack = [(root, 0) for root in reversed(roots)]
    while stack:
        node, depth = stack.pop()
        if node.goal.id in seen:
            continue
        seen.add(node.goal.id)
        node.depth = depth
        node.children.sort(key=by_order)
        stack.extend((child, depth + 1) for child in reversed(node.children))

    return roots


def walk_tree(roots: List[GoalTreeNode]) -> Iterator[GoalTreeNode]:
    """전위 순회"""
    stack = list(reversed(roots))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def descendant_ids(node: GoalTreeNode) -> Set[int]:
    """node 자신을 제외한 모든 자손 id"""
    return {n.goal.id for n in walk_tree(node.children)}


def rollup_progress(node: GoalTreeNode) -> int:
    """
    진행률 집계

    리프: done이면 100, 아니면 자신의 progress
    부모: 자식 진행률의 평균 (반올림)
    """
    if not node.children:
        if node.goal.status == "done":
            return 100
        return node.goal.progress or 0
    total = sum(rollup_progress(child) for child in node.children)
    return int(math.floor(total / len(node.children) + 0.5))
