"""
주간 중첩 밴드 레이아웃

목표 트리와 표시할 한 주(week_start ~ week_end)를 받아, 그 주에 보이는 목표마다
하나의 사각형 밴드(BandSegment)를 계산합니다.

- 가로: 목표 기간과 주의 교집합을 7칸 기준 백분율로 (주 경계에서 잘림)
- 세로: 형제끼리 레인을 나눠 쓰고, 자식은 부모 밴드 안(제목 아래)에 다시 레인 배치
- 부모 높이 = 제목 영역 + 레인별 최대 자식 높이의 합 + 레인 간격 + 아래 여백
  (이번 주에 보이는 자식이 없으면 리프와 같은 최소 높이)

두 단계로 계산합니다.
1. measure: 아래에서 위로 노드별 높이 (주 단위 메모이제이션)
2. place: 위에서 아래로 레인별 절대 top 지정

순수 함수이며, 여러 주에 걸친 목표는 주마다 따로 계산됩니다.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional

from layout.dates import diff_days
from layout.lanes import Interval, assign_lanes
from layout.tree import GoalTreeNode

LEAF_HEIGHT = 20            # px, 리프 밴드 (제목을 안에 표시)
BAND_GAP = 2                # px, 레인 사이 간격
PARENT_TITLE_HEIGHT = 14    # px, 부모 밴드 왼쪽 위 제목 라벨 영역
PARENT_PADDING_BOTTOM = 3   # px
PARENT_MIN_HEIGHT = LEAF_HEIGHT
EDGE_INSET = 0.5            # %, 칸 경계와 밴드 사이 여백
MIN_WIDTH = 2.0             # %


@dataclass
class BandSegment:
    id: int
    left: float        # % 0-100
    width: float       # % 0-100
    top: int           # px, 오버레이 영역 위에서부터
    height: int        # px
    depth: int
    issue_type: str
    title: str
    has_children: bool
    epic_title: Optional[str]
    story_title: Optional[str]
    goal: Any


def is_visible(goal, week_start: date, week_end: date) -> bool:
    """기간이 주와 조금이라도 겹치면 보임 (양 끝 포함)"""
    return goal.start_date <= week_end and goal.end_date >= week_start


def column_span(goal, week_start: date):
    """주 안에서의 (시작 칸, 끝 칸), 0~6으로 잘림"""
    col_start = min(6, max(0, diff_days(week_start, goal.start_date)))
    col_end = min(6, max(0, diff_days(week_start, goal.end_date)))
    return col_start, col_end


def horizontal_position(goal, week_start: date):
    """(left%, width%)"""
    col_start, col_end = column_span(goal, week_start)
    left = (col_start / 7) * 100 + EDGE_INSET
    width = ((col_end - col_start + 1) / 7) * 100 - EDGE_INSET * 2
    return left, max(width, MIN_WIDTH)


def _visible(nodes: List[GoalTreeNode], week_start: date, week_end: date) -> List[GoalTreeNode]:
    return [n for n in nodes if is_visible(n.goal, week_start, week_end)]


def _lanes_for(nodes: List[GoalTreeNode]):
    return assign_lanes(Interval(n.goal.id, n.goal.start_date, n.goal.end_date) for n in nodes)


def _lane_heights(nodes, assignment, heights: Dict[int, int]) -> List[int]:
    lane_heights = [0] * assignment.num_lanes
    for node in nodes:
        lane = assignment.lanes[node.goal.id]
        lane_heights[lane] = max(lane_heights[lane], heights[node.goal.id])
    return lane_heights


def _stack_height(lane_heights: List[int]) -> int:
    if not lane_heights:
        return 0
    return sum(lane_heights) + BAND_GAP * (len(lane_heights) - 1)


def _measure(node: GoalTreeNode, week_start: date, week_end: date, heights: Dict[int, int]) -> int:
    """pass 1: 노드 높이 (이번 주에 보이는 자식만 고려)"""
    key = node.goal.id
    if key in heights:
        return heights[key]

    if not node.children:
        height = LEAF_HEIGHT
    else:
        children = _visible(node.children, week_start, week_end)
        if not children:
            height = PARENT_MIN_HEIGHT
        else:
            for child in children:
                _measure(child, week_start, week_end, heights)
            lane_heights = _lane_heights(children, _lanes_for(children), heights)
            height = PARENT_TITLE_HEIGHT + _stack_height(lane_heights) + PARENT_PADDING_BOTTOM

    heights[key] = height
    return height


def _place(
    nodes: List[GoalTreeNode],
    origin: int,
    week_start: date,
    week_end: date,
    heights: Dict[int, int],
    segments: List[BandSegment],
    epic_title: Optional[str],
    story_title: Optional[str],
) -> None:
    """pass 2: 형제 그룹을 origin부터 레인별로 쌓고 자식은 재귀적으로 배치"""
    assignment = _lanes_for(nodes)
    lane_heights = _lane_heights(nodes, assignment, heights)

    lane_tops = []
    y = origin
    for lane_height in lane_heights:
        lane_tops.append(y)
        y += lane_height + BAND_GAP

    for node in nodes:
        g = node.goal
        left, width = horizontal_position(g, week_start)
        segments.append(BandSegment(
            id=g.id,
            left=left,
            width=width,
            top=lane_tops[assignment.lanes[g.id]],
            height=heights[g.id],
            depth=node.depth,
            issue_type=g.issue_type,
            title=g.title,
            has_children=bool(node.children),
            epic_title=epic_title,
            story_title=story_title,
            goal=g,
        ))

        children = _visible(node.children, week_start, week_end)
        if children:
            _place(
                children,
                lane_tops[assignment.lanes[g.id]] + PARENT_TITLE_HEIGHT,
                week_start,
                week_end,
                heights,
                segments,
                g.title if g.issue_type == "epic" else epic_title,
                g.title if g.issue_type == "story" else story_title,
            )


def layout_week_bands(roots: List[GoalTreeNode], week_start: date, week_end: date) -> List[BandSegment]:
    """
    한 주의 밴드 목록 (부모가 자식보다 먼저 나옴)

    Args:
        roots: build_goal_tree 결과
        week_start: 주의 첫날 (월요일)
        week_end: 주의 마지막 날
    """
    visible_roots = _visible(roots, week_start, week_end)
    if not visible_roots:
        return []

    heights: Dict[int, int] = {}
    for root in visible_roots:
        _measure(root, week_start, week_end, heights)

    segments: List[BandSegment] = []
    _place(visible_roots, 0, week_start, week_end, heights, segments, None, None)
    return segments


def calc_week_bands_height(roots: List[GoalTreeNode], week_start: date, week_end: date) -> int:
    """한 주의 밴드 오버레이 전체 높이 (보이는 목표가 없으면 0)"""
    visible_roots = _visible(roots, week_start, week_end)
    if not visible_roots:
        return 0

    heights: Dict[int, int] = {}
    for root in visible_roots:
        _measure(root, week_start, week_end, heights)
    return _stack_height(_lane_heights(visible_roots, _lanes_for(visible_roots), heights))
