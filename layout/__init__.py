"""
캘린더 / 간트 레이아웃 (순수 함수)
"""

from layout.lanes import Interval, LaneAssignment, assign_lanes
from layout.tree import GoalTreeNode, build_goal_tree, walk_tree, descendant_ids, rollup_progress
from layout.bands import BandSegment, layout_week_bands, calc_week_bands_height
from layout.events import CalendarEvent, merge_events

__all__ = [
    "Interval",
    "LaneAssignment",
    "assign_lanes",
    "GoalTreeNode",
    "build_goal_tree",
    "walk_tree",
    "descendant_ids",
    "rollup_progress",
    "BandSegment",
    "layout_week_bands",
    "calc_week_bands_height",
    "CalendarEvent",
    "merge_events",
]
