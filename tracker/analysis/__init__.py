"""
Analysis module for the interview tracker.

Pure aggregation functions that turn record snapshots into dashboard
statistics: problem, system-design, interview, weak-area and study analytics.
"""
from .dashboard import build_dashboard_stats
from .dsa import build_dsa_analytics
from .interviews import build_interview_analytics
from .study import build_study_analytics
from .system_design import build_system_design_analytics
from .weak_areas import build_weak_area_analytics

__all__ = [
    'build_dashboard_stats',
    'build_dsa_analytics',
    'build_interview_analytics',
    'build_study_analytics',
    'build_system_design_analytics',
    'build_weak_area_analytics',
]
