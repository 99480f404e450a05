from datetime import datetime

from tracker.analysis import (
    build_dashboard_stats,
    build_dsa_analytics,
    build_interview_analytics,
    build_study_analytics,
    build_system_design_analytics,
    build_weak_area_analytics,
)
from tracker.services.snapshot_service import SnapshotService


class AnalyticsService:
    """Loads fresh snapshots and runs the analytics builders on them.

    Every call reads the database again; nothing is cached. ``now`` defaults
    to the current naive UTC time.
    """

    @staticmethod
    def get_dashboard_data() -> dict:
        snapshot = SnapshotService.load()
        stats = build_dashboard_stats(
            snapshot.problems,
            snapshot.topics,
            snapshot.interviews,
            snapshot.weak_areas,
            snapshot.sessions,
        )
        return stats.to_dict()

    @staticmethod
    def get_dsa_data(now: datetime = None) -> dict:
        now = now or datetime.utcnow()
        return build_dsa_analytics(SnapshotService.problems(), now.date()).to_dict()

    @staticmethod
    def get_system_design_data() -> dict:
        return build_system_design_analytics(SnapshotService.topics()).to_dict()

    @staticmethod
    def get_interview_data() -> dict:
        return build_interview_analytics(SnapshotService.interviews()).to_dict()

    @staticmethod
    def get_weak_area_data(now: datetime = None) -> dict:
        now = now or datetime.utcnow()
        return build_weak_area_analytics(
            SnapshotService.weak_areas(), now, problems=SnapshotService.problems(),
        ).to_dict()

    @staticmethod
    def get_study_data(now: datetime = None) -> dict:
        now = now or datetime.utcnow()
        return build_study_analytics(SnapshotService.sessions(), now.date()).to_dict()
