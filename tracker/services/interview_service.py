"""
Interview bookkeeping.

Saving a mock interview also opens weak areas for any sub-score below the
pass mark, so low scores show up on the weak-area board without manual
entry.
"""
from __future__ import annotations

import logging
from datetime import datetime

from tracker.analysis.records import Severity
from tracker.extensions import db
from tracker.models import MockInterview, WeakArea

logger = logging.getLogger(__name__)

# Sub-scores below this open a weak area; below HIGH_SEVERITY_BELOW it is High.
WEAK_AREA_BELOW = 6
HIGH_SEVERITY_BELOW = 4


def _severity(score):
    if score < HIGH_SEVERITY_BELOW:
        return Severity.HIGH.value
    return Severity.MEDIUM.value


def detect_weak_areas(interview: MockInterview) -> list[tuple[str, str, str]]:
    """(area, category, severity) for each low sub-score of *interview*."""
    found = []
    if interview.communication_score < WEAK_AREA_BELOW:
        found.append((
            'Communication Skills', 'Behavioral',
            _severity(interview.communication_score),
        ))
    if interview.problem_solving_score < WEAK_AREA_BELOW:
        found.append((
            'Problem Solving Approach', interview.type,
            _severity(interview.problem_solving_score),
        ))
    if interview.technical_score < WEAK_AREA_BELOW:
        found.append((
            'Technical Knowledge', interview.type,
            _severity(interview.technical_score),
        ))
    return found


class InterviewService:
    @staticmethod
    def create(interview: MockInterview) -> list[WeakArea]:
        """Persist *interview* and open weak areas for its low scores.

        An identical unresolved weak area (same area and category) is not
        duplicated.

        Returns:
            The newly created WeakArea rows.
        """
        interview.created_at = datetime.utcnow()
        db.session.add(interview)

        created = []
        for area, category, severity in detect_weak_areas(interview):
            exists = WeakArea.query.filter_by(
                area=area, category=category, is_resolved=False,
            ).first()
            if exists:
                continue
            weak_area = WeakArea(
                area=area,
                category=category,
                severity=severity,
                identified_at=datetime.utcnow(),
            )
            db.session.add(weak_area)
            created.append(weak_area)

        db.session.commit()
        for weak_area in created:
            logger.info(
                f'Opened weak area {weak_area.area!r} ({weak_area.category}, '
                f'{weak_area.severity}) from interview {interview.id}'
            )
        return created
