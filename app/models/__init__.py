from app.models.agenda import AgendaItem
from app.models.meeting_session import MeetingSession, MeetingSessionAgendaItem
from app.models.team import PROFILE_FIELDS, Team, TeamMember
from app.models.user import User

__all__ = [
    "User",
    "Team",
    "TeamMember",
    "PROFILE_FIELDS",
    "AgendaItem",
    "MeetingSession",
    "MeetingSessionAgendaItem",
]
