from fastapi import APIRouter

from app.api.v1.endpoints import (
    agenda_items,
    auth,
    meeting_sessions,
    team_members,
    teams,
)

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(auth.router)
api_router.include_router(teams.router)
api_router.include_router(team_members.team_members_router)
api_router.include_router(team_members.router)
api_router.include_router(agenda_items.member_agenda_router)
api_router.include_router(agenda_items.router)
api_router.include_router(meeting_sessions.router)
