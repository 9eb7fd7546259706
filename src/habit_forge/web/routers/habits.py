"""Habit routes."""

from fastapi import APIRouter, Form, Request

from ...services.session import HabitForgeSession

router = APIRouter(prefix="/habits", tags=["habits"])


def get_session(request: Request) -> HabitForgeSession:
    """Get the engine session from app state."""
    return request.app.state.session


@router.get("")
async def list_habits(request: Request):
    session = get_session(request)
    return {"habits": [h.to_dict() for h in session.habits.habits]}


@router.post("")
async def add_habit(
    request: Request,
    title: str = Form(""),
    description: str = Form(""),
):
    session = get_session(request)
    return session.habits.add(title, description).to_dict()


@router.post("/{habit_id}/increment")
async def increment_habit(request: Request, habit_id: str):
    """Count one completion (and one done day)."""
    session = get_session(request)
    habit = session.habits.increment(habit_id)
    return {"habit": habit.to_dict(), "done_days": session.profile.done_days}
