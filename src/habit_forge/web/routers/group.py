"""Weekly group challenge routes."""

from fastapi import APIRouter, Form, Request

from ...services.session import HabitForgeSession

router = APIRouter(prefix="/group", tags=["group"])


def get_session(request: Request) -> HabitForgeSession:
    """Get the engine session from app state."""
    return request.app.state.session


@router.get("")
async def group_week(request: Request):
    """Current week, roster and prize figures."""
    session = get_session(request)
    return session.group.to_dict()


@router.post("/join")
async def join(request: Request, nickname: str = Form("")):
    """Join the week (first join is yours and costs the entry fee)."""
    session = get_session(request)
    participant = session.group.join(nickname)
    return {
        "participant": participant.to_dict(),
        "balance": session.balance.balance,
        "prize_pool": session.group.prize_pool,
    }


@router.post("/participants/{participant_id}/cycle")
async def cycle_participant(request: Request, participant_id: str):
    """Advance a simulated participant's status."""
    session = get_session(request)
    participant = session.group.cycle_status(participant_id)
    return {
        "participant": participant.to_dict(),
        "payout_per_winner": session.group.payout_per_winner,
    }


@router.post("/finalize")
async def finalize(request: Request):
    """Settle the week once it has ended."""
    session = get_session(request)
    outcome = session.group.finalize()
    return {"outcome": outcome.value, "balance": session.balance.balance}


@router.post("/reset")
async def reset(request: Request):
    """Start a fresh week."""
    session = get_session(request)
    session.group.reset()
    return session.group.to_dict()
