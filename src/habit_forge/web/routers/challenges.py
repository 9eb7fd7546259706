"""Personal challenge routes."""

from fastapi import APIRouter, Form, Query, Request

from ...services.challenges import ChallengeFilter
from ...services.session import HabitForgeSession
from ...services.validation import ChallengeCandidate

router = APIRouter(prefix="/challenges", tags=["challenges"])


def get_session(request: Request) -> HabitForgeSession:
    """Get the engine session from app state."""
    return request.app.state.session


@router.get("")
async def list_challenges(
    request: Request,
    kind: ChallengeFilter = Query(ChallengeFilter.ALL, alias="filter"),
    page: int = 1,
):
    """One page of challenges, most recent first."""
    session = get_session(request)
    return session.challenges.paginate(kind, page).to_dict()


@router.post("")
async def create_challenge(
    request: Request,
    exercise: str = Form(""),
    target: str = Form(""),
    sets: str = Form(""),
    per_week: str = Form("3"),
    stake: str = Form("500"),
    fail_mode: str = Form("charity"),
):
    """Create a personal challenge."""
    session = get_session(request)
    challenge = session.challenges.create(
        ChallengeCandidate(
            exercise=exercise,
            target=target,
            sets=sets,
            per_week=per_week,
            stake=stake,
            fail_mode=fail_mode,
        )
    )
    return challenge.to_dict()


@router.get("/stats")
async def challenge_stats(request: Request):
    """Counts, success rate and average stake."""
    session = get_session(request)
    return session.statistics().to_dict()


@router.get("/{challenge_id}")
async def get_challenge(request: Request, challenge_id: str):
    session = get_session(request)
    return session.challenges.get(challenge_id).to_dict()


@router.post("/{challenge_id}/status")
async def set_challenge_status(
    request: Request,
    challenge_id: str,
    status: str = Form(...),
):
    """Mark a challenge active, success or fail."""
    session = get_session(request)
    challenge = session.challenges.set_status(challenge_id, status)
    return challenge.to_dict()


@router.delete("/{challenge_id}")
async def delete_challenge(request: Request, challenge_id: str):
    """Delete a challenge within its deletion window."""
    session = get_session(request)
    session.challenges.remove(challenge_id)
    return {"status": "deleted", "id": challenge_id}
