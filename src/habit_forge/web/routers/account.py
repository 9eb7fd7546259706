"""Account and balance routes."""

from fastapi import APIRouter, Form, Request

from ...services.session import HabitForgeSession

router = APIRouter(prefix="/account", tags=["account"])


def get_session(request: Request) -> HabitForgeSession:
    """Get the engine session from app state."""
    return request.app.state.session


@router.get("")
async def account_summary(request: Request):
    """Profile, balance and lifetime day statistics."""
    session = get_session(request)
    return {
        "profile": session.to_dict(),
        "days": session.day_statistics().to_dict(),
        "login_change_days_left": session.accounts.login_change_days_left(),
    }


@router.post("/register")
async def register(
    request: Request,
    name: str = Form(...),
    email: str = Form(...),
    password: str = Form(...),
):
    """Create the local account and sign in."""
    session = get_session(request)
    user = session.accounts.register(name, email, password)
    return {"status": "registered", "login_name": user.name}


@router.post("/login")
async def login(
    request: Request,
    identifier: str = Form(...),
    password: str = Form(...),
):
    """Sign in with login name or email."""
    session = get_session(request)
    session.accounts.login(identifier, password)
    return {"status": "signed_in", "login_name": session.profile.login_name}


@router.post("/logout")
async def logout(request: Request):
    """Sign out and forget the stored session."""
    session = get_session(request)
    session.accounts.logout()
    return {"status": "signed_out"}


@router.post("/login-name")
async def change_login_name(request: Request, login_name: str = Form(...)):
    """Change the display login (once per cooldown period)."""
    session = get_session(request)
    new_name = session.accounts.change_login(login_name)
    return {"status": "changed", "login_name": new_name}


@router.post("/avatar")
async def set_avatar(request: Request, avatar_ref: str = Form(...)):
    """Store an avatar reference."""
    session = get_session(request)
    session.accounts.set_avatar(avatar_ref)
    return {"status": "saved", "avatar_ref": session.profile.avatar_ref}


@router.post("/topup")
async def top_up(request: Request, amount: int = Form(...)):
    """Add virtual currency to the balance."""
    session = get_session(request)
    balance = session.balance.top_up(amount)
    return {"status": "credited", "balance": balance}
