# Authentication routes (signup/login/logout/password reset)
import logging
import smtplib
from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from learnpath.deps import get_db, get_mailer, get_settings
from learnpath.db.models.user import User
from learnpath.db.models.session_token import SessionToken
from learnpath.auth.deps import get_current_user, raw_session_token
from learnpath.auth.hashing import hash_password, new_reset_code, verify_password
from learnpath.auth.schemas import (
    ForgotPasswordIn,
    LoginIn,
    LoginOut,
    MessageOut,
    ResetPasswordIn,
    SignupIn,
    UserOut,
)
from learnpath.auth.sessions import SESSION_COOKIE_NAME, new_raw_token, hash_token, absolute_expiry
from learnpath.mail import Mailer, render_password_reset
from learnpath.settings import Settings

logger = logging.getLogger(__name__)
router = APIRouter()

INVALID_CREDENTIALS = "Invalid credentials."
INVALID_RESET_CODE = "Invalid or expired reset code."
RESET_REQUESTED = "If an account exists with this email, a reset code has been sent."


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _revoke_sessions(db: Session, user_id) -> None:
    now = datetime.now(timezone.utc)
    for tok in db.query(SessionToken).filter(SessionToken.user_id == user_id,
    SessionToken.revoked_at.is_(None)):
        tok.revoked_at = now


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=MessageOut)
def signup(body: SignupIn, db: Session = Depends(get_db)):
    email_norm = normalize_email(body.email)
    exists = db.query(User).filter(User.email == email_norm).first()
    if exists:
        raise HTTPException(status_code=400, detail="User already exists.")

    user = User(name=body.name.strip(), email=email_norm, password_hash=hash_password(body.password))
    db.add(user)
    db.commit()
    logger.info("Registered user %s", user.id)
    return {"message": "User registered successfully."}


@router.post("/login", response_model=LoginOut)
def login(
    body: LoginIn,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    email_norm = normalize_email(body.email)
    user = db.query(User).filter(User.email == email_norm).first()
    if not user or not user.is_active or not verify_password(body.password, user.password_hash):
        raise HTTPException(status_code=400, detail=INVALID_CREDENTIALS)

    raw = new_raw_token()
    tok = SessionToken(
        user_id=user.id,
        token_hash=hash_token(raw),
        expires_at=absolute_expiry(settings.session_absolute_days),
        last_seen_at=datetime.now(timezone.utc),
    )
    db.add(tok)
    db.commit()

    # Cookie security flags: httpOnly always; secure=True in prod over HTTPS
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=raw,
        httponly=True,
        secure=(settings.env == "prod"),
        samesite="lax",
        max_age=60 * 60 * 24 * settings.session_absolute_days,
        path="/",
    )
    return {"message": "Login successful", "token": raw, "name": user.name, "email": user.email}


@router.get("/me", response_model=UserOut)
def me(user: User = Depends(get_current_user)):
    return {"name": user.name, "email": user.email}


@router.post("/logout", response_model=MessageOut)
def logout(request: Request, response: Response, db: Session = Depends(get_db)):
    raw = raw_session_token(request)
    if raw:
        h = hash_token(raw)
        tok = db.query(SessionToken).filter(SessionToken.token_hash == h,
        SessionToken.revoked_at.is_(None)).first()
        if tok:
            tok.revoked_at = datetime.now(timezone.utc)
            db.commit()

    response.delete_cookie(SESSION_COOKIE_NAME, path="/")
    return {"message": "Logout successful"}


@router.post("/forgot-password", response_model=MessageOut)
def forgot_password(
    body: ForgotPasswordIn,
    db: Session = Depends(get_db),
    mailer: Mailer = Depends(get_mailer),
    settings: Settings = Depends(get_settings),
):
    email_norm = normalize_email(body.email)
    user = db.query(User).filter(User.email == email_norm).first()

    # Same answer whether or not the account exists, to avoid email enumeration
    if not user:
        return {"message": RESET_REQUESTED}

    code = new_reset_code()
    user.reset_code_hash = hash_password(code)
    user.reset_code_expires_at = datetime.now(timezone.utc) + timedelta(minutes=settings.reset_code_ttl_minutes)

    # The code is only stored once the email carrying it has gone out
    try:
        mailer.send(
            to=user.email,
            subject="Password Reset Request",
            body=render_password_reset(reset_code=code, ttl_minutes=settings.reset_code_ttl_minutes),
        )
    except (smtplib.SMTPException, OSError) as e:
        db.rollback()
        logger.exception("Failed to send password reset email to %s", user.email)
        raise HTTPException(status_code=500, detail="Server error.") from e

    db.commit()
    return {"message": RESET_REQUESTED}


@router.post("/reset-password", response_model=MessageOut)
def reset_password(body: ResetPasswordIn, db: Session = Depends(get_db)):
    email_norm = normalize_email(body.email)
    user = db.query(User).filter(User.email == email_norm).first()

    now = datetime.now(timezone.utc)
    if (
        not user
        or not user.reset_code_hash
        or user.reset_code_expires_at is None
        or user.reset_code_expires_at <= now
        or not verify_password(body.reset_code, user.reset_code_hash)
    ):
        raise HTTPException(status_code=400, detail=INVALID_RESET_CODE)

    user.password_hash = hash_password(body.new_password)
    user.reset_code_hash = None
    user.reset_code_expires_at = None
    _revoke_sessions(db, user.id)
    db.commit()
    logger.info("Password reset for user %s", user.id)
    return {"message": "Password reset successful."}
