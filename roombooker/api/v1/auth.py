from fastapi import APIRouter, Depends, HTTPException

from roombooker.api.v1.schemas import (
    LoginRequestSchema,
    SessionSchema,
    UserSchema,
)
from roombooker.application.translations import MessageKey, translate
from roombooker.application.use_cases.session import SessionUseCase
from roombooker.core.config import settings
from roombooker.domain.entities.role import Permission
from roombooker.wiring.dependencies import get_session

router = APIRouter()


def _session_payload(session: SessionUseCase) -> SessionSchema:
    user = session.current_user
    if user is None:
        return SessionSchema(authenticated=False)
    return SessionSchema(
        authenticated=True,
        user=UserSchema.from_entity(user),
        permissions=[p for p in Permission if session.has_permission(p)],
    )


@router.post("/login", response_model=SessionSchema)
def login(req: LoginRequestSchema, session: SessionUseCase = Depends(get_session)):
    if not session.login(req.username, req.password):
        raise HTTPException(status_code=401, detail=translate(MessageKey.LOGIN_ERROR, settings.LANGUAGE))
    return _session_payload(session)


@router.post("/logout", response_model=SessionSchema)
def logout(session: SessionUseCase = Depends(get_session)):
    session.logout()
    return _session_payload(session)


@router.get("/me", response_model=SessionSchema)
def me(session: SessionUseCase = Depends(get_session)):
    return _session_payload(session)


