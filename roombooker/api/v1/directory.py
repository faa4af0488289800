from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from roombooker.api.v1.errors import raise_http
from roombooker.api.v1.schemas import (
    RolePermissionsRequestSchema,
    RoleSchema,
    UserRequestSchema,
    UserRoleRequestSchema,
    UserSchema,
)
from roombooker.application.exceptions import BookingError
from roombooker.application.ports.store import StorePort
from roombooker.application.use_cases.directory import DirectoryUseCase
from roombooker.application.use_cases.session import SessionUseCase
from roombooker.domain.entities.role import Permission
from roombooker.wiring.dependencies import get_directory_use_case, get_session, get_store

router = APIRouter()


@router.get("/users", response_model=list[UserSchema])
def list_users(store: StorePort = Depends(get_store)):
    return [UserSchema.from_entity(u) for u in store.list_users()]


@router.post("/users", response_model=UserSchema, status_code=201)
async def add_user(
    req: UserRequestSchema,
    uc: DirectoryUseCase = Depends(get_directory_use_case),
    session: SessionUseCase = Depends(get_session),
):
    try:
        session.require_permission(Permission.MANAGE_SETTINGS)
        user = await uc.add_user(req.name, req.email, req.role_id)
    except BookingError as e:
        raise_http(e)
    return UserSchema.from_entity(user)


@router.delete("/users/{user_id}", status_code=204)
async def delete_user(
    user_id: str,
    uc: DirectoryUseCase = Depends(get_directory_use_case),
    session: SessionUseCase = Depends(get_session),
) -> Response:
    try:
        session.require_permission(Permission.MANAGE_SETTINGS)
        await uc.delete_user(user_id)
    except BookingError as e:
        raise_http(e)
    return Response(status_code=204)


@router.put("/users/{user_id}/role", response_model=UserSchema)
async def update_user_role(
    user_id: str,
    req: UserRoleRequestSchema,
    uc: DirectoryUseCase = Depends(get_directory_use_case),
    session: SessionUseCase = Depends(get_session),
):
    try:
        session.require_permission(Permission.MANAGE_SETTINGS)
        user = await uc.update_user_role(user_id, req.role_id)
    except BookingError as e:
        raise_http(e)
    return UserSchema.from_entity(user)


@router.get("/roles", response_model=list[RoleSchema])
def list_roles(store: StorePort = Depends(get_store)):
    return [RoleSchema.from_entity(r) for r in store.list_roles()]


@router.put("/roles/{role_id}/permissions", response_model=RoleSchema)
async def update_role_permissions(
    role_id: str,
    req: RolePermissionsRequestSchema,
    uc: DirectoryUseCase = Depends(get_directory_use_case),
    session: SessionUseCase = Depends(get_session),
):
    try:
        session.require_permission(Permission.MANAGE_SETTINGS)
        role = await uc.update_role_permissions(role_id, req.permissions)
    except BookingError as e:
        raise_http(e)
    return RoleSchema.from_entity(role)
