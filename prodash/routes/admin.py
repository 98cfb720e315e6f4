from __future__ import annotations

from fastapi import APIRouter, Depends

from prodash import identity, repositories
from prodash.auth import require_admin

router = APIRouter()


@router.get("/v1/admin/users")
async def list_users(admin: dict = Depends(require_admin)):
    users = await repositories.list_users()
    return {"users": [identity.public_user(user) for user in users]}
