from fastapi import APIRouter, Depends

from app.api.deps import get_user_repo
from app.core.exceptions import UserNotFoundError
from app.repositories.user_repository import UserRepository
from app.schemas.user import UserCreate, UserOut

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserOut, status_code=201)
async def create_user(
    body: UserCreate,
    user_repo: UserRepository = Depends(get_user_repo),
) -> UserOut:
    """Persist a user record created by the auth collaborator.

    Username and email must both be unused (409 otherwise).
    """
    user = await user_repo.create(**body.model_dump())
    return UserOut.model_validate(user, from_attributes=True)


@router.get("/{user_id}", response_model=UserOut)
async def get_user(
    user_id: int,
    user_repo: UserRepository = Depends(get_user_repo),
) -> UserOut:
    user = await user_repo.get_by_id(user_id)
    if user is None:
        raise UserNotFoundError()
    return UserOut.model_validate(user, from_attributes=True)
