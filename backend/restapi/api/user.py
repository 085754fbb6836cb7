"""
User API

Provides CRUD endpoints for users.
"""

from fastapi import APIRouter, status

from restapi.api.deps import CountParametersDep, ListParametersDep, UserResourceDep
from restapi.domain.common import CountResponse
from restapi.domain.user import UserDto, UserResponse

router = APIRouter(prefix="/user", tags=["User"])


@router.get("", response_model=list[UserResponse])
async def find_users(resource: UserResourceDep, params: ListParametersDep):
    """
    Get user list
    
    Supports `where`, `order`, `limit`, `offset` and `search` parameters.
    """
    users = await resource.find(
        params.criteria, params.order_by, params.limit, params.offset, params.search
    )
    return [UserResponse.model_validate(user) for user in users]


@router.get("/count", response_model=CountResponse)
async def count_users(resource: UserResourceDep, params: CountParametersDep):
    """Count users"""
    return CountResponse(count=await resource.count(params.criteria, params.search))


@router.get("/ids", response_model=list[str])
async def find_user_ids(resource: UserResourceDep, params: CountParametersDep):
    """Get user IDs"""
    return await resource.get_ids(params.criteria, params.search)


@router.get("/{user_id}", response_model=UserResponse)
async def find_user(user_id: str, resource: UserResourceDep):
    """Get single user"""
    user = await resource.find_one(user_id, throw_exception_if_not_found=True)
    return UserResponse.model_validate(user)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(data: UserDto, resource: UserResourceDep):
    """Create user"""
    return UserResponse.model_validate(await resource.create(data))


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(user_id: str, data: UserDto, resource: UserResourceDep):
    """Replace user data, all form fields are required"""
    return UserResponse.model_validate(await resource.update(user_id, data))


@router.patch("/{user_id}", response_model=UserResponse)
async def patch_user(user_id: str, data: UserDto, resource: UserResourceDep):
    """Partially update user, only given fields are changed"""
    return UserResponse.model_validate(await resource.patch(user_id, data))


@router.delete("/{user_id}", response_model=UserResponse)
async def delete_user(user_id: str, resource: UserResourceDep):
    """Delete user"""
    return UserResponse.model_validate(await resource.delete(user_id))
