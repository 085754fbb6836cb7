"""
Successful Login Log API

Read-only endpoints for successful login log entries.
"""

from fastapi import APIRouter

from restapi.api.deps import (
    CountParametersDep,
    ListParametersDep,
    LogLoginSuccessResourceDep,
)
from restapi.domain.common import CountResponse
from restapi.domain.log_login_success import LogLoginSuccessResponse

router = APIRouter(prefix="/log_login_success", tags=["Log - Login Success"])


@router.get("", response_model=list[LogLoginSuccessResponse])
async def find_login_logs(resource: LogLoginSuccessResourceDep, params: ListParametersDep):
    """Get successful login log list"""
    logs = await resource.find(
        params.criteria, params.order_by, params.limit, params.offset, params.search
    )
    return [LogLoginSuccessResponse.model_validate(log) for log in logs]


@router.get("/count", response_model=CountResponse)
async def count_login_logs(resource: LogLoginSuccessResourceDep, params: CountParametersDep):
    """Count successful login log entries"""
    return CountResponse(count=await resource.count(params.criteria, params.search))


@router.get("/{log_id}", response_model=LogLoginSuccessResponse)
async def find_login_log(log_id: str, resource: LogLoginSuccessResourceDep):
    """Get single successful login log entry"""
    log = await resource.find_one(log_id, throw_exception_if_not_found=True)
    return LogLoginSuccessResponse.model_validate(log)
