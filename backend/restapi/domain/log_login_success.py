"""
Successful Login Log Domain Model
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from restapi.common.time import ensure_utc


class LogLoginSuccessResponse(BaseModel):
    """Successful Login Log Response Model"""
    
    id: str
    user_id: str
    ip: str
    host: str
    agent: str
    client_type: Optional[str] = None
    client_name: Optional[str] = None
    os_name: Optional[str] = None
    device_name: Optional[str] = None
    login_time: datetime
    login_date: date
    
    model_config = ConfigDict(from_attributes=True)

    @field_validator("login_time", mode="after")
    @classmethod
    def _login_time_utc(cls, v: datetime) -> datetime:
        dt = ensure_utc(v)
        assert dt is not None
        return dt
