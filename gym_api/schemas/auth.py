from pydantic import BaseModel

from gym_api.schemas.base import WireModel


class LoginRequest(WireModel):
    username: str
    password: str


class TokenResponse(BaseModel):
    token: str
