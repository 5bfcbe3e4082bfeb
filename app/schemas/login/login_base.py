from pydantic import BaseModel

from app.schemas.common.camel_model import CamelModel


class LoginRequest(BaseModel):
    username: str
    password: str


class UserOut(CamelModel):
    id: str
    username: str
    is_admin: bool


class LoginResponse(BaseModel):
    user: UserOut
    token: str
