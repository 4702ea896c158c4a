"""Auth Schemas — registration, login and the token envelope.

Invariants:
    - password never appears in any response model
    - email syntax validated by EmailStr (email-validator)
"""

from pydantic import BaseModel, EmailStr, Field

from eureka.schemas.common import RequestBody
from eureka.schemas.users import PublicUser


class RegisterRequest(RequestBody):
    username: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)
    display_name: str | None = Field(None, alias="displayName", max_length=100)
    age_group: str | None = Field(None, alias="ageGroup", max_length=50)
    user_type: str | None = Field(None, alias="userType", max_length=50)


class LoginRequest(RequestBody):
    email: EmailStr
    password: str = Field(min_length=1, max_length=128)


class AuthResponse(BaseModel):
    message: str
    token: str
    user: PublicUser
