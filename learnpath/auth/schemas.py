## Request/response bodies for the auth endpoints
from pydantic import BaseModel, ConfigDict, Field


class SignupIn(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=1)


class LoginIn(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginOut(BaseModel):
    message: str
    token: str
    name: str
    email: str


class UserOut(BaseModel):
    name: str
    email: str


class ForgotPasswordIn(BaseModel):
    email: str = Field(min_length=1)


class ResetPasswordIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(min_length=1)
    reset_code: str = Field(min_length=1, alias="resetCode")
    new_password: str = Field(min_length=1, alias="newPassword")


class MessageOut(BaseModel):
    message: str
