"""Pydantic schemas for authentication requests."""

from pydantic import BaseModel, Field, field_validator, model_validator

from company_manager.infrastructure.common.schemas import check_email, check_password_strength

MIN_LOGIN_PASSWORD_LENGTH = 6


class AuthenticateRequest(BaseModel):
    """Schema for a login attempt."""

    email: str = Field(..., description="Login e-mail")
    password: str = Field(..., description="Plain text password")

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return check_email(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value:
            raise ValueError("Password is required.")
        if len(value) < MIN_LOGIN_PASSWORD_LENGTH:
            raise ValueError(
                f"Password must be at least {MIN_LOGIN_PASSWORD_LENGTH} characters long."
            )
        return value


class ChangePasswordRequest(BaseModel):
    """Schema for changing the password of an account."""

    email: str = Field(..., description="Login e-mail of the account")
    current_password: str = Field(..., min_length=1, description="Password in use today")
    new_password: str = Field(..., description="Replacement password")
    confirm_password: str = Field(..., description="Replacement password, typed again")

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return check_email(value)

    @field_validator("new_password")
    @classmethod
    def validate_new_password(cls, value: str) -> str:
        return check_password_strength(value, require_special=True)

    @model_validator(mode="after")
    def validate_confirmation(self) -> "ChangePasswordRequest":
        if self.new_password != self.confirm_password:
            msg = "Password confirmation does not match the new password."
            raise ValueError(msg)
        return self
