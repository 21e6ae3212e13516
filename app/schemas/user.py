import re
from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime

# The web client speaks camelCase, and sends the name as "fullname"
CAMEL_CASE = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}

class UserCreate(BaseModel):
    full_name: str = Field(min_length=4, max_length=20, alias="fullname")
    email: EmailStr
    password: str = Field(min_length=8, max_length=32)

    model_config = CAMEL_CASE

    @field_validator("password")
    @classmethod
    def password_strength(cls, v: str) -> str:
        # upper case, lower case, and a digit or a special character
        if not (
            re.search(r"[A-Z]", v)
            and re.search(r"[a-z]", v)
            and re.search(r"[\d\W]", v)
        ):
            raise ValueError("Password is too weak")
        return v

class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8, max_length=32)

class UserOut(BaseModel):
    id: str
    full_name: str = Field(alias="fullname")
    email: str
    created_at: datetime

    model_config = {
        **CAMEL_CASE,
        "from_attributes": True,
    }
