# app/schemas/tokens.py
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

class TokenPayload(BaseModel):
    """Claims carried by an access token"""
    id: str
    full_name: str = Field(alias="fullname")
    email: str

    model_config = {
        "populate_by_name": True,
    }
