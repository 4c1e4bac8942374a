"""
Pydantic models for access token issuance.
"""

from pydantic import BaseModel, Field


class AccessTokenRequest(BaseModel):
    """Identity claim to sign.

    Every field sent by the client, not only ``email``, ends up in the
    token and is handed back to protected routes after verification.
    """

    email: str = Field(..., json_schema_extra={"example": "user@example.com"})

    model_config = {
        "extra": "allow",
    }


class AccessTokenIssued(BaseModel):
    success: bool = True
