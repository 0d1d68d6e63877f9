from pydantic import BaseModel, field_validator
from typing import Optional

class UserBriefOut(BaseModel):
    """Display attributes of an appointment participant (never the password)."""
    id: int
    first_name: str
    last_name: str
    email: str
    phone_number: Optional[str] = None
    profile_picture: Optional[str] = None

    @field_validator('profile_picture', mode='before')
    @classmethod
    def handle_image_field(cls, value):
        if value and hasattr(value, 'url'):
            return value.url
        return value or None

    class Config:
        from_attributes = True
