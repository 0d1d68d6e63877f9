from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

class NotificationOut(BaseModel):
    id: int
    content: str
    is_read: bool
    source_appointment_id: Optional[int] = None
    created_at: datetime

    class Config:
        from_attributes = True

class NotificationPage(BaseModel):
    data: List[NotificationOut]
    total_count: int
    current_page: int
    total_pages: int

class MarkReadPayload(BaseModel):
    notification_id: int = Field(..., alias="notificationId")

    class Config:
        populate_by_name = True

class UnreadCountOut(BaseModel):
    count: int
