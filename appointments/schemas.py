from pydantic import BaseModel, EmailStr, Field
from typing import Literal, Optional
from datetime import date, datetime, time
from users.schemas import UserBriefOut

class AppointmentCreate(BaseModel):
    doctor_id: int = Field(..., alias="doctorId")
    date: date
    start_time: Optional[str] = Field(None, alias="startTime")
    end_time: Optional[str] = Field(None, alias="endTime")
    time_range: Optional[str] = Field(None, alias="time")  # "HH:MM - HH:MM"
    age: Optional[int] = Field(None, ge=0)
    gender: Optional[Literal["male", "female", "other"]] = None
    number: Optional[str] = None
    blood_group: Optional[str] = Field(None, alias="bloodGroup", max_length=5)
    family_diseases: Optional[str] = Field(None, alias="familyDiseases")
    email: Optional[EmailStr] = None
    doctor_name: Optional[str] = Field(None, alias="doctorname")

    class Config:
        populate_by_name = True

class AppointmentAction(BaseModel):
    appointment_id: int = Field(..., alias="appointid")

    class Config:
        populate_by_name = True

class AppointmentComplete(AppointmentAction):
    # Sent by the client for display only; the appointment row is authoritative
    doctor_id: Optional[int] = Field(None, alias="doctorId")
    doctor_name: Optional[str] = Field(None, alias="doctorname")

class AppointmentOut(BaseModel):
    id: int
    patient: UserBriefOut
    doctor: UserBriefOut
    date: date
    start_time: time
    end_time: time
    time_range: str
    age: int
    gender: str
    blood_group: Optional[str] = None
    number: str
    family_diseases: Optional[str] = None
    email: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
