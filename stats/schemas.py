from pydantic import BaseModel, Field

class PublicStatsData(BaseModel):
    patient_count: int = Field(..., description="Number of registered patients.")
    doctor_count: int = Field(..., description="Number of registered doctors.")
    appointment_count: int = Field(..., description="Total number of appointments ever booked.")

class PublicStatsOut(BaseModel):
    success: bool
    data: PublicStatsData
