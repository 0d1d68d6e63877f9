import asyncio

from asgiref.sync import sync_to_async
from ninja import Router
from appointments.models import Appointment
from users.models import User
from .schemas import PublicStatsData, PublicStatsOut

stats_router = Router(tags=["Statistics"])


# Public landing-page counters, no authentication
@stats_router.get("/public", response={200: PublicStatsOut})
async def public_stats(request):
    patient_count, doctor_count, appointment_count = await asyncio.gather(
        sync_to_async(User.objects.filter(role=User.PATIENT).count)(),
        sync_to_async(User.objects.filter(role=User.DOCTOR).count)(),
        sync_to_async(Appointment.objects.count)(),
    )

    return PublicStatsOut(
        success=True,
        data=PublicStatsData(
            patient_count=patient_count,
            doctor_count=doctor_count,
            appointment_count=appointment_count,
        ),
    )
