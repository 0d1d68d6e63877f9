from django.contrib import admin
from .models import Appointment


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ("id", "patient", "doctor", "date", "start_time", "end_time", "status", "created_at")
    list_filter = ("status", "date")
    search_fields = ("patient__username", "doctor__username", "email")
    # Status only moves through the lifecycle engine
    readonly_fields = ("status", "created_at", "updated_at")
