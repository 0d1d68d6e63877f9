from django.contrib import admin
from .models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ("id", "recipient", "is_read", "source_appointment", "created_at")
    list_filter = ("is_read",)
    search_fields = ("recipient__username", "content")
