import math

from django.shortcuts import get_object_or_404
from ninja import Router
from notifications.models import Notification
from notifications.schemas import MarkReadPayload, NotificationOut, NotificationPage, UnreadCountOut
from users.auth import AuthBearer

notifications_router = Router(tags=["Notifications"], auth=AuthBearer())


# List notifications for the logged-in user, one page at a time
@notifications_router.get("/getallnotifs", response={200: NotificationPage})
def get_all_notifications(request, page: int = 0, limit: int = 10):
    """
    Paginated notifications for the logged-in user, newest first. ``page`` is zero-based.
    """
    page = max(page, 0)
    limit = limit if limit > 0 else 10

    notifications = Notification.objects.filter(recipient=request.auth)
    total_count = notifications.count()
    offset = page * limit

    return {
        "data": list(notifications[offset:offset + limit]),
        "total_count": total_count,
        "current_page": page,
        "total_pages": math.ceil(total_count / limit),
    }


@notifications_router.get("/unreadcount", response={200: UnreadCountOut})
def unread_count(request):
    return {"count": Notification.objects.filter(recipient=request.auth, is_read=False).count()}


# Mark a notification as read
@notifications_router.put("/markread", response={200: NotificationOut, 404: dict})
def mark_notification_read(request, payload: MarkReadPayload):
    """
    Mark one of the caller's notifications as read.
    """
    notification = get_object_or_404(Notification, id=payload.notification_id, recipient=request.auth)

    notification.is_read = True
    notification.save(update_fields=["is_read"])
    return notification


@notifications_router.put("/markallread", response={200: dict})
def mark_all_read(request):
    updated = Notification.objects.filter(recipient=request.auth, is_read=False).update(is_read=True)
    return {"message": "All notifications marked as read", "updated": updated}


# Delete a notification
@notifications_router.delete("/delete/{notification_id}", response={200: dict, 404: dict})
def delete_notification(request, notification_id: int):
    notification = get_object_or_404(Notification, id=notification_id, recipient=request.auth)

    notification.delete()
    return {"message": "Notification deleted successfully"}


@notifications_router.delete("/deleteall", response={200: dict})
def delete_all_notifications(request):
    deleted, _ = Notification.objects.filter(recipient=request.auth).delete()
    return {"message": "All notifications deleted successfully", "deleted": deleted}
