import logging

from ninja import NinjaAPI
from ninja_extra.exceptions import APIException
from ninja_jwt.routers.blacklist import blacklist_router
from ninja_jwt.routers.obtain import obtain_pair_router, sliding_router
from ninja_jwt.routers.verify import verify_router
from appointments.views import router as appointment_router
from notifications.views import notifications_router
from stats.views import stats_router

logger = logging.getLogger(__name__)

api = NinjaAPI(title="Doctor Appointment API")

api.add_router("/appointment", appointment_router)
api.add_router("/notification", notifications_router)
api.add_router("/stats", stats_router)

# Token Management
api.add_router("/token", obtain_pair_router)  # Generates access & refresh tokens
api.add_router("/token/refresh", sliding_router)
api.add_router("/token/verify", verify_router)  # Verify access tokens
api.add_router("/token/blacklist", blacklist_router)  # Blacklist refresh tokens


# Token failures raised by ninja_jwt (expired, malformed, blacklisted)
@api.exception_handler(APIException)
def token_error(request, exc):
    detail = exc.detail if isinstance(exc.detail, dict) else {"detail": exc.detail}
    return api.create_response(request, detail, status=exc.status_code)


@api.exception_handler(Exception)
def unexpected_error(request, exc):
    logger.exception("Unhandled error on %s %s", request.method, request.path)
    return api.create_response(request, {"error": "Internal server error"}, status=500)
