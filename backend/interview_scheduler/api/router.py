from fastapi import APIRouter

from interview_scheduler.api.v1 import (
    auth,
    availability,
    available_slots,
    bookings,
    health,
    interviewees,
    scheduling_settings,
    tenants,
)


api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(tenants.router, prefix="/tenants", tags=["tenants"])
api_router.include_router(availability.router, prefix="/availability", tags=["availability"])
api_router.include_router(scheduling_settings.router, prefix="/settings", tags=["settings"])
api_router.include_router(available_slots.router, prefix="/available-slots", tags=["booking"])
api_router.include_router(bookings.router, prefix="/bookings", tags=["booking"])
api_router.include_router(interviewees.router, prefix="/interviewees", tags=["interviewees"])
