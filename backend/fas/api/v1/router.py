"""API v1 router: one sub-router per resource."""

from fastapi import APIRouter

from fas.api.v1.endpoints import applicants, applications, health, schemes

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(applicants.router, prefix="/applicants", tags=["applicants"])
api_router.include_router(schemes.router, prefix="/schemes", tags=["schemes"])
api_router.include_router(applications.router, prefix="/applications", tags=["applications"])
