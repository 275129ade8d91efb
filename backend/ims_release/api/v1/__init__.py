"""
API v1 Router
Combines all v1 endpoints
"""

from fastapi import APIRouter, Depends
from ims_release.api.v1 import projects, releases, downloads, pages, thumbnails, members
from ims_release.api.v1.deps import verify_auth_token

api_router = APIRouter(dependencies=[Depends(verify_auth_token)])

# Include all routers
api_router.include_router(projects.router)
api_router.include_router(releases.router)
api_router.include_router(downloads.router)
api_router.include_router(pages.router)
api_router.include_router(thumbnails.router)
api_router.include_router(members.router)
