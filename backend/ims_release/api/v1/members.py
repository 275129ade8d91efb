"""
Member API Endpoints
Scanlation group staff
"""

from fastapi import APIRouter, Depends
import logging

from ims_release.api.v1.deps import get_repository
from ims_release.models import Member
from ims_release.repository import Repository
from ims_release.schemas.member import (
    MemberCreate,
    MemberListResponse,
    MemberResponse,
    MemberUpdate,
)
from ims_release.services.members import validate_member_fields

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/members", tags=["members"])


def _envelope(*members: Member) -> MemberListResponse:
    return MemberListResponse(result=[MemberResponse.model_validate(m) for m in members])


@router.get("", response_model=MemberListResponse)
def list_members(repo: Repository = Depends(get_repository)):
    return _envelope(*repo.list_members())


@router.post("", response_model=MemberListResponse)
def create_member(body: MemberCreate, repo: Repository = Depends(get_repository)):
    validate_member_fields(body.name, body.biography)
    member = repo.save_member(Member(name=body.name, biography=body.biography))
    logger.info(f"Created member {member.id}")
    return _envelope(member)


@router.get("/{member_id}", response_model=MemberListResponse)
def get_member(member_id: int, repo: Repository = Depends(get_repository)):
    return _envelope(repo.find_member(member_id))


@router.put("/{member_id}", response_model=MemberListResponse)
def update_member(member_id: int, body: MemberUpdate, repo: Repository = Depends(get_repository)):
    member = repo.find_member(member_id)
    validate_member_fields(body.name, body.biography)
    member.name = body.name
    member.biography = body.biography
    member = repo.update_member(member)
    logger.info(f"Updated member {member.id}")
    return _envelope(member)


@router.delete("/{member_id}", response_model=MemberListResponse)
def delete_member(member_id: int, repo: Repository = Depends(get_repository)):
    repo.delete_member(repo.find_member(member_id))
    logger.info(f"Deleted member {member_id}")
    return MemberListResponse()
