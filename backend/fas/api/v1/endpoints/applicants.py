"""Applicant CRUD and family relationship endpoints."""

from fastapi import APIRouter, status

from fas.core.errors import InvalidApplicantIDError, InvalidRelationshipIDError
from fas.core.ids import parse_id
from fas.deps import SessionDep
from fas.models.schemas import (
    ApiResponse,
    ApplicantCreate,
    ApplicantResponse,
    ApplicantUpdate,
    RelationshipCreate,
    RelationshipResponse,
)
from fas.services.applicant_service import ApplicantService

router = APIRouter()


@router.get(
    "/",
    response_model=ApiResponse[list[ApplicantResponse]],
    summary="List all applicants",
)
async def list_applicants(
    db: SessionDep,
) -> ApiResponse[list[ApplicantResponse]]:
    """Retrieve every applicant that has not been deleted."""
    applicants = await ApplicantService(db).list_applicants()
    return ApiResponse(
        message="Successfully retrieved applicants.",
        data=[ApplicantResponse.model_validate(a) for a in applicants],
    )


@router.get(
    "/{applicant_id}",
    response_model=ApiResponse[ApplicantResponse],
    summary="Get applicant by ID",
)
async def get_applicant(
    applicant_id: str,
    db: SessionDep,
) -> ApiResponse[ApplicantResponse]:
    """Retrieve a single applicant."""
    applicant = await ApplicantService(db).get_applicant(
        parse_id(applicant_id, InvalidApplicantIDError)
    )
    return ApiResponse(
        message="Successfully retrieved applicant.",
        data=ApplicantResponse.model_validate(applicant),
    )


@router.post(
    "/",
    response_model=ApiResponse[ApplicantResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new applicant",
)
async def create_applicant(
    applicant_data: ApplicantCreate,
    db: SessionDep,
) -> ApiResponse[ApplicantResponse]:
    """Create an applicant from name, statuses, sex and date of birth."""
    applicant = await ApplicantService(db).create_applicant(**applicant_data.model_dump())
    return ApiResponse(
        message="Successfully created applicant.",
        data=ApplicantResponse.model_validate(applicant),
    )


@router.put(
    "/{applicant_id}",
    response_model=ApiResponse[ApplicantResponse],
    summary="Update an applicant",
)
async def update_applicant(
    applicant_id: str,
    update_data: ApplicantUpdate,
    db: SessionDep,
) -> ApiResponse[ApplicantResponse]:
    """Update only the fields present in the request body."""
    applicant = await ApplicantService(db).update_applicant(
        parse_id(applicant_id, InvalidApplicantIDError),
        update_data.model_dump(exclude_unset=True, exclude_none=True),
    )
    return ApiResponse(
        message="Successfully updated applicant.",
        data=ApplicantResponse.model_validate(applicant),
    )


@router.delete(
    "/{applicant_id}",
    response_model=ApiResponse[None],
    summary="Delete an applicant",
)
async def delete_applicant(
    applicant_id: str,
    db: SessionDep,
) -> ApiResponse[None]:
    """Soft-delete an applicant."""
    await ApplicantService(db).delete_applicant(parse_id(applicant_id, InvalidApplicantIDError))
    return ApiResponse(message="Successfully deleted applicant.")


# ===== Family Relationships =====


@router.get(
    "/{applicant_id}/family",
    response_model=ApiResponse[list[RelationshipResponse]],
    summary="List an applicant's family",
)
async def list_family(
    applicant_id: str,
    db: SessionDep,
) -> ApiResponse[list[RelationshipResponse]]:
    """Retrieve the relationships recorded from this applicant to others."""
    relationships = await ApplicantService(db).list_family(
        parse_id(applicant_id, InvalidApplicantIDError)
    )
    return ApiResponse(
        message="Successfully retrieved family.",
        data=[RelationshipResponse.model_validate(r) for r in relationships],
    )


@router.post(
    "/{applicant_id}/family",
    response_model=ApiResponse[RelationshipResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Add a family member",
)
async def add_family_member(
    applicant_id: str,
    relationship_data: RelationshipCreate,
    db: SessionDep,
) -> ApiResponse[RelationshipResponse]:
    """
    Record how another applicant relates to this one.

    For example ``{"relationship_type": "child"}`` means the related applicant
    is this applicant's child.
    """
    relationship = await ApplicantService(db).add_family_member(
        parse_id(applicant_id, InvalidApplicantIDError),
        parse_id(relationship_data.related_applicant_id, InvalidApplicantIDError),
        relationship_data.relationship_type,
    )
    return ApiResponse(
        message="Successfully added family member.",
        data=RelationshipResponse.model_validate(relationship),
    )


@router.delete(
    "/{applicant_id}/family/{relationship_id}",
    response_model=ApiResponse[None],
    summary="Remove a family member",
)
async def remove_family_member(
    applicant_id: str,
    relationship_id: str,
    db: SessionDep,
) -> ApiResponse[None]:
    """Soft-delete one of the applicant's relationships."""
    await ApplicantService(db).remove_family_member(
        parse_id(applicant_id, InvalidApplicantIDError),
        parse_id(relationship_id, InvalidRelationshipIDError),
    )
    return ApiResponse(message="Successfully removed family member.")
