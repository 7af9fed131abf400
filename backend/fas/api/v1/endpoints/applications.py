"""Application CRUD endpoints."""

from fastapi import APIRouter, status

from fas.core.errors import InvalidApplicantIDError, InvalidApplicationIDError, InvalidSchemeIDError
from fas.core.ids import parse_id
from fas.deps import SessionDep
from fas.models.schemas import (
    ApiResponse,
    ApplicationCreate,
    ApplicationResponse,
    ApplicationUpdate,
)
from fas.services.application_service import ApplicationService

router = APIRouter()


@router.get(
    "/",
    response_model=ApiResponse[list[ApplicationResponse]],
    summary="List all applications",
)
async def list_applications(
    db: SessionDep,
) -> ApiResponse[list[ApplicationResponse]]:
    """Retrieve every application that has not been deleted."""
    applications = await ApplicationService(db).list_applications()
    return ApiResponse(
        message="Successfully retrieved applications.",
        data=[ApplicationResponse.model_validate(a) for a in applications],
    )


@router.get(
    "/{application_id}",
    response_model=ApiResponse[ApplicationResponse],
    summary="Get application by ID",
)
async def get_application(
    application_id: str,
    db: SessionDep,
) -> ApiResponse[ApplicationResponse]:
    """Retrieve a single application."""
    application = await ApplicationService(db).get_application(
        parse_id(application_id, InvalidApplicationIDError)
    )
    return ApiResponse(
        message="Successfully retrieved application.",
        data=ApplicationResponse.model_validate(application),
    )


@router.post(
    "/",
    response_model=ApiResponse[ApplicationResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new application",
)
async def create_application(
    application_data: ApplicationCreate,
    db: SessionDep,
) -> ApiResponse[ApplicationResponse]:
    """
    Create an application for an applicant on a scheme.

    Rejected with 400 when the applicant does not meet the scheme's criteria.
    """
    application = await ApplicationService(db).create_application(
        parse_id(application_data.applicant_id, InvalidApplicantIDError),
        parse_id(application_data.scheme_id, InvalidSchemeIDError),
    )
    return ApiResponse(
        message="Successfully created application.",
        data=ApplicationResponse.model_validate(application),
    )


@router.put(
    "/{application_id}",
    response_model=ApiResponse[ApplicationResponse],
    summary="Update an application",
)
async def update_application(
    application_id: str,
    update_data: ApplicationUpdate,
    db: SessionDep,
) -> ApiResponse[ApplicationResponse]:
    """
    Move an application to another applicant and/or scheme.

    Eligibility is re-checked for the resulting pair.
    """
    fields = {}
    if update_data.applicant_id is not None:
        fields["applicant_id"] = parse_id(update_data.applicant_id, InvalidApplicantIDError)
    if update_data.scheme_id is not None:
        fields["scheme_id"] = parse_id(update_data.scheme_id, InvalidSchemeIDError)

    application = await ApplicationService(db).update_application(
        parse_id(application_id, InvalidApplicationIDError), fields
    )
    return ApiResponse(
        message="Successfully updated application.",
        data=ApplicationResponse.model_validate(application),
    )


@router.delete(
    "/{application_id}",
    response_model=ApiResponse[None],
    summary="Delete an application",
)
async def delete_application(
    application_id: str,
    db: SessionDep,
) -> ApiResponse[None]:
    """Soft-delete an application; no eligibility check is made."""
    await ApplicationService(db).delete_application(
        parse_id(application_id, InvalidApplicationIDError)
    )
    return ApiResponse(message="Successfully deleted application.")
