"""Scheme, benefit and criteria endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Query, status

from fas.core.errors import (
    InvalidApplicantIDError,
    InvalidBenefitIDError,
    InvalidSchemeCriteriaIDError,
    InvalidSchemeIDError,
)
from fas.core.ids import parse_id
from fas.deps import SessionDep
from fas.models.schemas import (
    ApiResponse,
    BenefitCreate,
    BenefitResponse,
    BenefitUpdate,
    CriteriaCreate,
    CriteriaResponse,
    CriteriaUpdate,
    SchemeCreate,
    SchemeResponse,
    SchemeUpdate,
)
from fas.services.scheme_service import SchemeService

router = APIRouter()


# ===== Schemes =====


@router.get(
    "/",
    response_model=ApiResponse[list[SchemeResponse]],
    summary="List all schemes",
)
async def list_schemes(
    db: SessionDep,
) -> ApiResponse[list[SchemeResponse]]:
    """Retrieve every scheme with its criteria and benefits."""
    schemes = await SchemeService(db).list_schemes()
    return ApiResponse(
        message="Successfully retrieved schemes.",
        data=[SchemeResponse.model_validate(s) for s in schemes],
    )


@router.get(
    "/eligible",
    response_model=ApiResponse[list[SchemeResponse]],
    summary="List schemes available to an applicant",
)
async def list_applicant_available_schemes(
    db: SessionDep,
    applicant: Annotated[Optional[str], Query(description="Applicant ID")] = None,
) -> ApiResponse[list[SchemeResponse]]:
    """Retrieve the schemes whose criteria the applicant currently meets."""
    schemes = await SchemeService(db).list_applicant_available_schemes(
        parse_id(applicant, InvalidApplicantIDError)
    )
    return ApiResponse(
        message="Successfully retrieved eligible schemes.",
        data=[SchemeResponse.model_validate(s) for s in schemes],
    )


@router.get(
    "/{scheme_id}",
    response_model=ApiResponse[SchemeResponse],
    summary="Get scheme by ID",
)
async def get_scheme(
    scheme_id: str,
    db: SessionDep,
) -> ApiResponse[SchemeResponse]:
    """Retrieve a scheme with its criteria and benefits."""
    scheme = await SchemeService(db).get_scheme(parse_id(scheme_id, InvalidSchemeIDError))
    return ApiResponse(
        message="Successfully retrieved scheme.",
        data=SchemeResponse.model_validate(scheme),
    )


@router.post(
    "/",
    response_model=ApiResponse[SchemeResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new scheme",
)
async def create_scheme(
    scheme_data: SchemeCreate,
    db: SessionDep,
) -> ApiResponse[SchemeResponse]:
    """Create a scheme; benefits and criteria are added separately."""
    scheme = await SchemeService(db).create_scheme(scheme_data.name)
    return ApiResponse(
        message="Successfully created scheme.",
        data=SchemeResponse.model_validate(scheme),
    )


@router.put(
    "/{scheme_id}",
    response_model=ApiResponse[SchemeResponse],
    summary="Update a scheme",
)
async def update_scheme(
    scheme_id: str,
    update_data: SchemeUpdate,
    db: SessionDep,
) -> ApiResponse[SchemeResponse]:
    """Update only the fields present in the request body."""
    scheme = await SchemeService(db).update_scheme(
        parse_id(scheme_id, InvalidSchemeIDError),
        update_data.model_dump(exclude_unset=True, exclude_none=True),
    )
    return ApiResponse(
        message="Successfully updated scheme.",
        data=SchemeResponse.model_validate(scheme),
    )


@router.delete(
    "/{scheme_id}",
    response_model=ApiResponse[None],
    summary="Delete a scheme",
)
async def delete_scheme(
    scheme_id: str,
    db: SessionDep,
) -> ApiResponse[None]:
    """Soft-delete a scheme."""
    await SchemeService(db).delete_scheme(parse_id(scheme_id, InvalidSchemeIDError))
    return ApiResponse(message="Successfully deleted scheme.")


# ===== Benefits =====


@router.post(
    "/{scheme_id}/benefits",
    response_model=ApiResponse[BenefitResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Add a benefit to a scheme",
)
async def add_scheme_benefit(
    scheme_id: str,
    benefit_data: BenefitCreate,
    db: SessionDep,
) -> ApiResponse[BenefitResponse]:
    """Attach a named monetary benefit to a scheme."""
    benefit = await SchemeService(db).add_benefit(
        parse_id(scheme_id, InvalidSchemeIDError),
        benefit_data.name,
        benefit_data.amount,
    )
    return ApiResponse(
        message="Successfully added scheme benefit.",
        data=BenefitResponse.model_validate(benefit),
    )


@router.put(
    "/benefits/{benefit_id}",
    response_model=ApiResponse[BenefitResponse],
    summary="Update a scheme benefit",
)
async def update_scheme_benefit(
    benefit_id: str,
    update_data: BenefitUpdate,
    db: SessionDep,
) -> ApiResponse[BenefitResponse]:
    """Update a benefit's name, amount or owning scheme."""
    fields = update_data.model_dump(exclude_unset=True, exclude_none=True)
    if "scheme_id" in fields:
        fields["scheme_id"] = parse_id(fields["scheme_id"], InvalidSchemeIDError)

    benefit = await SchemeService(db).update_benefit(
        parse_id(benefit_id, InvalidBenefitIDError), fields
    )
    return ApiResponse(
        message="Successfully updated scheme benefit.",
        data=BenefitResponse.model_validate(benefit),
    )


@router.delete(
    "/benefits/{benefit_id}",
    response_model=ApiResponse[None],
    summary="Delete a scheme benefit",
)
async def delete_scheme_benefit(
    benefit_id: str,
    db: SessionDep,
) -> ApiResponse[None]:
    """Soft-delete a benefit."""
    await SchemeService(db).delete_benefit(parse_id(benefit_id, InvalidBenefitIDError))
    return ApiResponse(message="Successfully deleted scheme benefit.")


# ===== Criteria =====


@router.post(
    "/{scheme_id}/criteria",
    response_model=ApiResponse[CriteriaResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Add an eligibility criterion to a scheme",
)
async def add_scheme_criteria(
    scheme_id: str,
    criteria_data: CriteriaCreate,
    db: SessionDep,
) -> ApiResponse[CriteriaResponse]:
    """
    Attach an eligibility criterion to a scheme.

    Recognized names and values:
    - employment_status: employed | unemployed
    - marital_status: single | married | widowed | divorced
    - has_children: true | false
    - age: operator and whole number, e.g. ">=60", "<18", "==30"
    """
    criteria = await SchemeService(db).add_criteria(
        parse_id(scheme_id, InvalidSchemeIDError),
        criteria_data.name,
        criteria_data.value,
    )
    return ApiResponse(
        message="Successfully added scheme criteria.",
        data=CriteriaResponse.model_validate(criteria),
    )


@router.put(
    "/criteria/{criteria_id}",
    response_model=ApiResponse[CriteriaResponse],
    summary="Update a scheme criterion",
)
async def update_scheme_criteria(
    criteria_id: str,
    update_data: CriteriaUpdate,
    db: SessionDep,
) -> ApiResponse[CriteriaResponse]:
    """Update a criterion's name, value or owning scheme."""
    fields = update_data.model_dump(exclude_unset=True, exclude_none=True)
    if "scheme_id" in fields:
        fields["scheme_id"] = parse_id(fields["scheme_id"], InvalidSchemeIDError)

    criteria = await SchemeService(db).update_criteria(
        parse_id(criteria_id, InvalidSchemeCriteriaIDError), fields
    )
    return ApiResponse(
        message="Successfully updated scheme criteria.",
        data=CriteriaResponse.model_validate(criteria),
    )


@router.delete(
    "/criteria/{criteria_id}",
    response_model=ApiResponse[None],
    summary="Delete a scheme criterion",
)
async def delete_scheme_criteria(
    criteria_id: str,
    db: SessionDep,
) -> ApiResponse[None]:
    """Soft-delete a criterion."""
    await SchemeService(db).delete_criteria(
        parse_id(criteria_id, InvalidSchemeCriteriaIDError)
    )
    return ApiResponse(message="Successfully deleted scheme criteria.")
