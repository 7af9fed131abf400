"""Service layer for business logic."""

from fas.services.applicant_service import ApplicantService
from fas.services.application_service import ApplicationService
from fas.services.scheme_service import SchemeService

__all__ = ["ApplicantService", "ApplicationService", "SchemeService"]
