"""Domain models for the application."""

from fas.models.domain.applicant import Applicant, FamilyRelationship
from fas.models.domain.application import Application
from fas.models.domain.scheme import Benefit, Scheme, SchemeCriteria

__all__ = [
    "Applicant",
    "FamilyRelationship",
    "Application",
    "Scheme",
    "Benefit",
    "SchemeCriteria",
]
