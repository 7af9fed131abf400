from .base import BaseRepository
from .applicant_repository import ApplicantRepository
from .application_repository import ApplicationRepository
from .scheme_repository import BenefitRepository, SchemeCriteriaRepository, SchemeRepository

__all__ = [
    "BaseRepository",
    "ApplicantRepository",
    "ApplicationRepository",
    "BenefitRepository",
    "SchemeCriteriaRepository",
    "SchemeRepository",
]
