"""Core enums for type safety across the application."""

from enum import Enum


class EmploymentStatus(str, Enum):
    """Applicant employment states."""

    EMPLOYED = "employed"
    UNEMPLOYED = "unemployed"


class MaritalStatus(str, Enum):
    """Applicant marital states."""

    SINGLE = "single"
    MARRIED = "married"
    WIDOWED = "widowed"
    DIVORCED = "divorced"


class Sex(str, Enum):
    """Applicant sex."""

    MALE = "male"
    FEMALE = "female"


class RelationshipType(str, Enum):
    """Family relationship types, read from applicant A towards applicant B."""

    SPOUSE = "spouse"
    CHILD = "child"
    PARENT = "parent"
    SIBLING = "sibling"


class CriteriaName(str, Enum):
    """Recognized scheme eligibility criteria."""

    EMPLOYMENT_STATUS = "employment_status"
    MARITAL_STATUS = "marital_status"
    HAS_CHILDREN = "has_children"
    AGE = "age"
