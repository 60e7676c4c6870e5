from .contact import (
    extract_contact_info,
    format_phone_number,
    validate_email,
    validate_phone_number,
)
from .education import classify_degree_level, extract_education_info, meets_education_requirement
from .experience import (
    calculate_total_experience,
    detect_employment_gaps,
    extract_date_ranges,
    extract_experience_level,
    extract_years_of_experience,
    summarize_experience,
)

__all__ = [
    "extract_contact_info",
    "format_phone_number",
    "validate_email",
    "validate_phone_number",
    "classify_degree_level",
    "extract_education_info",
    "meets_education_requirement",
    "calculate_total_experience",
    "detect_employment_gaps",
    "extract_date_ranges",
    "extract_experience_level",
    "extract_years_of_experience",
    "summarize_experience",
]
