from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer
from typing import Any, Dict, List, Optional
from datetime import datetime

from utils.validators import validate_degree, validate_phone_number

# ==============================================================================
# ADVOCATE SCHEMAS
# ==============================================================================

class Advocate(BaseModel):
    """
    One directory entry, as served by the search endpoint.

    Field names on the wire are camelCase (firstName, yearsOfExperience, ...).
    Records are frozen: the collection is loaded once and shared by every
    request. Absent optional fields (id, createdAt) are omitted when serialized.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
    )

    id: Optional[int] = Field(None, description="Database ID, absent for seed-only records")
    first_name: str = Field(..., alias="firstName", description="Given name")
    last_name: str = Field(..., alias="lastName", description="Family name")
    city: str = Field(..., description="City of practice")
    degree: str = Field(..., description="Credential: MD, PhD, or MSW")
    specialties: List[str] = Field(default_factory=list, description="Specialty tags")
    years_of_experience: int = Field(..., alias="yearsOfExperience", ge=0, description="Years in practice")
    phone_number: int = Field(..., alias="phoneNumber", description="Unformatted 10-digit phone number")
    created_at: Optional[datetime] = Field(None, alias="createdAt", description="Creation timestamp")

    @field_validator('degree')
    @classmethod
    def check_degree(cls, v):
        return validate_degree(v)

    @field_validator('phone_number')
    @classmethod
    def check_phone_number(cls, v):
        return validate_phone_number(v)

    @model_serializer(mode="wrap")
    def _omit_absent_fields(self, handler) -> Dict[str, Any]:
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None}


# ==============================================================================
# API RESPONSE SCHEMAS
# ==============================================================================

class ErrorResponse(BaseModel):
    """
    Error body returned when the record source is unavailable.
    """
    error: str


class HealthCheck(BaseModel):
    """
    Schema for health check response.
    """
    status: str = Field(..., description="Overall health status (healthy/unhealthy)")
    timestamp: float = Field(..., description="Unix timestamp of health check")
    checks: dict = Field(..., description="Individual component health checks")


# ==============================================================================
# EXAMPLES FOR API DOCUMENTATION
# ==============================================================================

EXAMPLE_ADVOCATE = {
    "id": 1,
    "firstName": "John",
    "lastName": "Doe",
    "city": "New York",
    "degree": "MD",
    "specialties": ["Bipolar", "LGBTQ"],
    "yearsOfExperience": 10,
    "phoneNumber": 5551234567,
    "createdAt": "2024-01-15T10:30:00Z"
}

EXAMPLE_SEARCH_RESULT = {
    "data": [EXAMPLE_ADVOCATE],
    "total": 1,
    "page": 1,
    "limit": 20,
    "totalPages": 1,
    "filters": {
        "query": "john",
        "city": None,
        "degree": "MD",
        "specialty": None,
        "minExperience": 5,
        "maxExperience": None,
        "sort": "yearsOfExperience",
        "direction": "desc"
    }
}
