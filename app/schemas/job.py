"""
Pydantic schemas for job endpoints.
"""
from typing import Optional
from pydantic import BaseModel, Field


class JobPosting(BaseModel):
    """A job posting aggregated from one company's ATS board."""
    title: str = Field("", description="Job title")
    location: str = Field("", description="Job location as published")
    url: str = Field("", description="Link to the posting on the ATS")
    description: str = Field("", description="Job description (empty when the proxy omits it)")
    company_slug: str = Field(..., alias="companySlug", description="Company slug on the ATS")
    board: str = Field(..., description="ATS the posting came from")
    score: Optional[int] = Field(None, description="Relevance score, set once the posting is ranked")
    
    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "title": "Embedded Software Engineer",
                "location": "Montreal, Quebec, Canada",
                "url": "https://boards.greenhouse.io/limosa/jobs/123",
                "description": "",
                "companySlug": "limosa",
                "board": "greenhouse",
                "score": 9
            }
        }


class ErrorResponse(BaseModel):
    """Generic failure body returned by the matching endpoint."""
    error: str = Field(..., description="Human readable error message")
    
    class Config:
        json_schema_extra = {
            "example": {
                "error": "Failed to fetch jobs"
            }
        }
