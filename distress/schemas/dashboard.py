# distress/schemas/dashboard.py
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class RecentCaseOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    reference_number: str = Field(alias="referenceNumber")
    subject: str
    status: str
    nature_of_case: str = Field(alias="natureOfCase")


class DashboardStats(BaseModel):
    # camelCase keys are what the front end reads
    model_config = ConfigDict(populate_by_name=True)

    total_cases: int = Field(alias="totalCases")
    cases_by_status: Dict[str, int] = Field(alias="casesByStatus")
    cases_by_nature: Dict[str, int] = Field(alias="casesByNature")
    cases_by_country_origin: Dict[str, int] = Field(alias="casesByCountryOrigin")
    recent_cases: List[RecentCaseOut] = Field(alias="recentCases")
