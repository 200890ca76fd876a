"""
Scan Schemas

Records and request bodies for the mock accessibility scan endpoints.
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import ConfigDict, Field, computed_field

from accessaudit.features.scan.utils.wcag import wcag_level_for_score
from accessaudit.platform.schemas import CamelModel


class ScanIssue(CamelModel):
    """A single finding attached to a scan."""
    type: str
    severity: Literal["error", "warning", "info"]
    element: str
    message: str
    wcag_reference: str


class Recommendation(CamelModel):
    category: str
    action: str
    priority: Literal["high", "medium", "low"]


class ScanRequest(CamelModel):
    # Optional so missing fields reach the service and produce a 400 with a readable message
    url: Optional[str] = None
    scan_type: Optional[str] = None


class ScanCreate(CamelModel):
    """
    Everything a scan record holds before the store assigns id and timestamp.

    The WCAG level is derived from the score and cannot be set directly.
    """
    url: str
    ip_address: str
    scan_type: str
    score: int = Field(..., ge=0, le=100)
    issues: List[ScanIssue]
    recommendations: List[Recommendation]

    @computed_field(alias="wcagLevel")
    @property
    def wcag_level(self) -> str:
        return wcag_level_for_score(self.score)


class ScanResult(ScanCreate):
    id: int
    created_at: datetime

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "url": "https://example.com",
                "ipAddress": "203.0.113.7",
                "scanType": "quick",
                "score": 82,
                "issues": [
                    {
                        "type": "missing-alt-text",
                        "severity": "error",
                        "element": "img",
                        "message": "Image missing alternative text",
                        "wcagReference": "1.1.1",
                    }
                ],
                "recommendations": [
                    {
                        "category": "Images",
                        "action": "Add descriptive alt text to all meaningful images",
                        "priority": "high",
                    }
                ],
                "wcagLevel": "AA Partial",
                "createdAt": "2025-11-28T10:30:00Z",
            }
        },
    )
