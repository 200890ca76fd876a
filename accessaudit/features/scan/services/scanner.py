"""
Mock accessibility scanner.

No request is made to the target URL: the score is drawn from the injected
random source and the findings are a fixed illustrative sample.
"""
import random
from typing import Optional

from accessaudit.features.scan.schemas.scan import Recommendation, ScanCreate, ScanIssue
from accessaudit.platform.exceptions import ValidationError
from accessaudit.platform.utils.url_validator import validate_url

MIN_SCORE = 60
MAX_SCORE = 100

SAMPLE_ISSUES = [
    ScanIssue(
        type="missing-alt-text",
        severity="error",
        element="img",
        message="Image missing alternative text",
        wcag_reference="1.1.1",
    ),
    ScanIssue(
        type="low-contrast",
        severity="warning",
        element="text",
        message="Text has insufficient color contrast ratio (3.2:1)",
        wcag_reference="1.4.3",
    ),
]

SAMPLE_RECOMMENDATIONS = [
    Recommendation(
        category="Images",
        action="Add descriptive alt text to all meaningful images",
        priority="high",
    ),
    Recommendation(
        category="Color",
        action="Increase contrast ratio to meet WCAG AA standards",
        priority="medium",
    ),
]


class ScanStubService:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    @staticmethod
    def validate_request(url: Optional[str], scan_type: Optional[str]) -> None:
        if not url or not scan_type or not scan_type.strip():
            raise ValidationError("URL and scan type are required")

        is_valid, error = validate_url(url)
        if not is_valid:
            raise ValidationError(
                f"Please enter a valid website URL (e.g., https://example.com). {error}"
            )

    def perform_scan(self, url: str, scan_type: str, ip_address: str) -> ScanCreate:
        score = self.rng.randint(MIN_SCORE, MAX_SCORE)
        return ScanCreate(
            url=url,
            ip_address=ip_address,
            scan_type=scan_type,
            score=score,
            issues=[issue.model_copy() for issue in SAMPLE_ISSUES],
            recommendations=[rec.model_copy() for rec in SAMPLE_RECOMMENDATIONS],
        )
