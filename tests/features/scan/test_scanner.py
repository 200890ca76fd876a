"""
Tests for the mock scanner service and WCAG level thresholds.
"""
import random

import pytest

from accessaudit.features.scan.schemas.scan import ScanCreate
from accessaudit.features.scan.services.scanner import MAX_SCORE, MIN_SCORE, ScanStubService
from accessaudit.features.scan.utils.wcag import wcag_level_for_score
from accessaudit.platform.exceptions import ValidationError


class TestWcagLevel:
    @pytest.mark.parametrize(
        "score,expected",
        [
            (100, "AA Compliant"),
            (95, "AA Compliant"),
            (90, "AA Compliant"),
            (89, "AA Partial"),
            (75, "AA Partial"),
            (70, "AA Partial"),
            (69, "A Partial"),
            (65, "A Partial"),
            (60, "A Partial"),
        ],
    )
    def test_thresholds(self, score, expected):
        assert wcag_level_for_score(score) == expected

    def test_level_follows_score_on_payload(self):
        payload = ScanStubService(random.Random(1)).perform_scan("https://example.com", "quick", "127.0.0.1")
        assert payload.wcag_level == wcag_level_for_score(payload.score)
        assert payload.model_dump(by_alias=True)["wcagLevel"] == payload.wcag_level


class TestScanStubService:
    def test_scores_stay_in_range(self):
        service = ScanStubService(random.Random(42))
        scores = {
            service.perform_scan("https://example.com", "full", "10.0.0.1").score
            for _ in range(500)
        }
        assert min(scores) >= MIN_SCORE
        assert max(scores) <= MAX_SCORE

    def test_same_seed_same_score(self):
        first = ScanStubService(random.Random(7)).perform_scan("https://a.example", "quick", "1.1.1.1")
        second = ScanStubService(random.Random(7)).perform_scan("https://b.example", "full", "2.2.2.2")
        assert first.score == second.score

    def test_fixed_findings(self):
        payload = ScanStubService(random.Random(0)).perform_scan("https://example.com", "quick", "10.0.0.1")

        assert isinstance(payload, ScanCreate)
        assert payload.ip_address == "10.0.0.1"
        assert [issue.type for issue in payload.issues] == ["missing-alt-text", "low-contrast"]
        assert [issue.severity for issue in payload.issues] == ["error", "warning"]
        assert [rec.priority for rec in payload.recommendations] == ["high", "medium"]

    @pytest.mark.parametrize(
        "url,scan_type",
        [(None, "quick"), ("https://example.com", None), ("", "quick"), ("https://example.com", "   ")],
    )
    def test_missing_fields_rejected(self, url, scan_type):
        with pytest.raises(ValidationError) as exc:
            ScanStubService.validate_request(url, scan_type)
        assert exc.value.message == "URL and scan type are required"

    @pytest.mark.parametrize("url", ["example.com", "ftp://example.com", "https://", "not a url"])
    def test_invalid_url_rejected(self, url):
        with pytest.raises(ValidationError) as exc:
            ScanStubService.validate_request(url, "quick")
        assert exc.value.status_code == 400
