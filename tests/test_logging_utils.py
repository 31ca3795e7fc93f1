import logging

from pantry_planner.logging_utils import RedactFilter, redact_text


def test_redact_text_masks_credentials():
    text = "GET /search?q=eggs&app_id=abc&app_key=xyz&excluded=fish"
    assert redact_text(text) == "GET /search?q=eggs&app_id=<redacted>&app_key=<redacted>&excluded=fish"


def test_redact_text_masks_tokens():
    assert redact_text("Authorization: Bearer pp_123") == "Authorization: Bearer <redacted>"
    assert redact_text("X-User-Key: pp_123") == "X-User-Key: <redacted>"


def test_redact_filter_rewrites_args():
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "query %s", ("app_key=xyz",), None)
    assert RedactFilter().filter(record) is True
    assert record.getMessage() == "query app_key=<redacted>"
