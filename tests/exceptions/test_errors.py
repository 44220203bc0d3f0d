"""Tests for the exception hierarchy."""

from pathlib import Path

from blast_radius.exceptions import (
    AnalysisError,
    AnalysisFailedError,
    BlastRadiusError,
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
    RequestValidationError,
)


class TestHierarchy:
    def test_everything_is_a_blast_radius_error(self):
        for exc in (
            RequestValidationError("app"),
            AnalysisFailedError("x"),
            InvalidConfigError("k", 1, "bad"),
            InvalidPathError(Path("/x"), "missing"),
        ):
            assert isinstance(exc, BlastRadiusError)

    def test_groups(self):
        assert issubclass(AnalysisFailedError, AnalysisError)
        assert issubclass(InvalidConfigError, ConfigurationError)
        assert issubclass(InvalidPathError, ConfigurationError)


class TestMessages:
    def test_base_appends_details(self):
        exc = BlastRadiusError("boom", details={"file": "a.cs"})
        assert str(exc) == "boom (file=a.cs)"

    def test_base_without_details(self):
        assert str(BlastRadiusError("boom")) == "boom"

    def test_request_validation_default_reason(self):
        exc = RequestValidationError("changedFiles")
        assert str(exc) == "changedFiles is required"
        assert exc.field == "changedFiles"

    def test_request_validation_custom_reason(self):
        assert str(RequestValidationError("depth", "must be an integer")) == (
            "depth must be an integer"
        )

    def test_analysis_failed(self):
        exc = AnalysisFailedError("graph exploded")
        assert str(exc) == "Analysis failed: graph exploded"
        assert exc.reason == "graph exploded"

    def test_invalid_config_details(self):
        exc = InvalidConfigError("max_depth", -1, "must be non-negative")
        assert exc.message == "Invalid configuration for max_depth: -1"
        assert exc.details["reason"] == "must be non-negative"

    def test_invalid_config_names_the_setting(self):
        exc = InvalidConfigError("max_depth", -1, "must be non-negative")
        assert exc.details["setting"] == "max_depth"
        assert exc.key == "max_depth"

    def test_invalid_path_names_the_root(self):
        exc = InvalidPathError(Path("/no/such/checkout"), "not a directory")
        assert exc.message == "Cannot scan /no/such/checkout: not a directory"
        assert exc.details == {"root": "/no/such/checkout", "reason": "not a directory"}

    def test_error_body(self):
        assert RequestValidationError("app").to_dict() == {"error": "app is required"}
        assert AnalysisFailedError("boom").to_dict() == {"error": "Analysis failed: boom"}
