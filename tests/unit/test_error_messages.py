"""Tests for helpers/error_messages.py.

Tests cover:
- Network error translations
- HTTP status translations
- File/storage and database error translations
- Fallback formatting
"""

from helpers.error_messages import friendly_error


class TestFriendlyError:
    """Tests for the general friendly_error function."""

    def test_connection_error(self):
        result = friendly_error(Exception("Connection refused"))
        assert "backend" in result.lower()

    def test_timeout_error(self):
        result = friendly_error(Exception("Request timed out after 600s"))
        assert "reach" in result.lower()

    def test_ssl_error(self):
        result = friendly_error(Exception("SSL certificate verify failed"))
        assert "secure" in result.lower()

    def test_404_not_found(self):
        result = friendly_error(Exception("404 Not Found"))
        assert "found" in result.lower()

    def test_422_unprocessable(self):
        result = friendly_error(Exception("Backend HTTP 422"))
        assert "rejected" in result.lower()

    def test_permission_denied(self):
        result = friendly_error(Exception("Permission denied: '/data/modeltrainer.db'"))
        assert "permission" in result.lower()

    def test_disk_full(self):
        result = friendly_error(Exception("No space left on device"))
        assert "disk space" in result.lower()

    def test_database_error(self):
        result = friendly_error(Exception("sqlite3.OperationalError: database is locked"))
        assert "database" in result.lower()

    def test_json_error(self):
        result = friendly_error(Exception("JSON decode error"))
        assert "format" in result.lower()

    def test_context_is_used_for_unknown_errors(self):
        result = friendly_error(Exception("weird thing"), context="Saving backend URL")
        assert result == "Saving backend URL failed: weird thing"

    def test_unknown_error_without_context(self):
        result = friendly_error(Exception("weird thing"))
        assert result == "Something went wrong: weird thing"

    def test_long_messages_are_truncated(self):
        result = friendly_error(Exception("x" * 400))
        assert result.endswith("...")
        assert len(result) < 200
