from __future__ import annotations

from typing import Dict, Optional

GENERATION_FAILED = "Failed to generate cover letter"


class CoverLetterError(Exception):
    """Base for every failure the API reports as a JSON error body."""

    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def payload(self) -> Dict[str, str]:
        return {"error": GENERATION_FAILED, "details": self.details or self.message}


class BadRequest(CoverLetterError):
    status_code = 400

    def payload(self) -> Dict[str, str]:
        return {"error": self.message}


class ServerMisconfigured(CoverLetterError):
    def payload(self) -> Dict[str, str]:
        payload = {"error": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class UpstreamError(CoverLetterError):
    """The Gemini call failed or returned something without text."""


class RenderError(CoverLetterError):
    """Chromium could not produce the PDF."""


class ResourceError(CoverLetterError):
    """A default resource or an upload could not be read."""
