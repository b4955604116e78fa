from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .errors import ResourceError


# -------- Data models --------
@dataclass(frozen=True)
class Submission:
    resume: str
    job_description: str
    sample_template: str


@dataclass(frozen=True)
class CoverLetterResult:
    cover_letter: str
    pdf_data: str  # base64


# -------- Collaborators --------
class Upload(Protocol):
    async def read(self, size: int = -1) -> bytes: ...

    async def close(self) -> None: ...


class ContentGenerator(Protocol):
    async def generate(self, prompt: str, api_key: str) -> str: ...


class DocumentRenderer(Protocol):
    async def render(self, html: str) -> bytes: ...


# -------- Bundled defaults --------
class DefaultResources:
    """Loads the resume and sample template used when no file is uploaded."""

    def __init__(self, resume_path: Path, template_path: Path):
        self.resume_path = resume_path
        self.template_path = template_path

    async def load_resume(self) -> str:
        return await asyncio.to_thread(self._read, self.resume_path)

    async def load_template(self) -> str:
        return await asyncio.to_thread(self._read, self.template_path)

    @staticmethod
    def _read(path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceError(f"Could not read default resource {path.name}: {e}") from e
