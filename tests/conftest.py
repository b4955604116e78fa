"""Fakes and fixtures shared by the test modules."""
from __future__ import annotations

from dataclasses import replace
from typing import List

import pytest
from fastapi.testclient import TestClient

from coverletter.config import load_settings
from coverletter.errors import UpstreamError
from coverletter.main import app, get_defaults, get_generator, get_renderer, get_settings

FAKE_LATEX = r"""\documentclass{letter}
\begin{document}
\begin{letter}{Hiring Team \\ Acme Corp}
\opening{Dear Hiring Team,}

I build distributed backends.

\closing{Best regards,}
\end{letter}
\end{document}
"""

FAKE_PDF = b"%PDF-1.4 fake document"


class FakeGenerator:
    def __init__(self, text: str = FAKE_LATEX, error: Exception | None = None):
        self.text = text
        self.error = error
        self.prompts: List[str] = []

    async def generate(self, prompt: str, api_key: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


class FakeRenderer:
    def __init__(self, pdf: bytes = FAKE_PDF, error: Exception | None = None):
        self.pdf = pdf
        self.error = error
        self.documents: List[str] = []

    async def render(self, html: str) -> bytes:
        self.documents.append(html)
        if self.error is not None:
            raise self.error
        return self.pdf


class FakeDefaults:
    def __init__(self, resume: str = "Default resume", template: str = "Default template"):
        self.resume = resume
        self.template = template
        self.reads: List[str] = []

    async def load_resume(self) -> str:
        self.reads.append("resume")
        return self.resume

    async def load_template(self) -> str:
        self.reads.append("template")
        return self.template


class FakeUpload:
    def __init__(self, content: bytes, error: Exception | None = None):
        self.content = content
        self.error = error
        self.reads = 0
        self.closes = 0

    async def read(self, size: int = -1) -> bytes:
        self.reads += 1
        if self.error is not None:
            raise self.error
        return self.content

    async def close(self) -> None:
        self.closes += 1


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def defaults():
    return FakeDefaults()


@pytest.fixture
def settings():
    return replace(load_settings(), gemini_api_key="test-gemini-key")


@pytest.fixture
def client(settings, generator, renderer, defaults):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_generator] = lambda: generator
    app.dependency_overrides[get_renderer] = lambda: renderer
    app.dependency_overrides[get_defaults] = lambda: defaults
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_generator():
    return FakeGenerator(error=UpstreamError("Gemini API error: 503 Service Unavailable"))
