from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, load_settings
from .errors import BadRequest, CoverLetterError, ServerMisconfigured
from .generator import GeminiGenerator
from .model import ContentGenerator, DefaultResources, DocumentRenderer
from .pipeline import CoverLetterPipeline, discard
from .renderer import ChromiumRenderer

# -------------------------------------------------
# Setup
# -------------------------------------------------

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title="LaTeX Cover Letter API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(load_settings().cors_allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -------------------------------------------------
# Schemas
# -------------------------------------------------

class CoverLetterOut(BaseModel):
    cover_letter: str = Field(..., alias="coverLetter")
    pdf_data: str = Field(..., alias="pdfData")


# -------------------------------------------------
# Dependencies
# -------------------------------------------------

def get_settings() -> Settings:
    return load_settings()


def get_generator(settings: Settings = Depends(get_settings)) -> ContentGenerator:
    return GeminiGenerator(model=settings.gemini_model, base_url=settings.gemini_base_url)


def get_renderer() -> DocumentRenderer:
    return ChromiumRenderer()


def get_defaults(settings: Settings = Depends(get_settings)) -> DefaultResources:
    return DefaultResources(settings.default_resume_path, settings.default_template_path)


# -------------------------------------------------
# Error handlers
# -------------------------------------------------

@app.exception_handler(CoverLetterError)
async def cover_letter_error_handler(request: Request, exc: CoverLetterError):
    return JSONResponse(status_code=exc.status_code, content=exc.payload())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    message = "Method not allowed" if exc.status_code == 405 else exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


async def _release_unused_uploads(form, keep) -> None:
    """Close every uploaded part the pipeline will not read.

    Covers unknown field names, earlier duplicates of a field (``form.get``
    only returns the last one) and text fields sent as files.
    """
    for _, value in form.multi_items():
        if isinstance(value, UploadFile) and not any(value is k for k in keep):
            await value.close()


async def _file_field(value) -> Optional[UploadFile]:
    if not isinstance(value, UploadFile):
        return None
    # browsers send an empty, unnamed part for an untouched file input
    if not value.filename:
        await value.close()
        return None
    return value


# -------------------------------------------------
# Routes
# -------------------------------------------------

@app.get("/")
def index():
    return {
        "ok": True,
        "routes": ["/healthz", "/api/generate-cover-letter", "/api/generate-pdf", "/docs"],
    }


@app.get("/healthz")
async def healthz():
    return {"ok": True}


@app.post("/api/generate-cover-letter", response_model=CoverLetterOut)
async def generate_cover_letter(
    request: Request,
    settings: Settings = Depends(get_settings),
    generator: ContentGenerator = Depends(get_generator),
    renderer: DocumentRenderer = Depends(get_renderer),
    defaults: DefaultResources = Depends(get_defaults),
):
    """
    Draft a cover letter in the sample's LaTeX structure and render it to PDF.

    Multipart fields: `resume` (file, optional), `jobDescription` (text),
    `sampleCoverLetter` (file, optional). Missing files fall back to the
    bundled defaults.
    """
    if not settings.gemini_api_key:
        logger.error("GEMINI_API_KEY is not set")
        raise ServerMisconfigured(
            "Gemini API key not configured",
            details="Set the GEMINI_API_KEY environment variable and restart the service",
        )

    try:
        form = await request.form()
    except Exception as e:
        logger.warning("form parse failed: %s", e)
        raise BadRequest("Failed to parse form data") from e

    raw_resume = form.get("resume")
    raw_sample = form.get("sampleCoverLetter")
    await _release_unused_uploads(form, keep=(raw_resume, raw_sample))

    resume = await _file_field(raw_resume)
    sample = await _file_field(raw_sample)
    job_description = form.get("jobDescription")
    if not isinstance(job_description, str):
        job_description = None

    limit = settings.max_upload_bytes
    if any(f is not None and (f.size or 0) > limit for f in (resume, sample)):
        await discard(resume)
        await discard(sample)
        raise BadRequest(f"Uploaded file exceeds the {limit} byte limit")

    pipeline = CoverLetterPipeline(generator, renderer, defaults)
    try:
        result = await pipeline.run(
            settings.gemini_api_key,
            job_description,
            resume_upload=resume,
            template_upload=sample,
        )
    except BadRequest as e:
        logger.warning("rejected submission: %s", e.message)
        raise
    except CoverLetterError:
        logger.exception("generate_cover_letter() failed")
        raise
    except Exception as e:
        logger.exception("generate_cover_letter() failed")
        raise CoverLetterError(str(e), details=f"{type(e).__name__}: {e}") from e

    return {"coverLetter": result.cover_letter, "pdfData": result.pdf_data}


@app.post("/api/generate-pdf", status_code=501)
async def generate_pdf():
    return JSONResponse(
        status_code=501,
        content={
            "error": "PDF generation not available",
            "message": (
                "PDF generation requires LaTeX to be installed on the server. "
                "Please download the LaTeX file and compile it locally using "
                "pdflatex, xelatex, or lualatex."
            ),
            "instructions": [
                "1. Download the LaTeX file",
                "2. Install LaTeX on your system (TeX Live, MiKTeX, etc.)",
                "3. Run: pdflatex cover-letter.tex",
                "4. The PDF will be generated in the same directory",
            ],
        },
    )
