from __future__ import annotations

import base64
import logging
from typing import Awaitable, Callable, Optional

from .errors import BadRequest, ResourceError
from .markup import latex_to_html
from .model import (
    ContentGenerator,
    CoverLetterResult,
    DefaultResources,
    DocumentRenderer,
    Submission,
    Upload,
)
from .prompt_templates import USER_PROMPT

logger = logging.getLogger("uvicorn.error")


# -------- Input resolution --------
async def resolve(upload: Optional[Upload], default_loader: Callable[[], Awaitable[str]]) -> str:
    """Content of the uploaded file, or the default when nothing was uploaded.

    The upload is closed (its spooled temp file removed) right after reading,
    whether or not the read succeeded.
    """
    if upload is None:
        return await default_loader()
    try:
        raw = await upload.read()
    except OSError as e:
        raise ResourceError(f"Could not read uploaded file: {e}") from e
    finally:
        await upload.close()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ResourceError("Uploaded file is not UTF-8 text") from e


async def discard(upload: Optional[Upload]) -> None:
    if upload is not None:
        await upload.close()


def compose_prompt(submission: Submission) -> str:
    return USER_PROMPT.format(
        resume=submission.resume,
        job_description=submission.job_description,
        sample_template=submission.sample_template,
    )


# -------- Pipeline --------
class CoverLetterPipeline:
    def __init__(
        self,
        generator: ContentGenerator,
        renderer: DocumentRenderer,
        defaults: DefaultResources,
    ):
        self.generator = generator
        self.renderer = renderer
        self.defaults = defaults

    async def resolve_submission(
        self,
        job_description: str,
        resume_upload: Optional[Upload] = None,
        template_upload: Optional[Upload] = None,
    ) -> Submission:
        try:
            resume = await resolve(resume_upload, self.defaults.load_resume)
        except Exception:
            await discard(template_upload)
            raise
        sample_template = await resolve(template_upload, self.defaults.load_template)
        return Submission(
            resume=resume,
            job_description=job_description,
            sample_template=sample_template,
        )

    async def run(
        self,
        api_key: str,
        job_description: Optional[str],
        resume_upload: Optional[Upload] = None,
        template_upload: Optional[Upload] = None,
    ) -> CoverLetterResult:
        """Draft a cover letter and its PDF for one submission.

        Raises BadRequest for a blank job description (before any upload is
        read or Gemini is called); later failures surface as UpstreamError,
        RenderError or ResourceError.
        """
        if not job_description or not job_description.strip():
            await discard(resume_upload)
            await discard(template_upload)
            raise BadRequest("Job description is required")

        submission = await self.resolve_submission(job_description, resume_upload, template_upload)
        logger.info(
            "inputs resolved (resume uploaded=%s, template uploaded=%s)",
            resume_upload is not None,
            template_upload is not None,
        )

        prompt = compose_prompt(submission)
        cover_letter = await self.generator.generate(prompt, api_key)

        html = latex_to_html(cover_letter)
        pdf = await self.renderer.render(html)
        logger.info("rendered cover letter pdf (%d bytes)", len(pdf))

        return CoverLetterResult(
            cover_letter=cover_letter,
            pdf_data=base64.b64encode(pdf).decode("ascii"),
        )
