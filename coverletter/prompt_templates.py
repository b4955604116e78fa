SYSTEM_PROMPT = "You are an expert in creating professional cover letters. You answer with LaTeX source only."
USER_PROMPT = (
    "Generate a new cover letter based on the following inputs.\n\n"
    "RESUME CONTENT:\n{resume}\n\n"
    "JOB DESCRIPTION:\n{job_description}\n\n"
    "SAMPLE COVER LETTER (LaTeX Template):\n{sample_template}\n\n"
    "Instructions:\n"
    "1. Create a new cover letter that follows the EXACT structure and formatting of the sample LaTeX template\n"
    "2. Maintain all LaTeX commands, document structure, and formatting from the sample\n"
    "3. Replace the content with personalized information based on the resume and job description\n"
    "4. Highlight relevant skills, experiences, and achievements from the resume that match the job requirements\n"
    "5. Ensure the tone and style are professional and compelling\n"
    "6. Keep the same LaTeX document class, packages, and overall structure as the sample\n"
    "7. Only modify the actual content (text) while preserving all LaTeX formatting commands\n\n"
    "Output only the complete LaTeX code for the new cover letter, nothing else."
)
