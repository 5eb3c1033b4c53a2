"""
Resume tailoring: load the base resume, compose the prompt and ask the
completion service for a rewritten plain-text resume.

The returned text must follow the layout contract the PDF engine parses:
six header lines (headline, name, email, phone, location, link), then
sections ending in ':', job lines as 'Role at Company: MM/YYYY - MM/YYYY',
and skills categories prefixed with '· '.
"""
import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_BASE_RESUME = Path(__file__).parent / "data" / "base_resume.txt"

SYSTEM_INSTRUCTION = "You are a helpful assistant for creating professional resume content."


def load_base_resume(path: Optional[str] = None) -> str:
    resume_path = Path(path or os.getenv("BASE_RESUME_PATH") or DEFAULT_BASE_RESUME)
    return resume_path.read_text(encoding="utf-8")


def build_prompt(base_resume: str, job_description: str) -> str:
    return f"""
You are a world-class technical resume assistant.

SYSTEM INSTRUCTION: Make the resume align as closely as possible with the Job Description (JD). Proactively REPLACE, REPHRASE, and ADD bullet points under each Experience entry, especially recent/current roles, so the language, skills, and technologies match the JD. Do NOT leave any Experience bullet unchanged if it could better reflect keywords, duties, or requirements from the JD. Prioritize jobs/roles closest to the desired job.

Your main objectives:
1. Maximize keyword/skills and responsibilities match between the resume and the JD. Use the exact technology, tool, process, or methodology names from the JD wherever accurate.
2. Preserve all original company names, job titles, and periods/dates in the Professional Experience section.
3. Give each Experience entry 6-8 highly relevant, impactful bullet points; rewrite or add bullets so they reflect the duties and stacks requested in the JD.
4. Emphasize the JD's main tech stack in the most recent or relevant roles and distribute secondary requirements across earlier positions naturally.
5. Place the SKILLS section immediately after the SUMMARY section and before the PROFESSIONAL EXPERIENCE section.
6. In the Summary, integrate the most essential skills and requirements from the JD in a natural tone.
7. In every section (Summary, Skills, Experience), include as many relevant unique keywords from the JD as possible.
8. Build a rich, comprehensive Skills section grouped under these categories, in this order:
Frontend
Backend
Databases
Cloud & DevOps
Testing & Automation
AI/Automation Tools (if relevant)
Other Tools
Each category must have 12-20+ comma-separated skills, JD keywords first.
9. Preserve all quantified metrics and add quantification to new or reworded bullets; aim for at least 75% of Experience bullets to include a number, percentage, range, or scale.
10. No action verb may appear more than twice in the document, and never in adjacent bullets. Start each bullet with a unique action verb whenever possible.
11. Prefer phrasing taken directly from the JD where it truthfully reflects the candidate's background.
12. Ensure all key JD technologies appear at least once across the resume.
13. Keep a natural, realistic tone; only include technologies the candidate could plausibly have used.
14. Include explicit database-related experience in the Professional Experience section.
15. Maintain all original section headers and formatting. Do not include commentary or extra text outside the resume.

Here is the base resume:

{base_resume}

Here is the target job description:

{job_description}

Output the improved resume as plain text, exactly following the original resume's format, including the unchanged headline at the top.
Formatting rules for the output:
- The first six non-empty lines are, in order: headline, full name, email, phone, location, profile link.
- Every section header is on its own line and ends with a colon (e.g. "Summary:", "Skills:").
- Every job line reads "Role at Company: MM/YYYY - MM/YYYY" (use "Current" for an ongoing role).
- Every skills category line starts with "· " followed by the category name, with its skills on the next line.
- Use **double asterisks** only to emphasize key technologies inside bullets; no other decorative lines or symbols.
"""


async def tailor_resume(ai, job_description: str, base_resume: Optional[str] = None) -> str:
    """Ask the completion service for tailored resume text; may be empty if the model sent nothing."""
    base_resume = base_resume if base_resume is not None else load_base_resume()
    prompt = build_prompt(base_resume, job_description)
    logger.info(f"Requesting tailored resume from {getattr(ai, 'model', 'completion service')}")
    tailored = await ai.complete(SYSTEM_INSTRUCTION, prompt)
    return tailored or ""
