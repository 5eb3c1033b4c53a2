"""
Resume text parser.

The tailored resume is expected to open with six header lines (headline,
name, email, phone, location, link) before the first section. This is a
positional convention, not a labelled format: nothing is validated. Short
input leaves the trailing fields empty and keeps all of its text as body,
so a malformed completion still renders its content.
"""
from dataclasses import dataclass
from typing import List, Optional

HEADER_FIELDS = ("headline", "name", "email", "phone", "location", "link")


@dataclass(frozen=True)
class HeaderInfo:
    headline: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    link: Optional[str] = None

    @property
    def contact_parts(self) -> List[str]:
        """Contact fields in display order, absent ones dropped."""
        return [p for p in (self.location, self.phone, self.email, self.link) if p]


@dataclass(frozen=True)
class ParsedDocument:
    header: HeaderInfo
    body: str

    @property
    def body_lines(self) -> List[str]:
        return self.body.split("\n") if self.body else []


def parse_resume(resume_text: str) -> ParsedDocument:
    lines = resume_text.split("\n")
    info: List[str] = []
    # fewer than six header lines: the whole text is laid out as body
    body_start = 0
    for idx, line in enumerate(lines):
        if line.strip():
            info.append(line.strip())
        if len(info) == len(HEADER_FIELDS):
            body_start = idx + 1
            break

    while body_start < len(lines) and not lines[body_start].strip():
        body_start += 1

    header = HeaderInfo(**dict(zip(HEADER_FIELDS, info)))
    return ParsedDocument(header=header, body="\n".join(lines[body_start:]))
