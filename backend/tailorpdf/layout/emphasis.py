import re
from dataclasses import dataclass
from typing import List

from .measure import text_width

BOLD_SPAN_RE = re.compile(r"(\*\*[^*]+\*\*)")


@dataclass(frozen=True)
class Run:
    text: str
    bold: bool = False


@dataclass(frozen=True)
class PlacedRun:
    x: float
    text: str
    font: str


def split_emphasis(line: str) -> List[Run]:
    """Split a line on **bold** markers into alternating runs, markers removed."""
    runs = []
    for part in BOLD_SPAN_RE.split(line):
        if not part:
            continue
        if BOLD_SPAN_RE.fullmatch(part):
            runs.append(Run(part[2:-2], bold=True))
        else:
            runs.append(Run(part))
    return runs


def place_runs(line: str, x: float, size: float, regular_font: str, bold_font: str) -> List[PlacedRun]:
    """Position runs left to right; each starts where the previous run's measured width ends."""
    placed = []
    offset = x
    for run in split_emphasis(line):
        font = bold_font if run.bold else regular_font
        placed.append(PlacedRun(x=offset, text=run.text, font=font))
        offset += text_width(run.text, font, size)
    return placed


def draw_emphasis(canvas, line: str, x: float, y: float, size: float, color,
                  regular_font: str, bold_font: str) -> List[PlacedRun]:
    placed = place_runs(line, x, size, regular_font, bold_font)
    canvas.setFillColor(color)
    for run in placed:
        canvas.setFont(run.font, size)
        canvas.drawString(run.x, y, run.text)
    return placed
