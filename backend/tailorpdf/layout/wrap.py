from typing import Callable, List

from .measure import text_width

Measure = Callable[[str, str, float], float]


def wrap_text(text: str, font: str, size: float, max_width: float,
              measure: Measure = text_width) -> List[str]:
    """Greedy word wrap. A word wider than max_width gets a line of its own, unsplit."""
    lines: List[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and measure(candidate, font, size) > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines
