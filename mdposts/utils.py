import math
import re

MORE_MARKER = re.compile(r"<!--\s*more\s*-->", re.IGNORECASE)


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"


def extract_excerpt(body: str, max_length: int = 0) -> str:
    """
    Preview text for list views.

    Everything before the first ``<!--more-->`` marker. Without a marker the
    whole body is used, or, when ``max_length`` is positive, the body cut back
    to the last word boundary that fits. The result is always a prefix of the
    body, so no ellipsis is appended.
    """
    match = MORE_MARKER.search(body)
    if match:
        return body[: match.start()].rstrip()

    if max_length <= 0 or len(body) <= max_length:
        return body

    cut = body[:max_length]
    boundary = max(cut.rfind(" "), cut.rfind("\n"))
    if boundary > 0:
        cut = cut[:boundary]
    return cut.rstrip()
