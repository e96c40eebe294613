"""Line splitting helpers shared by the evaluators."""


def split_into_lines(text: str) -> list[str]:
    """
    Split text into trimmed, non-empty lines.

    Uses ``\\r\\n`` as separator when the text contains it, ``\\n`` otherwise.
    Returns a new list on every call so callers may consume it.
    """
    separator = "\r\n" if "\r\n" in text else "\n"
    lines = []
    for segment in text.split(separator):
        segment = segment.strip()
        if segment:
            lines.append(segment)
    return lines


def strip_line_breaks(text: str) -> str:
    """Remove all line breaks, joining the lines without separator."""
    return text.replace("\r\n", "").replace("\n", "")
