def truncate(text: str, max_chars: int, suffix: str = "... [truncated]") -> str:
    if len(text) <= max_chars:
        return text
    return text[: max_chars - len(suffix)] + suffix


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` fence if the model added one."""
    text = text.strip()
    if text.startswith("```"):
        parts = text.split("\n", 1)
        text = parts[1] if len(parts) > 1 else ""
        if text.rstrip().endswith("```"):
            text = text.rstrip()[:-3]
        text = text.strip()
    return text


def preview(text: str, max_chars: int = 200) -> str:
    """Single-line preview for log messages."""
    return truncate(" ".join(text.split()), max_chars)
