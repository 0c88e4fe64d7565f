"""Text helpers shared by the training and coaching services."""

import unicodedata


def normalize_text(text: str) -> str:
    """Strip BOM/replacement characters and apply NFKC normalization."""
    if not text:
        return ""
    cleaned = text.replace("\ufeff", "").replace("\ufffd", "")
    return unicodedata.normalize("NFKC", cleaned)


def summarize_document(content: str, max_length: int = 200) -> str:
    """Shorten content to at most ``max_length`` characters plus an ellipsis.

    Cuts after the last full stop inside the window when there is one,
    otherwise at the window edge.

    Args:
        content: Text to shorten.
        max_length: Size of the window.

    Returns:
        The original text if it already fits, otherwise the shortened text
        followed by `` ...``.
    """
    if len(content) <= max_length:
        return content

    truncated = content[:max_length]
    last_period = truncated.rfind(".")

    if last_period > 0:
        return truncated[: last_period + 1] + " ..."

    return truncated + " ..."


def content_preview(content: str, max_length: int) -> str:
    """Hard cut at ``max_length`` with a trailing ``...`` when truncated."""
    if len(content) > max_length:
        return content[:max_length] + "..."
    return content
