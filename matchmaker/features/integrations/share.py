"""Decorative share text shown next to a result. Not part of the assignment output."""

SHARE_TEMPLATE = (
    "I just found out I'm a {persona}! \U0001F987\U0001F480 "
    "Take the Monster Matchmaker quiz and meet your inner monster."
)


def build_share_message(persona_name: str, max_chars: int = 200) -> str:
    """Deterministic share message, cut to max_chars characters."""
    if max_chars < 1:
        raise ValueError(f"max_chars must be at least 1, got {max_chars}")
    message = SHARE_TEMPLATE.format(persona=persona_name)
    if len(message) <= max_chars:
        return message
    return message[:max_chars].rstrip()
