def capitalize_first_letter(text: str) -> str:
    """Upper-case the first character and keep the rest unchanged."""
    return text[:1].upper() + text[1:]
