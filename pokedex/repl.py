"""Input handling for the interactive prompt."""


def clean_input(text: str) -> list[str]:
    """Trim, lower-case and split a line into its space-separated words."""
    if text == "":
        return []
    return text.strip().lower().split(" ")