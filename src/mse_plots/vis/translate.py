"""English to French translation of plot labels."""

import logging

logger = logging.getLogger(__name__)

TRANSLATIONS = {
    "MP": "PG",
    "Probability": "Probabilité",
    "Performance metric": "Indicateur de rendement",
}


def en2fr(text: str, french: bool = False, allow_missing: bool = False) -> str:
    """Translate an English label when ``french`` is set.

    Args:
        text: English label.
        french: Return the French label instead of ``text``.
        allow_missing: Fall back to ``text`` (with a warning) when no
            translation exists, instead of raising.

    Raises:
        KeyError: If no translation exists and ``allow_missing`` is False.
    """
    if not french:
        return text
    if text in TRANSLATIONS:
        return TRANSLATIONS[text]
    if allow_missing:
        logger.warning(f"No French translation for '{text}'")
        return text
    raise KeyError(f"No French translation for '{text}'")
