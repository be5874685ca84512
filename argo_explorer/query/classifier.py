"""
Argo Explorer Query Classifier

Maps free-text chat queries to an ``Intent`` by case-insensitive keyword
containment.  Rules are checked in order and the first hit wins, so a query
mentioning both temperature and salinity is a temperature query.

Any callable ``str -> Intent`` can stand in for ``classify`` (see
``Classifier``); the executor never inspects how the intent was chosen.
"""

from typing import Callable

from argo_explorer.store.models import Intent

Classifier = Callable[[str], Intent]

# Priority order matters.
_KEYWORD_RULES: tuple[tuple[Intent, tuple[str, ...]], ...] = (
    (Intent.TEMPERATURE, ("temperature",)),
    (Intent.SALINITY, ("salinity",)),
    (Intent.LOCATION, ("float", "location")),
)


def classify(text: str) -> Intent:
    """
    Classify a chat query.

    >>> classify("Show temperature and salinity")
    <Intent.TEMPERATURE: 'temperature'>
    >>> classify("find floats near equator")
    <Intent.LOCATION: 'location'>
    """
    text_lower = (text or "").lower()
    for intent, keywords in _KEYWORD_RULES:
        if any(keyword in text_lower for keyword in keywords):
            return intent
    return Intent.GENERAL
