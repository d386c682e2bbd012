"""
Commit-message vocabulary for the activity summarizer.

Each keyword set is matched as a case-insensitive substring. The sets are
independent: "fix the docs" counts as both a fix and a doc commit.
"""


FIX_TERMS = ("fix", "bug")

DOC_TERMS = ("doc", "readme", "comment")

REFACTOR_TERMS = ("refactor", "cleanup", "remove", "delete")


def _mentions(message: str, terms: tuple[str, ...]) -> bool:
    lower = message.lower()
    return any(term in lower for term in terms)


def is_fix(message: str) -> bool:
    return _mentions(message, FIX_TERMS)


def is_doc(message: str) -> bool:
    return _mentions(message, DOC_TERMS)


def is_refactor(message: str) -> bool:
    return _mentions(message, REFACTOR_TERMS)
