from collections.abc import Mapping
from typing import Any, Dict

from .errors import ValidationError

DEFAULT_TEAMS = ('ASKARIYYA', 'KUTHAIBA')
DEFAULT_CATEGORIES = ('subJunior', 'junior', 'senior')


def default_document() -> Dict[str, Any]:
    """Fresh copy of the document the process starts with."""
    return {
        'overall': [{'name': name, 'points': 0} for name in DEFAULT_TEAMS],
        'categories': {key: [] for key in DEFAULT_CATEGORIES},
    }


def validate_document(candidate: Any) -> Dict[str, Any]:
    """Structural check only: a mapping with a `categories` mapping.

    Scores, team names and entrant records pass through uninterpreted.
    """
    if candidate is None:
        raise ValidationError('update payload is empty')
    if not isinstance(candidate, Mapping):
        raise ValidationError(f'update payload must be an object, got {type(candidate).__name__}')
    if 'categories' not in candidate:
        raise ValidationError('update payload is missing categories')
    if not isinstance(candidate['categories'], Mapping):
        raise ValidationError('categories must be an object keyed by category')
    return dict(candidate)
