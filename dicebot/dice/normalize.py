"""Display ordering and like-term merging for signed terms."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List

from .terms import Constant, DiceRoll, SignedTerm


class ExpressionMode(str, Enum):
    DEFAULT = "default"
    SIMPLIFIED = "simplified"


def sort_terms(terms: Iterable[SignedTerm]) -> List[SignedTerm]:
    """Dice first (sign, faces, count descending), then constants (sign, value descending)."""
    terms = list(terms)
    dice = [item for item in terms if item.is_dice]
    constants = [item for item in terms if not item.is_dice]
    dice.sort(key=lambda item: (-item.sign, -item.term.faces, -item.term.count))
    constants.sort(key=lambda item: (-item.sign, -item.term.value))
    return dice + constants


def simplify_terms(terms: Iterable[SignedTerm]) -> List[SignedTerm]:
    """
    Merge like terms into at most one signed term per face count plus one constant.

    Groups that cancel out are dropped, so the result may be empty.
    """
    net_constant = 0
    net_counts: Dict[int, int] = {}
    for item in terms:
        if isinstance(item.term, DiceRoll):
            faces = item.term.faces
            net_counts[faces] = net_counts.get(faces, 0) + item.sign * item.term.count
        else:
            net_constant += item.sign * item.term.value

    merged = [
        SignedTerm(1 if count > 0 else -1, DiceRoll(count=abs(count), faces=faces))
        for faces, count in net_counts.items()
        if count != 0
    ]
    merged.sort(key=lambda item: (-item.sign, -item.term.faces))
    if net_constant != 0:
        merged.append(SignedTerm(1 if net_constant > 0 else -1, Constant(abs(net_constant))))
    return merged


def normalize_terms(terms: Iterable[SignedTerm], mode: ExpressionMode) -> List[SignedTerm]:
    if ExpressionMode(mode) is ExpressionMode.SIMPLIFIED:
        return simplify_terms(terms)
    return sort_terms(terms)


__all__ = ["ExpressionMode", "sort_terms", "simplify_terms", "normalize_terms"]
