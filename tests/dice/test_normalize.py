from __future__ import annotations

from dicebot.dice import Constant, DiceRoll, SignedTerm, simplify_terms, sort_terms


def dice(sign: int, count: int, faces: int) -> SignedTerm:
    return SignedTerm(sign, DiceRoll(count=count, faces=faces))


def const(sign: int, value: int) -> SignedTerm:
    return SignedTerm(sign, Constant(value))


def test_sort_puts_dice_before_constants() -> None:
    terms = [const(1, 4), dice(-1, 1, 4), dice(1, 2, 6), const(-1, 3), dice(1, 3, 6), dice(1, 1, 20)]
    assert sort_terms(terms) == [
        dice(1, 1, 20),
        dice(1, 3, 6),
        dice(1, 2, 6),
        dice(-1, 1, 4),
        const(1, 4),
        const(-1, 3),
    ]


def test_sort_does_not_merge() -> None:
    terms = [dice(1, 3, 6), dice(1, 2, 6)]
    assert len(sort_terms(terms)) == 2


def test_sort_orders_constants_by_value() -> None:
    assert sort_terms([const(1, 2), const(1, 9), const(-1, 1)]) == [
        const(1, 9),
        const(1, 2),
        const(-1, 1),
    ]


def test_simplify_merges_like_terms() -> None:
    terms = [dice(1, 2, 6), const(1, 3), dice(1, 3, 6), const(-1, 5), dice(-1, 1, 8)]
    assert simplify_terms(terms) == [dice(1, 5, 6), dice(-1, 1, 8), const(-1, 2)]


def test_simplify_drops_cancelled_groups() -> None:
    terms = [dice(1, 2, 6), dice(-1, 2, 6), const(1, 4), dice(1, 1, 4)]
    assert simplify_terms(terms) == [dice(1, 1, 4), const(1, 4)]


def test_simplify_resigns_negative_groups() -> None:
    terms = [dice(1, 1, 10), dice(-1, 3, 10)]
    assert simplify_terms(terms) == [dice(-1, 2, 10)]


def test_simplify_can_empty_everything() -> None:
    assert simplify_terms([dice(1, 1, 6), dice(-1, 1, 6), const(1, 2), const(-1, 2)]) == []


def test_simplify_is_idempotent() -> None:
    terms = [dice(1, 2, 6), const(1, 3), dice(-1, 4, 6), dice(1, 1, 12), const(-1, 7)]
    once = simplify_terms(terms)
    assert simplify_terms(once) == once
