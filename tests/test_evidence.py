import pytest

from handclass.engine import CATEGORIES, evaluate_hand
from handclass.engine.evidence import draw_orders
from handclass.helpers import RankOrder


def single(hand, strict=True):
    result = evaluate_hand(hand.split(), strict=strict)
    return next(iter(result.values()))


def test_pair_key_and_kickers():
    d = single("Js Ah Kd As Qc").to_dict()
    assert d["keyCards"]["isPair"] == ["As", "Ah"]
    assert d["kickerCards"]["isPair"] == ["Kd", "Qc", "Js"]
    assert d["keyCards"]["isTopPair"] == ["As", "Ah"]


def test_four_of_a_kind_kicker():
    d = single("Ks Ac Ad As Ah").to_dict()
    assert d["keyCards"]["isFourOfAKind"] == ["As", "Ah", "Ad", "Ac"]
    assert d["kickerCards"]["isFourOfAKind"] == ["Ks"]


def test_two_pair_kicker():
    d = single("As Ah Kd Kc Qs").to_dict()
    assert d["keyCards"]["isTwoPair"] == ["As", "Ah", "Kd", "Kc"]
    assert d["kickerCards"]["isTwoPair"] == ["Qs"]


def test_wheel_key_runs_five_high():
    d = single("As 2h 3d 4c 5s").to_dict()
    assert d["isStraight"] is True
    assert d["keyCards"]["isStraight"] == ["5s", "4c", "3d", "2h", "As"]
    assert d["kickerCards"]["isStraight"] == []


def test_flush_draw_key():
    d = single("As Ks Qs Js 9h").to_dict()
    assert d["keyCards"]["isFlushDraw"] == ["As", "Ks", "Qs", "Js"]
    assert d["kickerCards"]["isFlushDraw"] == ["9h"]


def test_straight_draw_keys():
    d = single("9s 8h 7d 6c Kh").to_dict()
    assert d["keyCards"]["isOpenEndedStraightDraw"] == ["9s", "8h", "7d", "6c"]
    assert d["kickerCards"]["isOpenEndedStraightDraw"] == ["Kh"]
    assert d["keyCards"]["isInsideStraightDraw"] == []

    d = single("9s 8h 7d 5c Kh").to_dict()
    assert d["keyCards"]["isInsideStraightDraw"] == ["9s", "8h", "7d", "5c"]
    assert d["keyCards"]["isStraightDraw"] == ["9s", "8h", "7d", "5c"]


def test_high_card_has_only_kickers():
    d = single("9s Kh Qd Jc As").to_dict()
    assert d["isHighCard"] is True
    assert d["keyCards"]["isHighCard"] == []
    assert d["kickerCards"]["isHighCard"] == ["As", "Kh", "Qd", "Jc", "9s"]


def test_high_card_evidence_empty_when_false():
    d = single("As Ah Kd Qc Js").to_dict()
    assert d["isHighCard"] is False
    assert d["kickerCards"]["isHighCard"] == []


@pytest.mark.parametrize("strict", [True, False])
@pytest.mark.parametrize("hand", [
    "As Ks Qs Js Ts",
    "As Ah Ad Kc Ks",
    "As Ah Kd Kc Qs",
    "As 2h 3d 4c 5s",
    "9s 8h 7d 5c Kh",
    "As Ks Qs Jh 9h",
    "As Kh 2d 2c 2h",
    "9h 9s 8h 7h 2h",
])
def test_key_and_kickers_partition_the_hand(hand, strict):
    ev = single(hand, strict=strict)
    truth = ev.flags.as_dict()
    cards = set(ev.cards)
    for name in CATEGORIES:
        key, kick = ev.key_cards[name], ev.kicker_cards[name]
        if not truth[name]:
            assert key == () and kick == (), name
            continue
        if name != "high_card":
            assert key, name
        assert not set(key) & set(kick), name
        assert set(key) | set(kick) == cards, name
        assert len(key) + len(kick) == 5, name


def test_ace_low_draw_flags_hold_alongside_ace_high_draw():
    # both orders are checked, even when the ace-high slice already qualifies
    d = single("9s 8h 7d 6c Kh").to_dict()
    assert d["isOpenEndedStraightDraw"] is True
    assert d["isOpenEndedStraightDrawWheel"] is True
    assert d["keyCards"]["isOpenEndedStraightDrawWheel"] == ["9s", "8h", "7d", "6c"]
    assert d["kickerCards"]["isOpenEndedStraightDrawWheel"] == ["Kh"]


def test_made_straight_draw_key_uses_ace_low_slice():
    ev = single("As Ks Qs Js Th", strict=False)
    assert draw_orders(ev.flags) == (RankOrder.ACE_LOW,)
    d = ev.to_dict()
    assert d["keyCards"]["isOpenEndedStraightDraw"] == ["Ks", "Qs", "Js", "Th"]
    assert d["kickerCards"]["isOpenEndedStraightDraw"] == ["As"]
    assert d["keyCards"]["isStraightDraw"] == ["Ks", "Qs", "Js", "Th"]
    assert d["keyCards"]["isOpenEndedStraightDrawWheel"] == ["Ks", "Qs", "Js", "Th"]


def test_unmade_hand_searches_ace_high_first():
    ev = single("As Ks Qs Js 9h", strict=False)
    assert draw_orders(ev.flags) == (RankOrder.ACE_HIGH, RankOrder.ACE_LOW)
    assert ev.to_dict()["keyCards"]["isOpenEndedStraightDraw"] == ["As", "Ks", "Qs", "Js"]
