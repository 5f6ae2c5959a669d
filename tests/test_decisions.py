import pytest

from conftest import ScriptedBoundary
from decisions import (
    DecisionCollector, DecisionError, InputError, PromptKind, Step,
    collect_decisions, parse_bounded, parse_stand_count, parse_yes,
)
from stand import Stand


def collect(answers, cash=2.00, unit_cost_cents=2):
    boundary = ScriptedBoundary(answers)
    stand = collect_decisions(Stand(id=1, cash=cash), unit_cost_cents, boundary)
    assert not boundary.answers, "not every scripted answer was asked for"
    return stand, boundary


def test_happy_path_asks_in_order():
    stand, boundary = collect(["50", "2", "20", "N"])
    assert (stand.glasses, stand.signs, stand.price_cents) == (50, 2, 20)
    kinds = [p.kind for p in boundary.prompts]
    assert kinds == [PromptKind.GLASSES, PromptKind.SIGNS, PromptKind.PRICE, PromptKind.CONFIRM_CHANGE]
    assert boundary.prompts[-1].draft == (50, 2, 20)


def test_unaffordable_glasses_are_rejected_not_clamped():
    stand, boundary = collect(["1000", "100", "0", "20", "no"])
    assert stand.glasses == 100
    retry = boundary.prompts[1]
    assert retry.kind is PromptKind.GLASSES
    assert retry.error is InputError.INSUFFICIENT_FUNDS
    assert retry.needed == pytest.approx(20.00)


@pytest.mark.parametrize("bad, error", [("abc", InputError.NOT_A_NUMBER), ("", InputError.NOT_A_NUMBER),
                                        ("1001", InputError.OUT_OF_RANGE), ("-1", InputError.OUT_OF_RANGE)])
def test_bad_glasses_are_reprompted(bad, error):
    stand, boundary = collect([bad, "10", "0", "10", "N"])
    assert stand.glasses == 10
    assert boundary.prompts[1].error is error


def test_signs_checked_against_cash_left_after_lemonade():
    stand, boundary = collect(["100", "1", "0", "15", "N"])
    assert stand.signs == 0
    retry = boundary.prompts[2]
    assert retry.kind is PromptKind.SIGNS
    assert retry.error is InputError.INSUFFICIENT_FUNDS
    assert retry.cash == pytest.approx(0.0)


def test_too_many_signs_is_out_of_range():
    stand, boundary = collect(["0", "51", "5", "15", "N"], cash=100.0)
    assert stand.signs == 5
    assert boundary.prompts[2].error is InputError.OUT_OF_RANGE


def test_price_range():
    stand, boundary = collect(["10", "0", "101", "0", "N"])
    assert stand.price_cents == 0
    assert boundary.prompts[3].error is InputError.OUT_OF_RANGE


def test_changing_answers_restarts_from_glasses():
    boundary = ScriptedBoundary(["10", "1", "20", "Y", "20", "0", "15", "n"])
    collector = DecisionCollector(Stand(id=4), 2, boundary)
    stand = collector.collect()
    assert (stand.glasses, stand.signs, stand.price_cents) == (20, 0, 15)
    assert collector.rounds == 1
    assert collector.step is Step.DONE
    assert [p.kind for p in boundary.prompts].count(PromptKind.GLASSES) == 2


def test_advance_walks_the_state_machine():
    boundary = ScriptedBoundary(["10", "1", "20", "N"])
    collector = DecisionCollector(Stand(id=1), 2, boundary)
    steps = [collector.advance() for _ in range(4)]
    assert steps == [Step.ASK_SIGNS, Step.ASK_PRICE, Step.CONFIRM, Step.DONE]


def test_integer_answers_are_accepted():
    stand, _ = collect([30, 1, 12, False])
    assert (stand.glasses, stand.signs, stand.price_cents) == (30, 1, 12)


def test_parse_bounded_errors():
    with pytest.raises(DecisionError) as exc:
        parse_bounded("1.5", 0, 10)
    assert exc.value.error is InputError.NOT_A_NUMBER
    with pytest.raises(DecisionError) as exc:
        parse_bounded(True, 0, 10)
    assert exc.value.error is InputError.NOT_A_NUMBER


@pytest.mark.parametrize("raw", ["1_000", "\uff15", "\u0665", "+", "1e3"])
def test_only_plain_digits_are_numbers(raw):
    with pytest.raises(DecisionError) as exc:
        parse_bounded(raw, 0, 1000)
    assert exc.value.error is InputError.NOT_A_NUMBER


def test_signed_numbers_parse():
    assert parse_bounded(" +7 ", 0, 10) == 7
    with pytest.raises(DecisionError) as exc:
        parse_bounded("-3", 0, 10)
    assert exc.value.error is InputError.OUT_OF_RANGE


@pytest.mark.parametrize("raw, n", [("3", 3), ("0", 1), ("45", 30), ("abc", 1), (" 7 ", 7)])
def test_stand_count_is_clamped(raw, n):
    assert parse_stand_count(raw) == n


@pytest.mark.parametrize("raw, yes", [("YES", True), ("y", True), ("yep", True), ("no", False),
                                      ("", False), ("maybe", False), (True, True)])
def test_parse_yes(raw, yes):
    assert parse_yes(raw) is yes
