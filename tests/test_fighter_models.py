from datetime import date

import pytest
from pydantic import ValidationError

from fighterstats.models import CleanRecord, RawRecord, Stance, WeightClass


def _payload(**overrides):
    payload = {
        "name": "A",
        "nickname": "",
        "wins": "10",
        "losses": "2",
        "draws": "1",
        "height_cm": "180.0",
        "weight_in_kg": "70.0",
        "reach_in_cm": "",
        "stance": "Orthodox",
        "date_of_birth": "1990-01-01",
    }
    payload.update(overrides)
    return payload


def test_raw_record_parses_strings_and_blanks():
    record = RawRecord.model_validate(_payload())

    assert record.wins == 10
    assert record.nickname is None
    assert record.reach_in_cm is None
    assert record.height_cm == pytest.approx(180.0)
    assert record.date_of_birth == date(1990, 1, 1)
    assert record.takedown_accuracy is None


def test_raw_record_is_frozen():
    record = RawRecord.model_validate(_payload())

    with pytest.raises((TypeError, ValidationError)):
        record.wins = 3  # type: ignore[misc]


def test_raw_record_rejects_other_date_layouts():
    with pytest.raises(ValidationError):
        RawRecord.model_validate(_payload(date_of_birth="01/01/1990"))
    with pytest.raises(ValidationError):
        RawRecord.model_validate(_payload(date_of_birth="631152000"))


def test_raw_record_rejects_negative_and_non_numeric_counters():
    with pytest.raises(ValidationError):
        RawRecord.model_validate(_payload(wins="-1"))
    with pytest.raises(ValidationError):
        RawRecord.model_validate(_payload(losses="two"))


@pytest.mark.parametrize("value", ["10.0", "1e1", " 10", "+10", "١٠"])
def test_raw_record_counters_must_be_plain_digits(value):
    with pytest.raises(ValidationError):
        RawRecord.model_validate(_payload(wins=value))


def test_raw_record_keeps_stance_padding():
    record = RawRecord.model_validate(_payload(stance=" Orthodox "))

    assert record.stance == " Orthodox "


def test_raw_record_keeps_non_finite_literals():
    record = RawRecord.model_validate(_payload(weight_in_kg="nan"))

    assert record.weight_in_kg != record.weight_in_kg


def test_clean_record_is_frozen():
    record = CleanRecord(
        name="A",
        stance=Stance.SWITCH,
        is_orthodox=0.0,
        is_southpaw=0.0,
        is_switch=1.0,
        weight_class=WeightClass.HEAVYWEIGHT,
        weight_height_ratio=0.5,
        reach_height_ratio=0.5,
        submission_per_takedown=0.0,
        age=0.5,
        significant_strikes_lpm=0.5,
        strike_diff=0.5,
        takedown_lpm=0.5,
        submission_lpm=0.5,
        takedown_accuracy=0.5,
        takedown_defense=0.5,
        win_rate=0.75,
    )

    with pytest.raises((TypeError, ValidationError)):
        record.age = 1.0  # type: ignore[misc]
