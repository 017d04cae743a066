import pytest

from app.nlp.extractors import extract_date, extract_priority, extract_time


@pytest.mark.parametrize(
    "text, expected",
    [
        ("lunch with sam next thursday 3pm", "next thursday"),
        ("see doc next Mon", "next Mon"),
        ("call mom TOMORROW", "TOMORROW"),
        ("dentist 3/15 at 2pm", "3/15"),
        ("renew passport 12-1-2025", "12-1-2025"),
    ],
)
def test_date_extractor_finds_phrase(text, expected):
    found = extract_date(text)
    assert found is not None
    assert found.category == "date"
    assert found.text == expected
    assert text[found.start : found.end] == expected


def test_date_extractor_prefers_next_weekday_over_tomorrow():
    found = extract_date("tomorrow or next friday")
    assert found.text == "next friday"


def test_date_extractor_full_weekday_name_not_truncated():
    assert extract_date("standup next monday").text == "next monday"


def test_date_extractor_short_weekday_forms():
    assert extract_date("lunch next tues").text == "next tues"
    assert extract_date("review next thurs 3pm").text == "next thurs"
    assert extract_date("gym next weds").text == "next weds"


def test_date_extractor_none_when_absent():
    assert extract_date("buy milk") is None
    assert extract_date("next week sometime") is None


def test_time_extractor_forms():
    assert extract_time("standup 9:30").text == "9:30"
    assert extract_time("call at 5pm").text == "5pm"
    assert extract_time("call at 5 PM").text == "5 PM"
    assert extract_time("gym 7").text == "7"


def test_time_extractor_prefers_explicit_clock_over_bare_number():
    assert extract_time("buy 2 apples at 6pm").text == "6pm"


def test_time_extractor_ignores_date_digits():
    assert extract_time("dentist 3/15") is None
    assert extract_time("dentist 3/15 at 2pm").text == "2pm"


def test_time_extractor_none_when_absent():
    assert extract_time("room 101 cleanup") is None
    assert extract_time("buy milk") is None


def test_priority_extractor_with_priority_word():
    found = extract_priority("call mom tomorrow at 5pm high priority")
    assert found.category == "priority"
    assert found.text == "high priority"
    assert found.token == "high"


def test_priority_extractor_abbreviations():
    assert extract_priority("med priority review").token == "med"
    assert extract_priority("fix bug hi priority").token == "hi"
    assert extract_priority("low battery").token == "low"


def test_priority_extractor_needs_word_boundaries():
    # the "m" in "mom" and the "l" in "call" are not priorities
    assert extract_priority("call mom") is None
    assert extract_priority("meeting at 3pm") is None


def test_extractors_do_not_modify_input():
    text = "lunch next fri 1pm low priority"
    extract_date(text)
    extract_time(text)
    extract_priority(text)
    assert text == "lunch next fri 1pm low priority"
