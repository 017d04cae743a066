from datetime import date

from app.nlp.parser import UNTITLED, derive_title, parse_quick_task

TODAY = date(2024, 3, 10)  # a Sunday


def test_parser_strips_trailing_phrases():
    r = parse_quick_task("call mom tomorrow at 5pm high priority", TODAY)
    assert r.text == "call mom"
    assert r.date == "2024-03-11"
    assert r.time == "17:00"
    assert r.priority == "High"


def test_parser_example_with_weekday():
    r = parse_quick_task("lunch with sam next thursday 3pm high priority", TODAY)
    assert r.text == "lunch with sam"
    assert r.date == "2024-03-14"
    assert r.time == "15:00"
    assert r.priority == "High"


def test_parser_keeps_phrases_that_are_not_trailing():
    r = parse_quick_task("high priority meeting tomorrow", TODAY)
    assert r.text == "high priority meeting"
    assert r.date == "2024-03-11"
    assert r.priority == "High"
    assert r.time == "12:00"


def test_parser_keeps_mid_sentence_time_and_date():
    r = parse_quick_task("meeting at 10 tomorrow about budget", TODAY)
    assert r.text == "meeting at 10 tomorrow about budget"
    assert r.time == "10:00"
    assert r.date == "2024-03-11"


def test_parser_handles_minimal_text():
    r = parse_quick_task("Buy milk", TODAY)
    assert r.text == "Buy milk"
    assert r.date == "2024-03-10"
    assert r.time == "12:00"
    assert r.priority == "Medium"


def test_parser_collapses_whitespace_and_on_prefix():
    r = parse_quick_task("  pay   rent   on 4/1  ", TODAY)
    assert r.text == "pay rent"
    assert r.date == "2024-04-01"
    assert r.time == "12:00"


def test_parser_falls_back_to_raw_text_when_title_empties():
    r = parse_quick_task("tomorrow 5pm", TODAY)
    assert r.text == "tomorrow 5pm"
    assert r.date == "2024-03-11"
    assert r.time == "17:00"


def test_derive_title_blank_input():
    assert derive_title("   ") == UNTITLED
