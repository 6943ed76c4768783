from inkmark.core.search import MatchSpan, find_occurrences


def test_overlapping_occurrences():
    spans = find_occurrences("aaaa", "aa")
    assert [span.start for span in spans] == [0, 1, 2]
    assert spans[-1] == MatchSpan(2, 4)


def test_case_insensitive_by_default():
    assert find_occurrences("Foo fOO foo", "foo") == [
        MatchSpan(0, 3), MatchSpan(4, 7), MatchSpan(8, 11),
    ]


def test_case_sensitive():
    assert find_occurrences("Foo fOO foo", "foo", case_sensitive=True) == [MatchSpan(8, 11)]


def test_empty_pattern_or_text():
    assert find_occurrences("text", "") == []
    assert find_occurrences("", "text") == []


def test_offsets_survive_length_changing_lowercase():
    # "İ".lower() is two characters long
    text = "İstanbul istanbul"
    spans = find_occurrences(text, "stanbul")
    assert [text[span.start:span.end] for span in spans] == ["stanbul", "stanbul"]
    assert spans[1].start == 10
