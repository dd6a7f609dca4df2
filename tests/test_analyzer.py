import io

import pytest

from analyzer import REPORT_HEADER, FrequencyAnalyzer, _ProgressReader


def make_analyzer(**kwargs):
    kwargs.setdefault("show_progress", False)
    return FrequencyAnalyzer(**kwargs)


def test_analyze_text_counts_totals_and_unique():
    analyzer = make_analyzer()
    analyzer.analyze_text("The quick the fox, quick THE 42 x9")
    assert analyzer.total_words == 8
    assert analyzer.unique_words == 3
    assert [(e.key, e.count) for e in analyzer.entries()] == [("fox", 1), ("quick", 2), ("the", 3)]


def test_analyze_file_with_small_chunks(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("Alpha beta; alpha-gamma\nBETA alpha.\n", encoding="utf-8")
    analyzer = make_analyzer(chunk_size=4)
    analyzer.analyze_file(str(path))
    assert analyzer.total_words == 6
    assert [(e.key, e.count) for e in analyzer.entries()] == [("alpha", 3), ("beta", 2), ("gamma", 1)]


def test_analyze_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        make_analyzer().analyze_file(str(tmp_path / "missing.txt"))


def test_analyze_file_without_words(tmp_path):
    path = tmp_path / "numbers.txt"
    path.write_text("1 2 3 ...", encoding="utf-8")
    analyzer = make_analyzer()
    analyzer.analyze_file(str(path))
    assert analyzer.total_words == 3
    assert analyzer.unique_words == 0
    assert analyzer.entries() == []


def test_entries_refresh_after_more_text():
    analyzer = make_analyzer()
    analyzer.analyze_text("b a")
    assert [e.key for e in analyzer.entries()] == ["a", "b"]
    analyzer.analyze_text("c")
    assert [e.key for e in analyzer.entries()] == ["a", "b", "c"]


def test_write_report(tmp_path):
    analyzer = make_analyzer()
    analyzer.analyze_text("the quick the fox quick the")
    out = tmp_path / "report.txt"
    analyzer.write_report(str(out))
    assert out.read_text(encoding="utf-8").splitlines() == [
        REPORT_HEADER,
        "fox : 1",
        "quick : 2",
        "the : 3",
    ]


def test_write_report_to_bad_path_raises(tmp_path):
    analyzer = make_analyzer()
    analyzer.analyze_text("word")
    with pytest.raises(OSError):
        analyzer.write_report(str(tmp_path / "no-such-dir" / "report.txt"))


def test_rejects_bad_chunk_size():
    with pytest.raises(ValueError):
        FrequencyAnalyzer(chunk_size=0)


def test_kelvin_sign_is_not_counted_as_ascii_word():
    analyzer = make_analyzer()
    analyzer.analyze_text("Key key")
    assert analyzer.total_words == 2
    assert [(e.key, e.count) for e in analyzer.entries()] == [("key", 1)]


class RecordingBar:
    def __init__(self):
        self.total = 0

    def update(self, n):
        self.total += n


def test_progress_advances_by_encoded_bytes():
    text = "héllo wörld"
    bar = RecordingBar()
    reader = _ProgressReader(io.StringIO(text), bar, "utf-8")
    while reader.read(3):
        pass
    assert bar.total == len(text.encode("utf-8"))
