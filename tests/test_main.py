"""
Test the command-line driver
"""
import pytest

from algorithms import run_all_algorithms
from main import build_cases, chart_path_for, create_parser, format_performance_table, main, save_performance_chart


class TestBuildCases:
    """Test turning arguments into (base, pattern) pairs"""

    def setup_method(self):
        self.parser = create_parser()

    def test_defaults_to_samples(self) -> None:
        cases = build_cases(self.parser.parse_args([]))
        assert ("Sampletestsampletestingsample.", "amp") in cases

    def test_one_case_per_pattern(self) -> None:
        args = self.parser.parse_args(["-t", "abcabc", "-p", "ab", "-p", "bc"])
        assert build_cases(args) == [("abcabc", "ab"), ("abcabc", "bc")]

    def test_ignore_case_lowers_both_sides(self) -> None:
        args = self.parser.parse_args(["-t", "Sample", "-p", "SAM", "--ignore-case"])
        assert build_cases(args) == [("sample", "sam")]

    def test_clean_collapses_whitespace(self) -> None:
        args = self.parser.parse_args(["-t", "a   b\n c", "-p", "b c", "--clean"])
        assert build_cases(args) == [("a b c", "b c")]

    def test_reads_file(self, tmp_path) -> None:
        path = tmp_path / "base.txt"
        path.write_text("from a file", encoding="utf-8")
        args = self.parser.parse_args(["-f", str(path), "-p", "file"])
        assert build_cases(args) == [("from a file", "file")]

    def test_text_and_file_are_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            self.parser.parse_args(["-t", "abc", "-f", "x.txt", "-p", "a"])


class TestOutput:
    """Test the performance table and chart"""

    def setup_method(self):
        self.results = run_all_algorithms("Sampletestsampletestingsample.", "amp")

    def test_table_has_header_and_one_row_per_algorithm(self) -> None:
        lines = format_performance_table(self.results).splitlines()
        assert lines[0].split() == ["Algorithm", "Time", "(ms)", "Comparisons", "Hits"]
        assert len(lines) == 2 + len(self.results)

    def test_table_rows_name_each_algorithm(self) -> None:
        table = format_performance_table(self.results)
        assert all(result["name"] in table for result in self.results)

    def test_saves_chart(self, tmp_path) -> None:
        path = tmp_path / "perf.png"
        save_performance_chart(self.results, str(path))
        assert path.stat().st_size > 0

    def test_chart_path_numbering(self) -> None:
        assert chart_path_for("perf.png", 0, 1) == "perf.png"
        assert chart_path_for("perf.png", 1, 3) == "perf_2.png"
        assert chart_path_for("perf", 0, 2) == "perf_1.png"


class TestMain:
    """Test main() end to end"""

    def test_runs_samples(self, capsys) -> None:
        assert main([]) == 0
        out = capsys.readouterr().out
        assert 'pattern = "amp", 3 hits produced (sorted)' in out
        assert "Boyer-Moore:" in out

    def test_runs_selected_algorithm(self, capsys) -> None:
        assert main(["-t", "aaaaa", "-p", "aa", "-a", "kmp"]) == 0
        out = capsys.readouterr().out
        assert "Knuth-Morris-Pratt (KMP):" in out
        assert "4 hits produced" in out
        assert "Naive:" not in out

    def test_unsorted_flag(self, capsys) -> None:
        assert main(["-t", "abcabc", "-p", "bc", "--unsorted"]) == 0
        assert "(unsorted)" in capsys.readouterr().out

    def test_context_width_flag(self, capsys) -> None:
        assert main(["-t", "abcabc", "-p", "bc", "-a", "naive", "-w", "0"]) == 0
        assert "hit (100%, pos 1 to 3): ...<bc>..." in capsys.readouterr().out

    def test_empty_pattern_fails(self) -> None:
        assert main(["-t", "abc", "-p", ""]) == 1

    def test_pattern_without_text_fails(self) -> None:
        assert main(["-p", "abc"]) == 1

    def test_text_without_pattern_fails(self) -> None:
        assert main(["-t", "abc"]) == 1

    def test_unreadable_file_fails(self, tmp_path) -> None:
        assert main(["-f", str(tmp_path / "missing.txt"), "-p", "a"]) == 1

    def test_negative_context_width_is_a_usage_error(self) -> None:
        with pytest.raises(SystemExit):
            main(["-t", "abc", "-p", "a", "-w", "-1"])

    def test_writes_chart(self, tmp_path, capsys) -> None:
        path = tmp_path / "perf.png"
        assert main(["-t", "abcabc", "-p", "bc", "--chart", str(path)]) == 0
        assert path.exists()
