from lotide import assert_arrays_equal, assert_equal, assert_objects_equal
from rich.console import Console

from lotide.assertions import AssertionEngine
from lotide.comparison import Comparator, MismatchKind
from lotide.reporting import Reporter
from lotide.subjects import count_letters, middle


class TestAssertionEngine:
    """Engine methods -- print a report, return the result."""

    def test_assert_equal_passes_for_same_primitive(self, engine, output):
        result = engine.assert_equal(count_letters("Apple")["p"], 2)
        assert result.equal
        assert "TEST PASSED" in output()

    def test_assert_equal_is_strict(self, engine, output):
        result = engine.assert_equal(1, "1")
        assert not result.equal
        assert result.reason == MismatchKind.TYPE
        assert "TEST FAILED" in output()

    def test_assert_equal_value_mismatch_reason(self, engine):
        assert engine.assert_equal(1, 2, emit=False).reason == MismatchKind.VALUE

    def test_assert_arrays_equal(self, engine, output):
        assert engine.assert_arrays_equal(middle([1, 2, 3, 4]), [2, 3]).equal
        assert output() == Reporter().render(True, [2, 3], [2, 3]) + "\n"

    def test_assert_arrays_equal_rejects_non_sequences(self, engine):
        assert not engine.assert_arrays_equal("ab", ["a", "b"]).equal

    def test_assert_objects_equal_key_order(self, engine):
        assert engine.assert_objects_equal({"a": "1", "b": "2"}, {"b": "2", "a": "1"}).equal

    def test_assert_objects_equal_length(self, engine):
        result = engine.assert_objects_equal({"c": "1", "d": ["2", 3]}, {"c": "1", "d": ["2", 3, 4]})
        assert not result.equal
        assert result.path == "d"

    def test_assert_matches_any_shape(self, engine):
        assert engine.assert_matches([{"a": 1}], [{"a": 1}]).equal
        assert not engine.assert_matches([{"a": 1}], {"a": 1}).equal

    def test_failure_does_not_stop_later_assertions(self, engine, output):
        engine.assert_equal(1, 2)
        engine.assert_equal(3, 3)
        text = output()
        assert text.index("TEST FAILED") < text.index("TEST PASSED")

    def test_emit_false_prints_nothing(self, engine, output):
        engine.assert_arrays_equal([1], [2], emit=False)
        assert output() == ""

    def test_report_written_byte_for_byte(self, engine, output):
        engine.assert_objects_equal({"a": "1"}, {"a": "2"})
        assert output() == Reporter().render(False, {"a": "1"}, {"a": "2"}) + "\n"
        assert "\x1b[33mTEST FAILED💥💥💥\n\x1b[0m\x1b[36mresult:\n\x1b[0m" in output()

    def test_quiet_console_prints_nothing(self):
        engine = AssertionEngine(console=Console(quiet=True))
        assert engine.assert_equal(1, 1).equal

    def test_shallow_comparator_injection(self, captured_console):
        engine = AssertionEngine(comparator=Comparator(deep=False), console=captured_console)
        assert not engine.assert_objects_equal({"a": {"b": 1}}, {"a": {"b": 1}}).equal


class TestConvenienceFunctions:
    """Module-level entry points print to stdout."""

    def test_assert_objects_equal_prints(self, capsys):
        result = assert_objects_equal({"c": "1", "d": ["2", 3]}, {"d": ["2", 3], "c": "1"})
        assert result.equal
        assert "TEST PASSED" in capsys.readouterr().out

    def test_assert_arrays_equal_prints_failure(self, capsys):
        result = assert_arrays_equal([1, "2"], [1, 2])
        assert not result
        out = capsys.readouterr().out
        assert "TEST FAILED" in out
        assert "[1, '2']" in out

    def test_assert_equal_prints(self, capsys):
        assert_equal(True, True)
        assert "TEST PASSED" in capsys.readouterr().out

    def test_stdout_matches_rendered_report(self, capsys, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert_objects_equal({"a": "1"}, {"a": "1"})
        assert capsys.readouterr().out == Reporter().render(True, {"a": "1"}, {"a": "1"}) + "\n"
