import io

import pytest

import main
from config import CALCULATOR_CONFIG, validate_config


class TestRun:
    """Test suite for the line-by-line driver loop."""

    def test_results_and_errors(self):
        out, err = io.StringIO(), io.StringIO()
        reader = io.StringIO("2 3 +\n+ 1 1\n1 0 /\n\n7 2 %\n")

        failures = main.run(reader, out=out, err=err)

        assert failures == 3
        assert out.getvalue() == "5\n1\n"
        assert err.getvalue().splitlines() == [
            "SyntaxError: invalid syntax at 1",
            "ArithmeticError: division by zero at 3",
            "SyntaxError: invalid syntax",
        ]

    def test_verbose_traces_to_stdout(self):
        out, err = io.StringIO(), io.StringIO()

        main.run(io.BytesIO(b"1 2 +\r\n"), verbose=True, out=out, err=err)

        assert out.getvalue().splitlines() == [
            '["2", "+"] [1]',
            '["+"] [1, 2]',
            '[] [3]',
            '3',
        ]
        assert err.getvalue() == ""


class TestMain:
    """Test suite for the command-line entry point."""

    def test_reads_file(self, tmp_path, capsys):
        formula_file = tmp_path / "formulas.txt"
        formula_file.write_text("5\n2 3 *\n1 2 ^\n", encoding="utf-8")

        assert main.main([str(formula_file)]) == 0

        captured = capsys.readouterr()
        assert captured.out == "5\n6\n"
        assert "InvalidTokenError: invalid token as 3" in captured.err

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"-50\n2 3 -\n")))

        assert main.main([]) == 0
        assert capsys.readouterr().out == "-50\n-1\n"

    def test_missing_file(self, tmp_path, capsys):
        assert main.main([str(tmp_path / "missing.txt")]) == 1
        err = capsys.readouterr().err
        assert "IoError" in err
        assert err.count("missing.txt") == 1

    def test_undecodable_line_keeps_earlier_results(self, tmp_path, capsys):
        formula_file = tmp_path / "formulas.txt"
        formula_file.write_bytes(b"2 3 +\n\xff\xfe 1\n4 4 +\n")

        assert main.main([str(formula_file)]) == 1

        captured = capsys.readouterr()
        assert captured.out == "5\n"
        assert captured.err.startswith("IoError: ")
        assert len(captured.err.splitlines()) == 1

    def test_verbose_flag(self, tmp_path, capsys):
        formula_file = tmp_path / "formulas.txt"
        formula_file.write_text("4 2 /\n", encoding="utf-8")

        assert main.main(["-v", str(formula_file)]) == 0
        assert capsys.readouterr().out.splitlines()[-1] == "2"

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main.main(["--version"])
        assert exc_info.value.code == 0
        assert "1.0.0" in capsys.readouterr().out


def test_validate_config():
    validate_config()


def test_calculator_config_only_holds_live_settings():
    assert set(CALCULATOR_CONFIG) == {"check_zero_division"}
