import pytest

from geometry import Point
from points_io import load_points
from program import main


@pytest.fixture
def square_file(tmp_path):
    path = tmp_path / "square.txt"
    path.write_text("5\n0 10\n10 10\n5 5\n10 0\n0 0\n", encoding="utf-8")
    return path


def test_prints_hull(square_file, capsys):
    assert main([str(square_file)]) == 0
    assert capsys.readouterr().out == "0 0\n10 0\n10 10\n0 10\n0 0\n"


def test_writes_output_file(square_file, tmp_path):
    out = tmp_path / "hull.txt"
    assert main([str(square_file), "-o", str(out)]) == 0
    assert load_points(out) == [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10), Point(0, 0)]


def test_unwritable_output_file(square_file, tmp_path, caplog):
    out = tmp_path / "no_such_dir" / "hull.txt"
    assert main([str(square_file), "-o", str(out)]) == 1
    assert "Could not write hull" in caplog.text
    assert not out.exists()


def test_random_points(capsys):
    assert main(["--random", "50", "--low", "-20", "--high", "20", "--seed", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) >= 4
    assert lines[0] == lines[-1]


def test_collinear_input(tmp_path, capsys):
    path = tmp_path / "line.txt"
    path.write_text("3\n2 2\n0 0\n1 1\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "0 0\n1 1\n2 2\n"
    assert main([str(path), "--strict-collinear"]) == 2


def test_insufficient_points(tmp_path, caplog):
    path = tmp_path / "pair.txt"
    path.write_text("3\n0 0\n1 1\n0 0\n", encoding="utf-8")
    assert main([str(path)]) == 2
    assert "3 or more unique points" in caplog.text


def test_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1


@pytest.mark.parametrize("argv", [[], ["points.txt", "--random", "5"], ["--random", "5", "--low", "3", "--high", "1"]])
def test_bad_arguments(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    assert exc_info.value.code == 2
