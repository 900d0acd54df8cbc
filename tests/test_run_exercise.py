import pytest

import run_exercise


def test_example_output(capsys):
    run_exercise.run_example()
    out = capsys.readouterr().out
    assert "Array = [10, 20, 30, 40, 50]" in out
    assert "Target = 40" in out
    assert "Element found at index: 3" in out


def test_main_defaults_print_report(capsys):
    run_exercise.main(["--sizes", "10", "100", "--seed", "3"])
    out = capsys.readouterr().out
    assert "Performance Analysis:" in out
    lines = out.splitlines()
    header = lines.index("Performance Analysis:") + 1
    assert lines[header].split() == ["Input", "Size", "Microseconds", "Nanoseconds"]
    assert lines[header + 1].split()[0] == "10"
    assert lines[header + 2].split()[0] == "100"


def test_main_compare(capsys):
    run_exercise.main(["--sizes", "50", "--seed", "1", "--compare", "--num-runs", "3",
                       "--distribution", "skewed"])
    out = capsys.readouterr().out
    assert "Interpolation Search" in out
    assert "Full Scan" in out
    assert "Input Size: 50" in out


@pytest.mark.parametrize("argv", [["--sizes", "0"], ["--sizes", "abc"], ["--num-runs", "-2"],
                                  ["--distribution", "normal"], ["--seed", "-1"]])
def test_main_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit) as excinfo:
        run_exercise.main(argv)
    assert excinfo.value.code == 2


@pytest.mark.parametrize("value", ["1", "42"])
def test_positive_int(value):
    assert run_exercise.positive_int(value) == int(value)


@pytest.mark.parametrize("value", ["0", "42"])
def test_non_negative_int(value):
    assert run_exercise.non_negative_int(value) == int(value)
