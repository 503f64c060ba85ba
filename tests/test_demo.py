import pytest

from arraydrills.demo import main
from arraydrills.numbers import digit_sum, factorial, n_choose_r, sum_to_n
from arraydrills.patterns import hollow_diamond
from arraydrills.questions import product_except_self
from arraydrills.subarray import max_subarray_sum


def _run(capsys, *topics):
    code = main(list(topics))
    return code, capsys.readouterr().out.splitlines()


def test_arrays_topic(capsys):
    code, lines = _run(capsys, "arrays")
    assert code == 0
    assert lines == ["1 2"]


def test_questions_topic(capsys):
    code, lines = _run(capsys, "questions")
    assert code == 0
    assert lines[0] == "0,1"
    assert lines[1:4] == ["The majority element is : 1"] * 3
    expected = " ".join(str(v) for v in product_except_self([1, 2, 3, 4]))
    assert lines[4] == expected


def test_subarray_topic(capsys):
    code, lines = _run(capsys, "subarray")
    best = max_subarray_sum([3, -4, 5, 4, -1, 7, -8])
    assert code == 0
    assert lines == [f"The most efficient way to find the max subarry = {best}"]


def test_functions_topic(capsys):
    code, lines = _run(capsys, "functions")
    assert code == 0
    assert lines[1] == "123123"
    assert lines[2] == str(sum_to_n(99))
    assert lines[3] == str(factorial(5))
    assert lines[4].endswith(str(digit_sum(1232332)))
    assert lines[5] == str(n_choose_r(8, 2))


def test_patterns_topic(capsys):
    code, lines = _run(capsys, "patterns")
    assert code == 0
    assert lines == hollow_diamond(4)


def test_default_runs_every_topic(capsys):
    code = main([])
    out = capsys.readouterr().out
    assert code == 0
    assert "The majority element is" in out
    assert "max subarry" in out
    assert "\n".join(hollow_diamond(4)) in out


def test_topics_run_in_given_order(capsys):
    code, lines = _run(capsys, "patterns", "arrays")
    assert code == 0
    assert lines[-1] == "1 2"
    assert lines[:-1] == hollow_diamond(4)


def test_unknown_topic_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["nonsense"])
    assert excinfo.value.code == 2