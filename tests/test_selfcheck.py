import pytest

from bstmap.selfcheck import (
    Word,
    initialize_tree,
    lower_than_int,
    main,
    run_checks,
)


def test_lower_than_int_orders_numbers():
    assert lower_than_int(10, 15) is True
    assert lower_than_int(15, 10) is False
    assert lower_than_int(5, 5) is False


def test_initialize_tree_shape():
    tree = initialize_tree()
    assert tree.root.pair.key == 5239
    assert tree.root.pair.value == Word(5239, "auto")
    assert tree.root.left.pair.value.word == "reto"
    assert tree.root.right.pair.key == 8213
    assert tree.root.right.left.pair.value.word == "hoja"
    assert tree.root.right.left.parent is tree.root.right
    assert tree.root.left.parent is tree.root
    assert tree.current is None


def test_initialize_tree_iterates_in_order():
    tree = initialize_tree()
    assert [pair.key for pair in tree] == [1273, 5239, 6980, 8213]


def test_full_run_scores_everything():
    report = run_checks(-1)
    assert report.total_score == 70
    assert report.all_correct is True
    assert report.succeeded is False
    assert not any("[FAILED]" in line for line in report.lines)


def test_full_run_partial_scores():
    report = run_checks()
    partials = [line.strip() for line in report.lines if "partial_score" in line]
    assert partials == [
        "partial_score: 5/5",
        "partial_score: 10/10",
        "partial_score: 10/10",
        "partial_score: 15/15",
        "partial_score: 5/5",
        "partial_score: 15/15",
        "partial_score: 10/10",
    ]


@pytest.mark.parametrize("test_id", list(range(12)))
def test_each_id_reaches_success(test_id):
    report = run_checks(test_id)
    assert report.succeeded is True
    assert report.lines[-1] == "SUCCESS"


def test_selected_id_runs_only_its_section_before_minimum():
    report = run_checks(1)
    assert "Test searchTreeMap..." in report.lines
    assert "Test createTreeMap..." not in report.lines
    assert "Test minimum..." not in report.lines


def test_late_id_runs_minimum_first():
    report = run_checks(4)
    assert "Test minimum..." in report.lines
    assert report.lines.index("Test minimum...") < report.lines.index("Test removeNode...")


def test_unknown_id_runs_only_minimum():
    report = run_checks(99)
    assert report.succeeded is False
    assert report.total_score == 0
    assert "Test minimum..." in report.lines
    assert not any(line.startswith("Test ") and line != "Test minimum..." for line in report.lines)


def test_main_without_arguments_prints_total(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "total_score: 70/70" in out
    assert "SUCCESS" not in out


def test_main_with_id_prints_success(capsys):
    assert main(["3"]) == 0
    out = capsys.readouterr().out
    assert out.rstrip().endswith("SUCCESS")
    assert "total_score" not in out


def test_main_non_numeric_argument_selects_zero(capsys):
    main(["abc"])
    out = capsys.readouterr().out
    assert "Test createTreeMap..." in out
    assert out.rstrip().endswith("SUCCESS")