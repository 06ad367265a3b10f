import numpy as np
import pytest

from inpatient import ScoringError, confusion_table, misclassification_rate


def test_confusion_table_counts():
    table = confusion_table([0, 0, 1, 1, 1], [0, 1, 1, 1, 0])
    assert table.shape == (2, 2)
    assert table.loc[0, 0] == 1
    assert table.loc[0, 1] == 1
    assert table.loc[1, 1] == 2
    assert table.loc[1, 0] == 1
    assert table.values.sum() == 5
    assert misclassification_rate(table) == pytest.approx(0.4)


def test_confusion_table_is_two_by_two_with_one_predicted_class():
    table = confusion_table([0, 1, 1], [1, 1, 1])
    assert table.shape == (2, 2)
    assert table.loc[:, 0].sum() == 0
    assert misclassification_rate(table) == pytest.approx(1 / 3)


def test_random_tables_sum_and_rate_bounds():
    rng = np.random.RandomState(3)
    for n in [1, 2, 17, 250]:
        y_true, y_pred = rng.randint(0, 2, n), rng.randint(0, 2, n)
        table = confusion_table(y_true, y_pred)
        assert table.values.sum() == n
        assert (table.values >= 0).all()
        assert 0 <= misclassification_rate(table) <= 1


def test_single_record():
    assert misclassification_rate(confusion_table([1], [1])) == 0
    assert misclassification_rate(confusion_table([1], [0])) == 1


def test_empty_sequence_fails():
    table = confusion_table([], [])
    assert table.shape == (2, 2)
    with pytest.raises(ScoringError):
        misclassification_rate(table)


def test_length_mismatch_fails():
    with pytest.raises(ScoringError):
        confusion_table([0, 1], [0])
