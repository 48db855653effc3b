from tenet.ir.grouping import merge_overlapping


def is_partition(groups):
    seen = set()
    for group in groups:
        if seen & set(group):
            return False
        seen |= set(group)
    return True


def test_empty():
    assert merge_overlapping([]) == []


def test_single_group():
    assert merge_overlapping([[3, 1, 2]]) == [[1, 2, 3]]


def test_duplicates():
    assert merge_overlapping([[2, 2, 1]]) == [[1, 2]]


def test_merge():
    assert merge_overlapping([[1, 2], [2, 3], [4, 5]]) == [[1, 2, 3], [4, 5]]


def test_transitive():
    # [3, 4] only intersects the union after [2, 3] was absorbed
    assert merge_overlapping([[1, 2], [3, 4], [2, 3]]) == [[1, 2, 3, 4]]


def test_encounter_order():
    groups = [[5, 6], [1, 2], [6, 7], [9], [2, 0]]
    assert merge_overlapping(groups) == [[5, 6, 7], [0, 1, 2], [9]]


def test_sets():
    assert merge_overlapping([{4, 1}, {1}, {8}]) == [[1, 4], [8]]


def test_disjoint():
    groups = [[1, 2], [7, 8], [3, 4], [2, 3], [8, 9], [10], [4, 5]]
    merged = merge_overlapping(groups)

    assert merged == [[1, 2, 3, 4, 5], [7, 8, 9], [10]]
    assert is_partition(merged)


def test_idempotent():
    groups = [[1, 2], [7, 8], [3, 4], [2, 3], [8, 9], [10], [4, 5]]
    merged = merge_overlapping(groups)
    assert merge_overlapping(merged) == merged


def test_input_unchanged():
    groups = [[1, 2], [2, 3]]
    merge_overlapping(groups)
    assert groups == [[1, 2], [2, 3]]
