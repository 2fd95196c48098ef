from scripts.shuffle_audit import max_deviation, position_counts


def test_counts_cover_every_card_and_position():
    counts = position_counts(900, seed=11)

    assert len(counts) == 9
    for row in counts.values():
        assert len(row) == 9
        assert sum(row) == 900
    for pos in range(9):
        assert sum(row[pos] for row in counts.values()) == 900


def test_same_seed_same_counts():
    assert position_counts(200, seed=4) == position_counts(200, seed=4)


def test_max_deviation():
    uniform = {str(i): [10] * 9 for i in range(9)}
    assert max_deviation(uniform, 90) == 0.0

    skewed = {str(i): [10] * 9 for i in range(9)}
    skewed["0"] = [20] + [10] * 8
    assert max_deviation(skewed, 90) == 1.0
