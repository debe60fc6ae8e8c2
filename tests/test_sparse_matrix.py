from dsakit.sparse_matrix import Entry, format_matrix, format_triplets, to_triplets

MATRIX = [
    [0, 0, 3, 0, 4],
    [0, 0, 5, 7, 0],
    [0, 0, 0, 0, 0],
    [0, 2, 6, 0, 0],
]


def test_only_non_zero_values_kept():
    entries = to_triplets(MATRIX)
    assert len(entries) == sum(1 for row in MATRIX for v in row if v)
    assert all(e.value != 0 for e in entries)


def test_entries_point_at_their_values():
    for entry in to_triplets(MATRIX):
        assert MATRIX[entry.row][entry.column] == entry.value


def test_row_major_order():
    positions = [(e.row, e.column) for e in to_triplets(MATRIX)]
    assert positions == sorted(positions)


def test_round_trip_rebuilds_matrix():
    rebuilt = [[0] * 5 for _ in range(4)]
    for e in to_triplets(MATRIX):
        rebuilt[e.row][e.column] = e.value
    assert rebuilt == MATRIX


def test_zero_matrix_has_no_entries():
    assert to_triplets([[0, 0], [0, 0]]) == []
    assert format_triplets([]) == "Empty List"


def test_format_single_triplet():
    assert format_triplets([Entry(3, 0, 2)]) == "[3,0,2]"


def test_format_triplets_count():
    text = format_triplets(to_triplets(MATRIX))
    assert text.count("[") == len(to_triplets(MATRIX))
    assert text.startswith("[3,0,2]")


def test_format_matrix_layout():
    lines = format_matrix(MATRIX).split("\n")
    assert len(lines) == 4
    assert all(len(line) == 25 for line in lines)
    assert lines[0] == "    0    0    3    0    4"