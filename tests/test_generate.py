from algokit.generate import generate_int_vectors, generate_vectors


def test_binary_vectors_in_order():
    assert list(generate_vectors([0, 1], 2)) == [[0, 0], [0, 1], [1, 0], [1, 1]]


def test_count_and_uniqueness():
    vectors = list(generate_vectors("abc", 4))
    assert len(vectors) == 3 ** 4
    assert len({tuple(v) for v in vectors}) == len(vectors)
    assert all(len(v) == 4 for v in vectors)


def test_zero_length_yields_single_empty():
    assert list(generate_vectors([1, 2, 3], 0)) == [[]]


def test_int_vectors_bounds():
    vectors = list(generate_int_vectors(-1, 1, 3))
    assert len(vectors) == 3 ** 3
    assert all(-1 <= x <= 1 for v in vectors for x in v)
    assert vectors[0] == [-1, -1, -1]
    assert vectors[-1] == [1, 1, 1]
    assert vectors == sorted(vectors)