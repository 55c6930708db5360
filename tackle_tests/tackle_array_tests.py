import math
import datetime
from functools import cmp_to_key
import suite
from dgen import from_schema
from tackle import sort_by, sort_by_cb, generate_range, flatten

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

row_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 1000}),
    'team': {'_gen_provider': 'choice', 'from': ['red', 'green', 'blue']},
    'active': {'_gen_provider': 'choice', 'from': [True, False]},
    'score': ('pyint', {'min_value': 0, 'max_value': 10})
}


# --- sort_by ---

@test("sort_by partitions on a boolean key and stays stable")
def test_sort_by_boolean_partition():
    result = sort_by([1, 2, 3, 4, 5], lambda k: k <= 3)
    assert_that(result == [4, 5, 1, 2, 3], f"boolean partition failed: {result}")


@test("sort_by sorts numbers with the identity key")
def test_sort_by_numbers():
    assert_that(sort_by([4, 5, 1, 2, 3]) == [1, 2, 3, 4, 5], "ascending numbers failed")
    assert_that(sort_by((1, 2)) == [1, 2], "tuple input should come back as a list")


@test("sort_by with a negating key sorts descending")
def test_sort_by_reverse():
    assert_that(sort_by([4, 5, 1, 2, 3], lambda v: v * -1) == [5, 4, 3, 2, 1], "reverse sort failed")


@test("sort_by orders booleans false first")
def test_sort_by_booleans():
    assert_that(sort_by([False, True, False, True]) == [False, False, True, True], "boolean sort failed")


@test("sort_by orders dates chronologically")
def test_sort_by_dates():
    utc = datetime.timezone.utc
    d1 = datetime.datetime(2021, 4, 1, 13, 57, 3, tzinfo=utc)
    d2 = datetime.datetime(2021, 4, 2, 13, 57, 3, tzinfo=utc)
    d3 = datetime.datetime(2021, 4, 3, 13, 57, 3, tzinfo=utc)
    assert_that(sort_by([d2, d1, d3]) == [d1, d2, d3], "date sort failed")


@test("sort_by compares list keys element by element")
def test_sort_by_list_key():
    v1 = {'a': 1, 'b': True, 'c': 'A'}
    v2 = {'a': 1, 'b': False, 'c': 'B'}
    v3 = {'a': 2, 'b': True, 'c': 'C'}
    v4 = {'a': 2, 'b': False, 'c': 'D'}
    result = sort_by([v1, v2, v3, v4], lambda k: [k['a'], k['b'], k['c']])
    assert_that(result == [v2, v1, v4, v3], f"multi-key sort failed: {result}")


@test("sort_by keeps input order for a constant key")
def test_sort_by_constant_key_is_identity():
    rows = from_schema(row_schema, seed=7).take(40)
    for constant in (0, 'x', True, [1, 2], None):
        result = sort_by(rows, lambda _: constant)
        assert_that([r['id'] for r in result] == [r['id'] for r in rows],
                    f"constant key {constant!r} reordered rows")


@test("sort_by is stable for generated rows on a coarse key")
def test_sort_by_stable_generated():
    rows = from_schema(row_schema, seed=11).take(60)
    result = sort_by(rows, lambda r: r['score'])
    for score in range(11):
        expected = [r['id'] for r in rows if r['score'] == score]
        actual = [r['id'] for r in result if r['score'] == score]
        assert_that(actual == expected, f"ties for score {score} were reordered")
    scores = [r['score'] for r in result]
    assert_that(scores == sorted(scores), "scores should be ascending")


@test("sort_by handles mixed float keys and falls back for nan")
def test_sort_by_floats():
    assert_that(sort_by([2.5, -1.0, 0.5]) == [-1.0, 0.5, 2.5], "float sort failed")
    result = sort_by([3.0, math.inf, 1.0])
    assert_that(result == [1.0, 3.0, math.inf], f"inf sort failed: {result}")


@test("sort_by does not mutate its input")
def test_sort_by_no_mutation():
    data = [3, 1, 2]
    sort_by(data)
    assert_that(data == [3, 1, 2], "input list was mutated")


# --- sort_by_cb ---

@test("sort_by_cb returns -1, 0 and 1")
def test_sort_by_cb_values():
    compare = sort_by_cb(lambda r: r['score'])
    assert_that(compare({'score': 1}, {'score': 2}) == -1, "less-than should be -1")
    assert_that(compare({'score': 2}, {'score': 2}) == 0, "equal should be 0")
    assert_that(compare({'score': 3}, {'score': 2}) == 1, "greater-than should be 1")


@test("sort_by_cb treats equal list keys as ties and longer prefixes as smaller")
def test_sort_by_cb_lists():
    compare = sort_by_cb()
    assert_that(compare([1, True], [1, True]) == 0, "identical list keys should tie")
    assert_that(compare([1, 2], [1]) == -1, "longer list with shared prefix sorts first")
    assert_that(compare([1], [1, 2]) == 1, "shorter list with shared prefix sorts last")


@test("sort_by_cb falls back to string comparison across kinds")
def test_sort_by_cb_fallback():
    compare = sort_by_cb()
    assert_that(compare('b', 'a') == 1, "strings compare lexicographically")
    assert_that(compare(10, '9') == -1, "'10' < '9' as strings")


@test("sort_by_cb plugs into sorted via cmp_to_key")
def test_sort_by_cb_with_sorted():
    rows = [{'n': 'b', 'v': 2}, {'n': 'a', 'v': 2}, {'n': 'c', 'v': 1}]
    result = sorted(rows, key=cmp_to_key(sort_by_cb(lambda r: [r['v'], r['n']])))
    assert_that([r['n'] for r in result] == ['c', 'a', 'b'], f"cmp_to_key sort failed: {result}")


# --- generate_range ---

@test("generate_range with one, two and three arguments")
def test_generate_range_basic():
    assert_that(generate_range(4) == [0, 1, 2, 3], "single argument range failed")
    assert_that(generate_range(3, 6) == [3, 4, 5], "start/stop range failed")
    assert_that(generate_range(8, 2) == [], "backwards range without step should be empty")


@test("generate_range supports positive and negative steps")
def test_generate_range_step():
    assert_that(generate_range(0, 10, 2) == [0, 2, 4, 6, 8], "step 2 failed")
    assert_that(generate_range(10, 0, -1) == [10, 9, 8, 7, 6, 5, 4, 3, 2, 1], "step -1 failed")
    assert_that(generate_range(8, 2, -2) == [8, 6, 4], "step -2 failed")
    assert_that(generate_range(8, 2, 2) == [], "contradicting positive step should be empty")
    assert_that(generate_range(1, 5, -1) == [], "contradicting negative step should be empty")
    assert_that(generate_range(1, 5, -2) == [], "contradicting negative step should be empty")


@test("generate_range length and spacing hold across many inputs")
def test_generate_range_properties():
    for start in range(-6, 7, 3):
        for stop in range(-7, 8, 5):
            for step in (-3, -2, -1, 1, 2, 3):
                result = generate_range(start, stop, step)
                if step * (stop - start) <= 0:
                    assert_that(result == [], f"range({start}, {stop}, {step}) should be empty")
                    continue
                assert_that(len(result) == math.ceil((stop - start) / step),
                            f"range({start}, {stop}, {step}) has wrong length {len(result)}")
                assert_that(all(b - a == step for a, b in zip(result, result[1:])),
                            f"range({start}, {stop}, {step}) has uneven spacing")


@test("generate_range rejects a zero step")
def test_generate_range_zero_step():
    assert_raises(ValueError, lambda: generate_range(0, 10, 0), "step must not be zero")


# --- flatten ---

@test("flatten flattens one level by default")
def test_flatten_default():
    assert_that(flatten([1, 2, [3, 4]]) == [1, 2, 3, 4], "flatten failed")
    assert_that(flatten([1, 2, [3, 4, [5, 6]]]) == [1, 2, 3, 4, [5, 6]], "flatten went too deep")


@test("flatten supports custom depth")
def test_flatten_depth():
    assert_that(flatten([1, 2, [3, 4, [5, 6]]], 2) == [1, 2, 3, 4, 5, 6], "depth 2 failed")
    assert_that(flatten([[1], [2]], 0) == [[1], [2]], "depth 0 should copy as-is")


if __name__ == "__main__":
    suite.run(title="tackle array operations test")
