import suite
from tackle import flat_map, map_, filter_

test = suite.test
assert_that = suite.assert_that


@test("map_ keeps the container type")
def test_map_containers():
    assert_that(map_([1, 2, 3, 4], lambda x: x * 2) == [2, 4, 6, 8], "list map failed")
    assert_that(map_((1, 2), lambda x: x * 2) == (2, 4), "tuple map failed")
    assert_that(map_({1, 2, 3, 4}, lambda x: x * 2) == {2, 4, 6, 8}, "set map failed")
    assert_that(map_({'a': 'b'}, lambda kv: (kv[1], kv[0])) == {'b': 'a'}, "dict map failed")
    frozen = map_(frozenset([1]), lambda x: x + 1)
    assert_that(isinstance(frozen, frozenset) and frozen == {2}, "frozenset map failed")


@test("flat_map flattens exactly one level")
def test_flat_map_one_level():
    assert_that(flat_map([1, 2, 3, 4], lambda x: [x * 2]) == [2, 4, 6, 8], "flat_map failed")
    assert_that(flat_map([1, 2, 3, 4], lambda x: [[x * 2]]) == [[2], [4], [6], [8]], "flattened too deep")


@test("flat_map can grow and shrink dicts")
def test_flat_map_dicts():
    grown = flat_map({'a': 'b'}, lambda kv: [kv, (kv[0] + '2', kv[1])])
    assert_that(grown == {'a': 'b', 'a2': 'b'}, f"dict growth failed: {grown}")
    shrunk = flat_map({'a': 'b', 'b': 'c'}, lambda kv: [kv] if kv[0] == 'a' else [])
    assert_that(shrunk == {'a': 'b'}, f"dict filter failed: {shrunk}")


@test("filter_ keeps matching entries")
def test_filter():
    assert_that(filter_({'a': 'b', 'b': 'c'}, lambda kv: kv == ('b', 'c')) == {'b': 'c'}, "dict filter failed")
    assert_that(filter_([1, 2, 3, 4], lambda x: x % 2 == 0) == [2, 4], "list filter failed")


@test("unsupported values come back unchanged")
def test_passthrough():
    assert_that(map_('abc', str.upper) == 'abc', "strings are not containers here")
    assert_that(map_(None, lambda x: x) is None, "None should pass through")


if __name__ == "__main__":
    suite.run(title="tackle iterable test")
