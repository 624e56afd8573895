import suite
import underbar as _

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


# --- reduce ---

@test("reduce without a seed starts from the first element")
def test_reduce_no_seed():
    total = _.reduce([1, 2, 3, 4], lambda a, b: a + b)
    assert_that(total == 10, f"expected 10, got {total}")


@test("reduce with a seed folds every element")
def test_reduce_seed():
    total = _.reduce([1, 2, 3], lambda a, b: a + b, 10)
    assert_that(total == 16, f"expected 16, got {total}")


@test("reduce never passes the first element as an item when unseeded")
def test_reduce_first_not_visited():
    visited = []

    def step(acc, item):
        visited.append(item)
        return acc * item

    result = _.reduce([2, 3, 4], step)
    assert_that(visited == [3, 4], f"only later items should be visited, got {visited}")
    assert_that(result == 24, f"expected 24, got {result}")


@test("reduce folds strictly left to right")
def test_reduce_order():
    joined = _.reduce(['b', 'c', 'd'], lambda acc, x: acc + x, 'a')
    assert_that(joined == 'abcd', f"got {joined}")
    nested = _.reduce([1, 2, 3], lambda acc, x: [acc, x])
    assert_that(nested == [[1, 2], 3], f"got {nested}")


@test("reduce accepts None as an explicit seed")
def test_reduce_none_seed():
    seen = []
    result = _.reduce([1, 2], lambda acc, x: seen.append((acc, x)) or x, None)
    assert_that(seen == [(None, 1), (1, 2)], f"None should seed the fold, got {seen}")
    assert_that(result == 2, "last step result returned")


@test("reduce on a single element without seed returns it untouched")
def test_reduce_single():
    calls = []
    result = _.reduce(['only'], lambda a, b: calls.append(b))
    assert_that(result == 'only' and calls == [], "iterator should not be called")


@test("reduce on an empty collection needs a seed")
def test_reduce_empty():
    assert_that(_.reduce([], lambda a, b: a + b, 5) == 5, "seed is returned for empty input")
    with assert_raises(_.EmptyReductionError) as caught:
        _.reduce([], lambda a, b: a + b)
    assert_that(isinstance(caught['error'], ValueError), "should be a ValueError")


@test("reduce folds over mapping values")
def test_reduce_mapping():
    total = _.reduce({'a': 1, 'b': 2, 'c': 3}, lambda acc, v: acc + v, 0)
    assert_that(total == 6, f"got {total}")


# --- every ---

@test("every checks all values against the test")
def test_every():
    is_even = lambda x: x % 2 == 0
    assert_that(_.every([2, 4, 6], is_even) is True, "all even")
    assert_that(_.every([2, 3, 6], is_even) is False, "3 is odd")
    assert_that(_.every([], is_even) is True, "vacuously true")


@test("every without a test uses truthiness")
def test_every_identity():
    assert_that(_.every([1, 'a', [0]]) is True, "all truthy")
    assert_that(_.every([1, 0, 2]) is False, "0 is falsy")
    assert_that(_.every([None]) is False, "None is falsy")


@test("every visits all values even after a failure")
def test_every_no_short_circuit():
    visited = []

    def check(x):
        visited.append(x)
        return x > 1

    assert_that(_.every([0, 1, 2, 3], check) is False, "should fail")
    assert_that(visited == [0, 1, 2, 3], f"all values should be tested, got {visited}")


@test("every works on mapping values")
def test_every_mapping():
    assert_that(_.every({'a': 2, 'b': 4}, lambda v: v % 2 == 0), "all values even")
    assert_that(not _.every({'a': 2, 'b': 5}, lambda v: v % 2 == 0), "5 is odd")


# --- some ---

@test("some looks for at least one passing value")
def test_some():
    is_even = lambda x: x % 2 == 0
    assert_that(_.some([1, 3, 5], is_even) is False, "no even value")
    assert_that(_.some([1, 3, 4], is_even) is True, "4 is even")
    assert_that(_.some([], is_even) is False, "empty is false")


@test("some without a test uses truthiness")
def test_some_identity():
    assert_that(_.some([0, None, '']) is False, "all falsy")
    assert_that(_.some([0, 'yes']) is True, "one truthy value")


@test("some visits all values even after a success")
def test_some_no_short_circuit():
    visited = []

    def check(x):
        visited.append(x)
        return x == 1

    assert_that(_.some([1, 2, 3], check) is True, "should pass")
    assert_that(visited == [1, 2, 3], f"all values should be tested, got {visited}")


if __name__ == "__main__":
    suite.run(title="underbar reduction test suite")
