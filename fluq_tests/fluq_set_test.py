import suite
from fluq import P, empty, InvalidArgumentError

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


@test("union combines sequences removing duplicates")
def test_union():
    result = P([1, 2, 2, 3]).set.union([3, 4, 1, 5]).to.list()
    assert_that(result == [1, 2, 3, 4, 5], f"unexpected: {result}")


@test("union with empty sequences")
def test_union_empty():
    assert_that(empty().set.union([2, 1, 2]).to.list() == [2, 1], "union with empty left")
    assert_that(P([1, 1]).set.union([]).to.list() == [1], "union with empty right")


@test("intersect preserves first sequence order")
def test_intersect():
    result = P([5, 1, 3, 1, 4]).set.intersect([4, 1, 9]).to.list()
    assert_that(result == [1, 4], f"unexpected: {result}")
    assert_that(P([1, 2]).set.intersect([3]).to.list() == [], "no common elements")


@test("except_ removes elements of the second sequence")
def test_except():
    result = P([1, 2, 3, 2, 4]).set.except_([2]).to.list()
    assert_that(result == [1, 3, 4], f"unexpected: {result}")


@test("set operations work with unhashable elements")
def test_set_unhashable():
    left = P([[1], [2], [1]])
    assert_that(left.set.union([[3]]).to.list() == [[1], [2], [3]], "union of lists")
    assert_that(left.set.intersect([[2]]).to.list() == [[2]], "intersect of lists")


@test("set operations reject a missing sequence")
def test_set_missing_other():
    with assert_raises(InvalidArgumentError):
        P([1]).set.union(None)


if __name__ == "__main__":
    suite.main("fluq set operations")
