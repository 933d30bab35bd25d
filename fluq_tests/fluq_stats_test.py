import math
import suite
from dgen import from_schema
from fluq import P, empty, EmptySequenceError

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

product_schema = {
    'name': 'word',
    'price': ('pyfloat', {'min_value': 5.0, 'max_value': 500.0}),
    'stock': ('pyint', {'min_value': 0, 'max_value': 20}),
}


@test("sum with and without selector")
def test_sum():
    assert_that(P([1, 2, 3, 4]).stats.sum() == 10, "plain sum")
    assert_that(isinstance(P([1, 2]).stats.sum(), int), "int sums come back as python ints")
    products = from_schema(product_schema, seed=3).take(25)
    expected = sum(p['stock'] for p in products)
    assert_that(products.stats.sum(lambda p: p['stock']) == expected, "selector sum")


@test("integer sums do not overflow")
def test_sum_large_ints():
    assert_that(P([2 ** 62, 2 ** 62]).stats.sum() == 2 ** 63, "sum should stay exact past int64")
    assert_that(P([10 ** 30, 1]).stats.sum(lambda x: x) == 10 ** 30 + 1, "selector sums stay exact too")


@test("sum of empty is zero")
def test_sum_empty():
    assert_that(empty().stats.sum() == 0, "empty sum")


@test("average")
def test_average():
    assert_that(math.isclose(P([1, 2, 3, 4]).stats.average(), 2.5), "average of 1..4")
    products = from_schema(product_schema, seed=9).take(10)
    expected = sum(p['price'] for p in products) / 10
    assert_that(math.isclose(products.stats.average(lambda p: p['price']), expected), "selector average")


@test("min and max work on any comparable values")
def test_min_max():
    assert_that(P([4, 1, 7]).stats.min() == 1, "min")
    assert_that(P([4, 1, 7]).stats.max() == 7, "max")
    assert_that(P(['pear', 'fig', 'apple']).stats.min(len) == 3, "min of selector")
    assert_that(P(['pear', 'fig', 'apple']).stats.max() == 'pear', "max of strings")


@test("empty sequences raise for average, min and max")
def test_empty_errors():
    for operation in (lambda s: s.average(), lambda s: s.min(), lambda s: s.max()):
        with assert_raises(EmptySequenceError) as raised:
            operation(empty().stats)
        assert_that("empty sequence" in str(raised.exception), f"unexpected error: {raised.exception}")


@test("non-numeric data is rejected for sum and average")
def test_non_numeric():
    with assert_raises(TypeError) as raised:
        P([1, 'hello', 3.14]).stats.sum()
    assert_that("non-numeric" in str(raised.exception), f"unexpected error: {raised.exception}")


if __name__ == "__main__":
    suite.main("fluq stats operations")
