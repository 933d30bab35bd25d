import suite
from collections import Counter
from dgen import from_schema
from fluq import P, from_range, empty, Enumerable, Dictionary, InvalidArgumentError

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

object_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 10}),
    'name': 'word',
    'category': {'_gen_provider': 'choice', 'from': ['a', 'b', 'c']},
    'value': ('pyfloat', {'min_value': 10, 'max_value': 100}),
}


# --- group_by ---

@test("group_by returns a dictionary of enumerables")
def test_group_by_shape():
    data = from_schema(object_schema, seed=42).take(60)
    grouped = data.group.group_by(lambda x: x['category'])

    assert_that(isinstance(grouped, Dictionary), "group_by should return a Dictionary")
    for cat, items in grouped.items():
        assert_that(isinstance(items, Enumerable), "each group should be an enumerable")
        assert_that(items.to.all(lambda item: item['category'] == cat),
                    f"all items in group '{cat}' must have that category")


@test("group_by keeps source order within groups")
def test_group_by_order():
    grouped = from_range(0, 10).group.group_by(lambda x: x % 2)
    assert_that(grouped[0].to.list() == [0, 2, 4, 6, 8], "group 0 should contain even numbers")
    assert_that(grouped[1].to.list() == [1, 3, 5, 7, 9], "group 1 should contain odd numbers")


@test("group_by keys appear in first-occurrence order")
def test_group_by_key_order():
    grouped = P(['cherry', 'apple', 'cranberry', 'banana', 'avocado']).group.group_by(lambda s: s[0])
    assert_that(list(grouped.keys()) == ['c', 'a', 'b'], f"unexpected key order: {list(grouped.keys())}")


@test("group_by is a partition of the source")
def test_group_by_partition():
    data = from_schema(object_schema, seed=7).take(40)
    grouped = data.group.group_by(lambda x: x['category'])
    regrouped = grouped.values_seq().select_many(lambda g: g).to.list()
    assert_that(len(regrouped) == len(data), "every element should appear exactly once")
    ids = Counter(id(x) for x in regrouped)
    assert_that(ids == Counter(id(x) for x in data), "groups should contain exactly the source elements")


@test("group_by edge cases")
def test_group_by_edges():
    assert_that(len(empty().group.group_by(lambda x: x)) == 0, "empty input gives an empty dictionary")
    grouped_single = P(['a', 'b', 'c']).group.group_by(lambda x: 'same_key')
    assert_that(list(grouped_single.keys()) == ['same_key'], "should have a single key")
    assert_that(grouped_single['same_key'].to.list() == ['a', 'b', 'c'], "all items in the single group")


@test("group_by requires a key selector")
def test_group_by_missing_selector():
    with assert_raises(InvalidArgumentError):
        P([1]).group.group_by(None)


@test("group_by_with_aggregate reduces each group")
def test_group_by_with_aggregate():
    totals = P([('x', 1), ('y', 2), ('x', 3)]).group.group_by_with_aggregate(
        lambda pair: pair[0],
        lambda key, group: group.stats.sum(lambda pair: pair[1]))
    assert_that(totals == {'x': 4, 'y': 2}, f"unexpected: {totals}")


# --- partition / chunk / pairwise ---

@test("partition splits by predicate")
def test_partition():
    evens, odds = from_range(1, 6).group.partition(lambda x: x % 2 == 0)
    assert_that(evens.to.list() == [2, 4, 6], "matching part")
    assert_that(odds.to.list() == [1, 3, 5], "non-matching part")


@test("chunk splits into fixed-size pieces")
def test_chunk():
    chunks = from_range(0, 7).group.chunk(3).select(lambda c: c.to.list()).to.list()
    assert_that(chunks == [[0, 1, 2], [3, 4, 5], [6]], f"unexpected: {chunks}")
    assert_that(empty().group.chunk(2).to.list() == [], "empty gives no chunks")


@test("chunk rejects non-positive sizes")
def test_chunk_invalid():
    with assert_raises(InvalidArgumentError):
        from_range(0, 10).group.chunk(0)
    with assert_raises(ValueError):
        from_range(0, 10).group.chunk(-2)


@test("pairwise returns consecutive pairs")
def test_pairwise():
    assert_that(P([1, 2, 3]).group.pairwise().to.list() == [(1, 2), (2, 3)], "consecutive pairs")
    assert_that(P([1]).group.pairwise().to.list() == [], "singleton has no pairs")


if __name__ == "__main__":
    suite.main("fluq grouping operations")
