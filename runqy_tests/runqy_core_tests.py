import numpy as np
import pandas as pd
import suite
from runqy import P, from_iterable, from_range, empty, repeat, generate, Enumerable

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# helper data
numbers = P(range(1, 11))  # 1 through 10
nested_data = P([[1, 2], [3, 4, 5], [], [6]])


# --- core operators ---

@test("where filters elements correctly")
def test_where_basic():
    evens = numbers.where(lambda x: x % 2 == 0).to.list()
    assert_that(evens == [2, 4, 6, 8, 10], "should filter even numbers")
    assert_that(numbers.where(lambda x: x > 100).to.list() == [], "should return empty list for no matches")


@test("select projects each element")
def test_select_basic():
    assert_that(numbers.take(3).select(lambda x: x * x).to.list() == [1, 4, 9], "should square elements")


@test("select_many flattens with or without a selector")
def test_select_many():
    assert_that(nested_data.select_many().to.list() == [1, 2, 3, 4, 5, 6], "should flatten one level")
    doubled = P([1, 2]).select_many(lambda x: [x, x]).to.list()
    assert_that(doubled == [1, 1, 2, 2], f"got {doubled}")


@test("take and skip slice the sequence")
def test_take_skip():
    assert_that(numbers.take(3).to.list() == [1, 2, 3], "take 3")
    assert_that(numbers.skip(8).to.list() == [9, 10], "skip 8")
    assert_that(numbers.take(0).to.list() == [], "take 0")
    assert_that(numbers.take(-1).to.list() == [], "negative take behaves like 0")
    assert_that(numbers.skip(20).to.list() == [], "skip past the end")


@test("take_while and skip_while use the predicate boundary")
def test_take_skip_while():
    assert_that(numbers.take_while(lambda x: x < 4).to.list() == [1, 2, 3], "take_while")
    assert_that(numbers.skip_while(lambda x: x < 8).to.list() == [8, 9, 10], "skip_while")


@test("append, prepend and concat join sequences")
def test_append_prepend_concat():
    assert_that(P([1, 2]).append(3).to.list() == [1, 2, 3], "append")
    assert_that(P([1, 2]).prepend(0).to.list() == [0, 1, 2], "prepend")
    assert_that(P([1]).concat([2, 3]).to.list() == [1, 2, 3], "concat")


@test("operators are lazy and re-evaluated per traversal")
def test_lazy_and_restartable():
    calls = []
    query = P([1, 2, 3]).select(lambda x: calls.append(x) or x)
    assert_that(calls == [], "select should not run until iterated")
    assert_that(query.to.list() == [1, 2, 3], "first traversal")
    assert_that(query.to.list() == [1, 2, 3], "second traversal")
    assert_that(calls == [1, 2, 3, 1, 2, 3], "no results are cached between traversals")


# --- factories ---

@test("factories build the expected sequences")
def test_factories():
    assert_that(from_range(5, 3).to.list() == [5, 6, 7], "from_range")
    assert_that(from_range(0).take(4).to.list() == [0, 1, 2, 3], "unbounded from_range")
    assert_that(repeat('x', 3).to.list() == ['x', 'x', 'x'], "repeat")
    assert_that(repeat(0).take(2).to.list() == [0, 0], "unbounded repeat")
    assert_that(empty().to.list() == [], "empty")

    counter = iter(range(100))
    generated = generate(lambda: next(counter), 3)
    assert_that(generated.to.list() == [0, 1, 2], "generate calls the function on demand")
    assert_that(generate(lambda: 1).take(2).to.list() == [1, 1], "unbounded generate")


@test("from_iterable wraps without copying and rejects None")
def test_from_iterable():
    data = [1, 2]
    wrapped = from_iterable(data)
    data.append(3)
    assert_that(wrapped.to.list() == [1, 2, 3], "changes to the source are visible on the next traversal")
    assert_that(isinstance(wrapped, Enumerable), "should return an Enumerable")
    assert_raises(ValueError, lambda: from_iterable(None), "None data")


# --- terminal operations ---

@test("count, any and all reduce the sequence")
def test_count_any_all():
    assert_that(numbers.to.count() == 10, "count")
    assert_that(numbers.to.count(lambda x: x > 5) == 5, "count with predicate")
    assert_that(numbers.to.any() and not empty().to.any(), "any without predicate")
    assert_that(numbers.to.any(lambda x: x == 10), "any with predicate")
    assert_that(numbers.to.all(lambda x: x > 0), "all")
    assert_that(from_range(0).to.any(lambda x: x > 5), "any stops on infinite input")


@test("first and first_or_default")
def test_first():
    assert_that(numbers.to.first() == 1, "first")
    assert_that(numbers.to.first(lambda x: x > 4) == 5, "first with predicate")
    assert_that(from_range(7).to.first() == 7, "first works on infinite input")
    assert_raises(ValueError, lambda: empty().to.first(), "first of empty")
    assert_raises(ValueError, lambda: numbers.to.first(lambda x: x > 100), "no match")
    assert_that(empty().to.first_or_default(default=-1) == -1, "default on empty")


@test("list, tuple, array, pandas and df materialize the sequence")
def test_materialize():
    assert_that(numbers.take(2).to.list() == [1, 2], "list")
    assert_that(numbers.take(2).to.tuple() == (1, 2), "tuple")

    array = numbers.to.array()
    assert_that(isinstance(array, np.ndarray) and array.sum() == 55, "numpy array")

    series = numbers.to.pandas()
    assert_that(isinstance(series, pd.Series) and len(series) == 10, "pandas series")

    frame = P([{'a': 1, 'b': 2}, {'a': 3, 'b': 4}]).to.df()
    assert_that(isinstance(frame, pd.DataFrame) and frame.shape == (2, 2), "pandas dataframe")


if __name__ == "__main__":
    suite.main(title="runqy core test")
