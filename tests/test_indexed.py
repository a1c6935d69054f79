from falcorules.indexed import IndexedVector


def test_insert_assigns_sequential_positions():
    vec = IndexedVector()
    ids = [vec.insert(v, k) for k, v in [("a", 10), ("b", 20), ("c", 30)]]
    assert ids == list(range(3))
    assert len(vec) == 3
    assert list(vec) == [10, 20, 30]


def test_insert_existing_name_overwrites_in_place():
    vec = IndexedVector()
    first = vec.insert("one", "x")
    vec.insert("two", "y")
    again = vec.insert("uno", "x")
    assert again == first
    assert len(vec) == 2
    assert vec.at("x") == "uno"
    assert vec.at(first) == "uno"


def test_at_by_name_and_position():
    vec = IndexedVector()
    pos = vec.insert("value", "key")
    assert vec.at("key") == "value"
    assert vec.at(pos) == "value"


def test_at_missing_returns_none():
    vec = IndexedVector()
    vec.insert("value", "key")
    assert vec.at("other") is None
    assert vec.at(len(vec)) is None
    assert vec.at(-1) is None


def test_contains_checks_names():
    vec = IndexedVector()
    vec.insert("value", "key")
    assert "key" in vec
    assert "value" not in vec


def test_clear_empties_everything():
    vec = IndexedVector()
    vec.insert(1, "a")
    vec.insert(2, "b")
    vec.clear()
    assert len(vec) == 0
    assert vec.at("a") is None
    assert "a" not in vec
    assert vec.insert(3, "a") == 0


def test_at_returns_same_object_for_mutation():
    vec = IndexedVector()
    vec.insert([], "items")
    vec.at("items").append("x")
    assert vec.at("items") == ["x"]