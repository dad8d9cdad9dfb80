import pytest

from ministructs.hashmap import TABLE_SIZE, HashTable, hash_key


def _colliding_keys(count):
    target = hash_key("apple")
    found = ["apple"]
    candidate = 0
    while len(found) < count:
        key = f"k{candidate}"
        if hash_key(key) == target:
            found.append(key)
        candidate += 1
    return found


@pytest.fixture
def fruit_table():
    table = HashTable()
    table.insert("apple", 10)
    table.insert("banana", 20)
    table.insert("cherry", 30)
    return table


def test_hash_key_in_range():
    for key in ["", "apple", "banana", "a much longer key with spaces", "ключ"]:
        assert 0 <= hash_key(key) < TABLE_SIZE


def test_hash_key_empty_is_zero():
    assert hash_key("") == 0


def test_hash_key_pinned_values():
    assert hash_key("a") == 97
    assert hash_key("cherry") == 33


def test_find_after_insert(fruit_table):
    assert fruit_table.find("apple") == 10
    assert fruit_table.find("banana") == 20
    assert fruit_table.find("cherry") == 30
    assert len(fruit_table) == 3


def test_update_replaces_value(fruit_table):
    fruit_table.update("apple", 100)
    assert fruit_table.find("apple") == 100
    assert len(fruit_table) == 3


def test_insert_existing_key_keeps_size(fruit_table):
    fruit_table.insert("banana", 5)
    assert fruit_table.find("banana") == 5
    assert len(fruit_table) == 3


def test_remove_then_find_is_none(fruit_table):
    fruit_table.remove("banana")
    assert fruit_table.find("banana") is None
    assert "banana" not in fruit_table
    assert len(fruit_table) == 2


def test_remove_missing_raises(fruit_table):
    with pytest.raises(KeyError):
        fruit_table.remove("durian")
    assert len(fruit_table) == 3


def test_contains(fruit_table):
    assert "apple" in fruit_table
    assert "durian" not in fruit_table
    assert 5 not in fruit_table


def test_format_single_entry():
    table = HashTable()
    table.insert("apple", 10)
    assert table.format() == "apple: 10\n"


def test_items_match_contents(fruit_table):
    assert dict(fruit_table.items()) == {"apple": 10, "banana": 20, "cherry": 30}


def test_chain_order_newest_first():
    keys = _colliding_keys(3)
    table = HashTable()
    for number, key in enumerate(keys):
        table.insert(key, number)
    assert [key for key, _ in table.items()] == list(reversed(keys))


def test_remove_middle_of_chain():
    keys = _colliding_keys(3)
    table = HashTable()
    for number, key in enumerate(keys):
        table.insert(key, number)
    table.remove(keys[1])
    assert [key for key, _ in table.items()] == [keys[2], keys[0]]
    assert table.find(keys[0]) == 0
    assert table.find(keys[2]) == 2


def test_items_ordered_by_bucket(fruit_table):
    indices = [hash_key(key) for key, _ in fruit_table.items()]
    assert indices == sorted(indices)