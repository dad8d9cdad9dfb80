# ministructs

A handful of classic data structures in plain Python, with no dependencies
outside the standard library.

- `ministructs.hashmap.HashTable` is a separate-chaining hash table that maps
  string keys to integer values. It has 100 buckets. `hash_key(key)` gives a
  key's bucket index from a base-31 rolling hash over the key's UTF-8 bytes.
- `ministructs.linklist.SinglyLinkedList` and `ministructs.linklist.DoublyLinkedList`
  are linked lists of integers. Both keep a count and support `push_front`,
  `push_back`, `remove(value)`, iteration, `len()` and `format()`. The doubly
  linked list also has `pop_front`, `first` and `last`.
- `ministructs.fifo.Queue` is a first-in, first-out queue of integers built on
  `DoublyLinkedList`. It has `push`, `pop`, `front`, `back`, `empty`, `len()`
  and iteration.
- `ministructs.skiplist.SkipList` is an ordered map from integer keys to string
  values. It has up to 5 levels, and each new node gets a random level from 1
  to 4. You can pass your own `random.Random` to make the levels repeatable.
- `ministructs.tree.TreeNode` is an n-ary tree node that holds a string and an
  ordered list of children, with several traversals.

## Installation

```
pip install .
```

## Usage

```python
from ministructs.hashmap import HashTable
from ministructs.fifo import Queue
from ministructs.skiplist import SkipList
from ministructs.tree import TreeNode

table = HashTable()
table.insert("apple", 10)
table.update("apple", 100)
print(table.find("apple"))   # 100
print("banana" in table)     # False

queue = Queue()
for value in (1, 4, 132):
    queue.push(value)
print(queue.pop(), queue.front(), queue.back(), len(queue))   # 1 4 132 2

skip = SkipList()
skip.insert(5, "five")
skip.insert(3, "three")
print(list(skip))            # [(3, 'three'), (5, 'five')]

root = TreeNode("A")
child = TreeNode("B")
root.add_child(child)
child.add_child(TreeNode("D"))
root.add_child(TreeNode("C"))
print(root.level_order())    # ['A', 'B', 'C', 'D']
```

### Missing keys and empty containers

- `HashTable.find` and `SkipList.find` return `None` for a missing key.
- `HashTable.remove`, `SkipList.update` and `SkipList.delete` raise `KeyError`
  for a missing key. `SkipList.insert` and `HashTable.insert` add the key if it
  is missing and replace the value if it is already there. `HashTable.update`
  does the same as `insert`.
- `remove(value)` on either linked list raises `ValueError` if no node holds
  the value. Only the first matching node is removed.
- `Queue.pop`, `Queue.front`, `Queue.back` and the doubly linked list's
  `pop_front`, `first` and `last` raise `IndexError` when they are empty.

### Iteration and formatting

- `HashTable.items()` yields `(key, value)` pairs bucket by bucket. Within a
  bucket, the most recently added key comes first. `HashTable.format()` gives
  one `key: value` line per entry, in the same order.
- `SinglyLinkedList.format()` gives one value per line.
  `DoublyLinkedList.format()` starts with a count line, `一共N个数据`, and then
  gives one value per line.
- Iterating a `SkipList` yields `(key, value)` pairs in key order. The
  `SkipList.level` property reports how many levels are in use.

### Tree traversals

Every traversal method on `TreeNode` returns a list of node data:

- `pre_order_recursive()` and `pre_order_iterative()` return the nodes in
  pre-order. Both give the same result.
- `post_order_recursive()` and `post_order_iterative()` return the nodes in
  post-order. Both give the same result.
- `in_order_iterative()` visits the leaves depth first. Each leaf is followed
  by its nearest parent that is still pending, and any parents left over come
  at the end.
- `level_order()` returns the nodes breadth first.

## Demo

The `ministructs-demo` command fills a skip list and then runs some operations
on it:

```
ministructs-demo
```

It inserts keys 5, 3 and 7 and looks up 5, 3, 7 and 10. It then updates key 5,
looks it up, deletes it and looks it up again. Each result goes to standard
output, and the output ends with the value `-2147483648`. From Python,
`ministructs.demo.skip_demo(out)` writes the same lines to any text stream.

## Running the tests

```
pip install ".[test]"
pytest
```