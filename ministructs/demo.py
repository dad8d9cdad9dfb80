"""Command that exercises the skip list and prints the results."""

from __future__ import annotations

import sys
from typing import TextIO

from ministructs.skiplist import SkipList

INT_MIN = -(2**31)


def skip_demo(out: TextIO) -> None:
    """Insert, look up, update and delete a few keys, writing each result to ``out``."""
    skip_list = SkipList()
    skip_list.insert(5, "1`23")
    skip_list.insert(3, "12314")
    skip_list.insert(7, "4141")

    def show(label: str, key: int) -> None:
        value = skip_list.find(key)
        out.write(f"{label}: {value if value is not None else 'NOT FOUND'}\n")

    for key in (5, 3, 7, 10):
        show(f"查找{key}", key)

    try:
        skip_list.update(5, "Updated")
        out.write("更新成功\n")
    except KeyError:
        out.write("UPDATE FAIL, NOT FOUND\n")
    show("查找5", 5)

    try:
        skip_list.delete(5)
        out.write("删除成功\n")
    except KeyError:
        out.write("Key not found\n")
    show("删除5后查找5", 5)


def main(argv: list[str] | None = None) -> int:
    """Run the skip list demonstration on standard output."""
    skip_demo(sys.stdout)
    sys.stdout.write(f"{INT_MIN}")
    return 0


if __name__ == "__main__":
    sys.exit(main())