import io

from ministructs.demo import main, skip_demo


EXPECTED_LINES = [
    "查找5: 1`23",
    "查找3: 12314",
    "查找7: 4141",
    "查找10: NOT FOUND",
    "更新成功",
    "查找5: Updated",
    "删除成功",
    "删除5后查找5: NOT FOUND",
]


def run_demo():
    buffer = io.StringIO()
    skip_demo(buffer)
    return buffer.getvalue().splitlines()


def test_skip_demo_lookups():
    lines = run_demo()
    assert lines[0] == "查找5: 1`23"
    assert lines[1] == "查找3: 12314"
    assert lines[2] == "查找7: 4141"
    assert lines[3] == "查找10: NOT FOUND"


def test_skip_demo_update_and_delete():
    lines = run_demo()
    assert lines[4:] == EXPECTED_LINES[4:]


def test_skip_demo_is_repeatable():
    first = run_demo()
    second = run_demo()
    assert first == EXPECTED_LINES
    assert second == EXPECTED_LINES


def test_main_prints_demo_and_int_min(capsys):
    assert main([]) == 0
    output = capsys.readouterr().out
    assert output.endswith("NOT FOUND\n-2147483648")
    assert output.startswith("查找5: 1`23\n")


def test_main_without_arguments(capsys):
    assert main() == 0
    assert "查找5: Updated" in capsys.readouterr().out