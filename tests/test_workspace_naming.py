from __future__ import annotations

import pytest

from src.workspace.naming import (
    camelize,
    classify,
    dasherize,
    decamelize,
    split_tags,
    validate_path_segments,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("myApp", "my-app"),
        ("MyApp", "my-app"),
        ("my app", "my-app"),
        ("my_app", "my-app"),
        ("my-app", "my-app"),
        ("myDir/subDir", "my-dir/sub-dir"),
        ("innerHTML", "inner-html"),
    ],
)
def test_dasherize(raw: str, expected: str) -> None:
    assert dasherize(raw) == expected


def test_decamelize() -> None:
    assert decamelize("myApp2Go") == "my_app2_go"


def test_camelize_and_classify() -> None:
    assert camelize("my-dir-my-app") == "myDirMyApp"
    assert camelize("Foo_bar") == "fooBar"
    assert classify("my-dir-my-app") == "MyDirMyApp"
    assert classify("my-app.admin") == "MyApp.Admin"


def test_split_tags_keeps_order_and_drops_blanks() -> None:
    assert split_tags("one,two") == ["one", "two"]
    assert split_tags(" b , a ,, c") == ["b", "a", "c"]
    assert split_tags("") == []
    assert split_tags(None) == []


def test_validate_path_segments() -> None:
    assert validate_path_segments("my-dir/my-app") == "my-dir/my-app"
    for bad in ["", "a//b", "../x", "a/B", "-a"]:
        with pytest.raises(ValueError):
            validate_path_segments(bad)
