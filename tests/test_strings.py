"""
Tests for case conversion helpers.
"""

import pytest

from utilkit.common import (
    camel_to_kebab,
    camel_to_snake,
    kebab_to_camel,
    path_to_camel,
    snake_to_camel,
)


class TestPathToCamel:
    """Slash paths to camel case."""

    @pytest.mark.parametrize("path,expected", [
        ("/user/list", "UserList"),
        ("api/get-data", "apiGet-data"),
        ("/a/b/c", "ABC"),
        ("plain", "plain"),
        ("", ""),
        ("trailing/", "trailing/"),
        ("/-dash", "/-dash"),
        ("/1st/page", "1stPage"),
        ("/snake_case/x", "Snake_caseX"),
    ])
    def test_conversion(self, path, expected):
        assert path_to_camel(path) == expected

    def test_only_first_character_is_upper_cased(self):
        """The rest of each segment is left alone."""
        assert path_to_camel("/userID/listAll") == "UserIDListAll"


class TestCaseConversions:
    """camel/snake/kebab conversions."""

    @pytest.mark.parametrize("text,expected", [
        ("camelCase", "camel_case"),
        ("PascalCase", "pascal_case"),
        ("HTTPServer", "http_server"),
        ("getHTTPResponse", "get_http_response"),
        ("version2Update", "version2_update"),
        ("already_snake", "already_snake"),
    ])
    def test_camel_to_snake(self, text, expected):
        assert camel_to_snake(text) == expected

    def test_snake_to_camel(self):
        assert snake_to_camel("user_list") == "userList"
        assert snake_to_camel("user_list", upper=True) == "UserList"
        assert snake_to_camel("__private__name") == "privateName"
        assert snake_to_camel("") == ""

    def test_kebab(self):
        assert camel_to_kebab("userListItem") == "user-list-item"
        assert kebab_to_camel("user-list-item") == "userListItem"
        assert kebab_to_camel("user-list", upper=True) == "UserList"
