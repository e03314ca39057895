"""Tests for opbuild.helpers."""

import pytest

from opbuild.errors import ArgumentParseError
from opbuild.helpers import split_go_build_args, split_image_build_args


class TestSplitImageBuildArgs:
    def test_honors_double_and_single_quotes(self) -> None:
        assert split_image_build_args("\"a b\" c 'd e'") == ["a b", "c", "d e"]

    def test_empty_and_whitespace_yield_no_tokens(self) -> None:
        assert split_image_build_args("") == []
        assert split_image_build_args("   \t ") == []

    def test_backslash_escape(self) -> None:
        assert split_image_build_args(r"--label a\ b") == ["--label", "a b"]

    def test_build_arg_with_quoted_value(self) -> None:
        assert split_image_build_args('--build-arg "PROXY=http://x y" --no-cache') == [
            "--build-arg",
            "PROXY=http://x y",
            "--no-cache",
        ]

    def test_hash_is_not_a_comment(self) -> None:
        assert split_image_build_args("--label a#b") == ["--label", "a#b"]

    def test_unterminated_quote_raises(self) -> None:
        with pytest.raises(ArgumentParseError) as exc:
            split_image_build_args('"unterminated')
        assert exc.value.raw == '"unterminated'
        assert "not parseable" in str(exc.value)
        assert str(exc.value).count("unterminated") == 1
        assert isinstance(exc.value.__cause__, ValueError)

    def test_trailing_escape_raises(self) -> None:
        with pytest.raises(ArgumentParseError):
            split_image_build_args("abc\\")


class TestSplitGoBuildArgs:
    def test_splits_on_whitespace_only(self) -> None:
        assert split_go_build_args('-ldflags "-X a=b"') == ["-ldflags", '"-X', 'a=b"']

    def test_empty(self) -> None:
        assert split_go_build_args("") == []
