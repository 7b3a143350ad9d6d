"""Tests for rpcpath.routing.pattern — placeholder parsing and pattern assembly."""

from rpcpath.config import CompileOptions
from rpcpath.routing.pattern import VAR_PATTERN, build_path_pattern


class TestVarPattern:
    def test_simple_name(self) -> None:
        assert VAR_PATTERN.fullmatch("{id}") is not None

    def test_dotted_name(self) -> None:
        match = VAR_PATTERN.fullmatch("{user.profile.id}")
        assert match is not None
        assert match.group(1) == "user.profile.id"

    def test_rejects_dash(self) -> None:
        assert VAR_PATTERN.fullmatch("{user-id}") is None

    def test_rejects_empty(self) -> None:
        assert VAR_PATTERN.fullmatch("{}") is None

    def test_ascii_only(self) -> None:
        assert VAR_PATTERN.fullmatch("{naïve}") is None


class TestBuildPathPattern:
    def test_names_in_order(self) -> None:
        _, names = build_path_pattern("/v1/{b}/x/{a.c}", CompileOptions())
        assert names == ("b", "a.c")

    def test_duplicate_names_kept(self) -> None:
        _, names = build_path_pattern("/{x}/{y}/{x}", CompileOptions())
        assert names == ("x", "y", "x")

    def test_malformed_placeholders_skipped(self) -> None:
        _, names = build_path_pattern("/{a-b}/{ok}/{open", CompileOptions())
        assert names == ("ok",)

    def test_adjacent_placeholders(self) -> None:
        source, names = build_path_pattern("/{a}{b}", CompileOptions())
        assert source == "/([^/]+)([^/]+)"
        assert names == ("a", "b")

    def test_literal_only(self) -> None:
        assert build_path_pattern("/v1/users", CompileOptions()) == ("/v1/users", ())

    def test_placeholders_become_groups(self) -> None:
        source, names = build_path_pattern("/v1/users/{user_id}/messages/{message_id}", CompileOptions())
        assert source == "/v1/users/([^/]+)/messages/([^/]+)"
        assert names == ("user_id", "message_id")

    def test_literals_escaped_by_default(self) -> None:
        source, _ = build_path_pattern("/files/{name}.json", CompileOptions())
        assert source == r"/files/([^/]+)\.json"

    def test_literals_unescaped(self) -> None:
        source, _ = build_path_pattern("/files/{name}.json", CompileOptions(escape_literals=False))
        assert source == "/files/([^/]+).json"

    def test_escape_override(self) -> None:
        options = CompileOptions(escape_literals=False)
        source, _ = build_path_pattern("/a.b", options, escape=True)
        assert source == r"/a\.b"

    def test_custom_segment_pattern(self) -> None:
        source, _ = build_path_pattern("/users/{id}", CompileOptions(segment_pattern=r"\d+"))
        assert source == r"/users/(\d+)"

    def test_malformed_placeholder_is_literal(self) -> None:
        source, names = build_path_pattern("/a/{b-c}", CompileOptions())
        assert names == ()
        assert source == r"/a/\{b\-c\}"
