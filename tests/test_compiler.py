"""Tests for waypoint.routing.compiler — template parsing and pattern building."""

import logging

import pytest

from waypoint.errors import DuplicateParameterError
from waypoint.routing.compiler import build_pattern, compile_route, parse_template
from waypoint.routing.route import TemplateSegment


class TestParseTemplate:
    def test_static(self) -> None:
        assert parse_template("/video") == [TemplateSegment("/video", 0, 6)]

    def test_empty(self) -> None:
        assert parse_template("") == []

    def test_param(self) -> None:
        segments = parse_template("/video/:id")
        assert segments == [
            TemplateSegment("/video/", 0, 7),
            TemplateSegment(":id", 7, 10, is_param=True, param_name="id"),
        ]

    def test_leading_and_trailing_params(self) -> None:
        segments = parse_template(":a/:b")
        assert [s.value for s in segments] == [":a", "/", ":b"]
        assert [s.is_param for s in segments] == [True, False, True]

    def test_trailing_literal(self) -> None:
        segments = parse_template("/video/:id/comments")
        assert segments[-1] == TemplateSegment("/comments", 10, 19)

    def test_offsets_index_original_template(self) -> None:
        template = "/a/:x/b/:y"
        for seg in parse_template(template):
            assert template[seg.start : seg.end] == seg.value


class TestDuplicateParameters:
    def test_duplicate_raises(self) -> None:
        with pytest.raises(DuplicateParameterError) as exc_info:
            parse_template("/dup/:n/:n")
        assert exc_info.value.parameter == "n"
        assert exc_info.value.route == "/dup/:n/:n"

    def test_first_duplicate_reported(self) -> None:
        with pytest.raises(DuplicateParameterError) as exc_info:
            compile_route("/:a/:b/:b/:a")
        assert exc_info.value.parameter == "b"

    def test_non_adjacent_duplicate(self) -> None:
        with pytest.raises(DuplicateParameterError) as exc_info:
            compile_route("/a/:id/comments/:id")
        assert exc_info.value.parameter == "id"
        assert exc_info.value.route == "/a/:id/comments/:id"

    def test_names_are_case_sensitive(self) -> None:
        route = compile_route("/:id/:ID")
        assert route.keys == ("id", "ID")


class TestBuildPattern:
    def test_single_param(self) -> None:
        assert build_pattern(parse_template("/video/:id")) == "^/video/([^/]+)/?$"

    def test_static(self) -> None:
        assert build_pattern(parse_template("/about")) == "^/about/?$"

    def test_literals_escaped(self) -> None:
        assert build_pattern(parse_template("/feed.json")) == r"^/feed\.json/?$"

    def test_param_inside_segment(self) -> None:
        assert build_pattern(parse_template("/v:version/docs")) == "^/v([^/]+)/docs/?$"


class TestCompileRoute:
    def test_video(self) -> None:
        route = compile_route("/video/:id")
        assert route.template == "/video/:id"
        assert route.pattern == "^/video/([^/]+)/?$"
        assert route.keys == ("id",)

    def test_keys_in_order(self) -> None:
        route = compile_route("/video/:id/comments/:commentId")
        assert route.keys == ("id", "commentId")

    def test_no_params(self) -> None:
        route = compile_route("/settings/profile")
        assert route.pattern == "^/settings/profile/?$"
        assert route.keys == ()

    def test_unusual_names(self) -> None:
        route = compile_route("/:123/:a-b_c")
        assert route.keys == ("123", "a-b_c")
        assert route.params("/1/2") == {"123": "1", "a-b_c": "2"}

    def test_dot_matches_only_dot(self) -> None:
        route = compile_route("/feed.json")
        assert route.matches("/feed.json")
        assert not route.matches("/feedxjson")

    def test_regex_metacharacters_literal(self) -> None:
        route = compile_route("/search/(all)/:q")
        assert route.params("/search/(all)/cats") == {"q": "cats"}
        assert route.params("/search/all/cats") is None

    def test_logs_compilation(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="waypoint.routing")
        compile_route("/video/:id")
        assert any("/video/:id" in r.getMessage() for r in caplog.records)
