"""Tests for the SDOC document parser."""

from pathlib import Path

import pytest

from sdoc.core import ir
from sdoc.core.dsl_parser_impl import ClauseKind, Parser, parse_dsl
from sdoc.core.dsl_parser_impl.clauses import new_definition_body
from sdoc.core.errors import ParseError
from sdoc.core.lexer import TokenType


def parse_one(text: str) -> ir.DefinitionSpec:
    definitions = parse_dsl(text)
    assert len(definitions) == 1
    return definitions[0]


class TestDocument:
    def test_empty_input(self):
        assert parse_dsl("") == []

    def test_comments_only(self):
        assert parse_dsl("# nothing here\n/* or here */\n// nor here\n") == []

    def test_definitions_keep_source_order(self):
        definitions = parse_dsl(
            """
            struct A {}
            fn b {}
            enum C {}
            """
        )
        assert [(d.kind, d.name) for d in definitions] == [
            (ir.DefinitionKind.STRUCT, "A"),
            (ir.DefinitionKind.FN, "b"),
            (ir.DefinitionKind.ENUM, "C"),
        ]

    @pytest.mark.parametrize("kind", [k.value for k in ir.DefinitionKind])
    def test_every_kind_keyword(self, kind: str):
        definition = parse_one(f"{kind} Thing {{ }}")
        assert definition.kind.value == kind
        assert definition.name == "Thing"

    def test_name_is_optional(self):
        definition = parse_one("struct { int x; }")
        assert definition.name == ""
        assert definition.fields[0].name == "x"

    def test_sample_document(self, geometry_definitions: list[ir.DefinitionSpec]):
        assert [d.name for d in geometry_definitions] == ["Point", "distance", "Color", "Line"]

        point = geometry_definitions[0]
        assert point.tags == ["core", "value", "copyable"]
        assert point.description == "A point in 2D space"
        assert point.version == "1.2"
        assert [f.name for f in point.required_fields] == ["x", "y"]

        distance = geometry_definitions[1]
        assert distance.return_type == "float"
        assert distance.links == ["Point", "Line"]
        assert [f.type for f in distance.fields] == ["Point&", "Point&"]

        line = geometry_definitions[3]
        assert line.deprecation_message == "use Segment instead"
        assert line.metadata == {"owner": "graphics"}


class TestFatalErrors:
    def test_unknown_kind_keyword(self):
        with pytest.raises(ParseError) as exc_info:
            parse_dsl("widget W { }")
        assert exc_info.value.token == "widget"
        assert "Expected definition kind keyword" in exc_info.value.message

    def test_string_is_not_a_kind_keyword(self):
        with pytest.raises(ParseError):
            parse_dsl('"struct" A { }')

    def test_missing_closing_brace(self):
        with pytest.raises(ParseError) as exc_info:
            parse_dsl("struct A { int x;")
        assert exc_info.value.token == ""
        assert "end of input" in exc_info.value.message

    def test_missing_opening_brace(self):
        with pytest.raises(ParseError) as exc_info:
            parse_dsl("struct A int x; }")
        assert exc_info.value.token == "int"

    def test_unterminated_string_swallows_closing_brace(self):
        with pytest.raises(ParseError):
            parse_dsl('struct A { desc: "never closed }')

    def test_error_after_valid_blocks_aborts_whole_parse(self):
        with pytest.raises(ParseError):
            parse_dsl("struct A { }\nstruct B { }\nwidget C { }")

    def test_tags_without_definition(self):
        with pytest.raises(ParseError) as exc_info:
            parse_dsl("@orphan")
        assert exc_info.value.token == ""

    def test_error_carries_location_and_snippet(self):
        with pytest.raises(ParseError) as exc_info:
            parse_dsl("struct A { }\n\nwidget B { }", Path("api.sdoc"))
        context = exc_info.value.context
        assert context is not None
        assert (context.line, context.column) == (3, 1)
        assert "api.sdoc:3:1" in str(exc_info.value)
        assert "^^^" in str(exc_info.value)


class TestBlockTags:
    def test_tags_before_kind(self):
        definition = parse_one("@core, internal struct A { }")
        assert definition.tags == ["core", "internal"]

    def test_tags_without_commas(self):
        definition = parse_one("@core internal\nstruct A { }")
        assert definition.tags == ["core", "internal"]

    def test_repeated_markers(self):
        definition = parse_one('@core @"needs review" fn f { }')
        assert definition.tags == ["core", "needs review"]

    def test_bare_deprecated_tag_is_only_a_tag(self):
        definition = parse_one("@deprecated struct Old { }")
        assert definition.tags == ["deprecated"]
        assert definition.deprecated_note == ""
        assert not definition.is_deprecated

    def test_block_tags_precede_tags_clause(self):
        definition = parse_one("@a struct A { tags: b c; }")
        assert definition.tags == ["a", "b", "c"]


class TestClauses:
    def test_quoted_description(self):
        assert parse_one('struct A { desc: "Hello; world"; }').description == "Hello; world"

    def test_unquoted_description_is_space_joined(self):
        definition = parse_one("struct A { desc: the quick brown fox; }")
        assert definition.description == "the quick brown fox"

    def test_unquoted_description_without_space_before_comma(self):
        definition = parse_one("struct A { desc: red, green and blue; }")
        assert definition.description == "red, green and blue"

    def test_unquoted_description_keeps_numbers_and_punctuation(self):
        definition = parse_one("struct A { desc: returns 0 = success: always; }")
        assert definition.description == "returns 0 = success : always"

    def test_unquoted_description_stops_at_links(self):
        definition = parse_one("fn f { desc: see also links: g, h; }")
        assert definition.description == "see also"
        assert definition.links == ["g", "h"]

    def test_unquoted_description_stops_at_closing_brace(self):
        definition = parse_one("fn f { desc: no terminator }")
        assert definition.description == "no terminator"

    def test_returns_composed_type(self):
        assert parse_one("fn f { returns: char * *; }").return_type == "char**"

    def test_returns_single_token_generic(self):
        assert parse_one("fn f { returns: Result<T>; }").return_type == "Result<T>"

    def test_returns_without_type(self):
        assert parse_one("fn f { returns: ; }").return_type == ""

    @pytest.mark.parametrize(
        "clause",
        ["tags: a, b, c;", "tags: a b c;", "tags: a, b c", 'tags: "a", b, "c";'],
    )
    def test_tag_lists_with_and_without_commas(self, clause: str):
        assert parse_one(f"struct A {{ {clause} }}").tags == ["a", "b", "c"]

    def test_list_clauses_keep_order_and_duplicates(self):
        definition = parse_one(
            """
            fn f {
              links: g, h, g;
              examples: "f(1)", "f(2)";
              notes: "first" "second";
              links: k;
            }
            """
        )
        assert definition.links == ["g", "h", "g", "k"]
        assert definition.examples == ["f(1)", "f(2)"]
        assert definition.notes == ["first", "second"]

    def test_scalar_clauses(self):
        definition = parse_one(
            """
            fn f {
              category: math;
              version: 2.1;
              author: "Ada Lovelace";
              since: 0.9;
            }
            """
        )
        assert definition.category == "math"
        assert definition.version == "2.1"
        assert definition.author == "Ada Lovelace"
        assert definition.since_version == "0.9"

    def test_category_rejects_number(self):
        definition = parse_one("fn f { category: 42; }")
        assert definition.category == ""

    def test_absent_clauses_are_empty(self):
        definition = parse_one("struct A { }")
        assert definition.description == ""
        assert definition.return_type == ""
        assert definition.links == []
        assert definition.metadata == {}
        assert definition.fields == []

    def test_terminators_are_optional(self):
        definition = parse_one('fn f { desc: "d" category: math version: 1 }')
        assert definition.description == "d"
        assert definition.category == "math"
        assert definition.version == "1"


class TestDeprecated:
    def test_with_message(self):
        definition = parse_one('struct A { deprecated: "use B"; }')
        assert definition.deprecated_note == "use B"
        assert definition.deprecation_message == "use B"

    def test_without_value(self):
        definition = parse_one("struct A { deprecated: ; }")
        assert definition.deprecated_note == "true"
        assert definition.is_deprecated
        assert definition.deprecation_message == ""

    def test_bare_word_is_consumed(self):
        definition = parse_one("struct A { deprecated: yes; int x; }")
        assert definition.deprecated_note == "true"
        assert [f.name for f in definition.fields] == ["x"]

    def test_only_one_stray_token_is_consumed(self):
        definition = parse_one("struct A { deprecated: old api; }")
        assert definition.deprecated_note == "true"
        assert [f.type for f in definition.fields] == ["api"]


class TestMetadata:
    def test_unknown_colon_clause_is_metadata(self):
        definition = parse_one("struct A { weight: 42; }")
        assert definition.metadata == {"weight": "42"}
        assert definition.fields == []

    def test_string_and_identifier_values(self):
        definition = parse_one('struct A { owner: "Team A"; tier: gold; }')
        assert definition.metadata == {"owner": "Team A", "tier": "gold"}

    def test_last_write_wins(self):
        definition = parse_one("struct A { owner: a; owner: b; }")
        assert definition.metadata == {"owner": "b"}

    def test_missing_value_stores_nothing(self):
        definition = parse_one("struct A { owner: ; }")
        assert definition.metadata == {}

    def test_keyword_without_colon_is_a_field(self):
        definition = parse_one("struct A { desc text; }")
        assert definition.description == ""
        assert definition.fields[0].type == "desc"
        assert definition.fields[0].name == "text"

    def test_quoted_keyword_is_not_a_clause(self):
        definition = parse_one('struct A { "desc": x; }')
        assert definition.description == ""
        assert [(f.type, f.name) for f in definition.fields] == [("x", "")]


class TestRecovery:
    def test_stray_tokens_are_skipped(self):
        definition = parse_one('struct A { 42 ; = , "stray" int x; }')
        assert [(f.type, f.name) for f in definition.fields] == [("int", "x")]

    def test_pathological_body_terminates(self):
        definition = parse_one("struct A { ; ; , = : : 1 -2 '' }")
        assert definition.fields == []
        assert definition.metadata == {}

    @pytest.mark.parametrize(
        "body",
        [
            "; , = : 1 'x' @",
            "desc: a b, c links: d e",
            "@required, int* p : q = 3 ;",
            "deprecated: deprecated: ;",
            "x: : y z @ @ w",
            "returns: * & ; tags: ,",
        ],
    )
    def test_every_clause_advances(self, body: str):
        parser = Parser(body, Path("<test>"))
        clause_body = new_definition_body()
        while parser.token.type != TokenType.EOF:
            before = (parser.token.line, parser.token.column)
            parser.parse_clause(clause_body)
            after = (parser.token.line, parser.token.column)
            assert after > before


class TestClassifyClause:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("desc: x", (ClauseKind.KEYWORD, "desc")),
            ("weight: 1", (ClauseKind.METADATA, "weight")),
            ("int x", (ClauseKind.FIELD, "int")),
            ("desc x", (ClauseKind.FIELD, "desc")),
            ("@required int x", (ClauseKind.FIELD, "")),
            ("42", (ClauseKind.SKIP, "")),
            ("}", (ClauseKind.SKIP, "")),
        ],
    )
    def test_classification(self, text: str, expected: tuple[ClauseKind, str]):
        assert Parser(text, Path("<test>")).classify_clause() == expected
