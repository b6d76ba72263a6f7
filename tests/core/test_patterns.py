"""tests for pattern table types and built-in rules."""

import re

from mdpreview.core.patterns import Callback, Pattern, Template, default_patterns
from mdpreview.core.preprocessors import preprocess_blockquotes, preprocess_lists


def test_template_expands_groups() -> None:
    """$N references expand to captured groups."""
    regex = re.compile(r"(\w+)@(\w+)")
    assert Template("$2:$1").apply(regex, "user@host") == "host:user"


def test_template_unmatched_group_is_empty() -> None:
    """optional groups that did not participate expand to ''."""
    regex = re.compile(r"(a)(b)?")
    assert Template("<$1|$2>").apply(regex, "a") == "<a|>"


def test_template_special_references() -> None:
    """$& is the whole match and $$ a literal dollar."""
    regex = re.compile(r"\d+")
    assert Template("[$&]$$").apply(regex, "42") == "[42]$"


def test_template_unknown_group_stays_literal() -> None:
    """references to missing groups are left as written."""
    regex = re.compile(r"(x)")
    assert Template("$3").apply(regex, "x") == "$3"
    assert Template("$0").apply(regex, "x") == "$0"


def test_template_two_digit_fallback() -> None:
    """$12 reads as group 1 followed by '2' when group 12 doesn't exist."""
    regex = re.compile(r"(x)")
    assert Template("$12").apply(regex, "x") == "x2"


def test_callback_receives_match_and_groups() -> None:
    """callbacks get the full match followed by groups."""
    seen: list[tuple[str, ...]] = []

    def add(match: str, left: str, right: str) -> str:
        seen.append((match, left, right))
        return str(int(left) + int(right))

    regex = re.compile(r"(\d+)-(\d+)")
    assert Callback(add).apply(regex, "2-3 and 4-5") == "5 and 9"
    assert seen == [("2-3", "2", "3"), ("4-5", "4", "5")]


def test_string_matcher_compiles_multiline() -> None:
    """string matchers are compiled with re.MULTILINE."""
    compiled = Pattern(r"^x$", Template("y")).compile()
    assert compiled.flags & re.MULTILINE
    assert Template("y").apply(compiled, "x\nx") == "y\ny"


def test_compiled_matcher_used_as_is() -> None:
    """precompiled matchers keep their own flags."""
    regex = re.compile(r"x", re.IGNORECASE)
    assert Pattern(regex, Template("y")).compile() is regex


def test_default_pattern_order() -> None:
    """built-in rules are ordered with paragraph last."""
    assert list(default_patterns()) == [
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "bold",
        "italic",
        "unordered_list",
        "ordered_list",
        "link",
        "image",
        "code_block",
        "inline_code",
        "blockquote",
        "hr",
        "paragraph",
    ]


def test_default_patterns_are_fresh() -> None:
    """each call builds a new table."""
    first = default_patterns()
    first.pop("h1")
    assert "h1" in default_patterns()


def test_preprocessing_attached_to_block_rules() -> None:
    """list and blockquote rules carry their preprocessors."""
    patterns = default_patterns()
    assert patterns["unordered_list"].preprocessing is preprocess_lists
    assert patterns["ordered_list"].preprocessing is preprocess_lists
    assert patterns["blockquote"].preprocessing is preprocess_blockquotes
    assert patterns["bold"].preprocessing is None


def test_heading_rule_matches_exact_hash_count() -> None:
    """the h1 rule leaves deeper headings alone."""
    h1 = default_patterns()["h1"]
    assert h1.replacement.apply(h1.compile(), "## x") == "## x"


def test_code_block_escapes_quotes() -> None:
    """single and double quotes are escaped in code bodies."""
    rule = default_patterns()["code_block"]
    html = rule.replacement.apply(rule.compile(), "```py\nprint('a' & \"b\")\n```")
    assert html == (
        '<pre><code class="language-py">'
        "print(&#x27;a&#x27; &amp; &quot;b&quot;)</code></pre>"
    )


def test_blockquote_rule_wraps_unprocessed_lines() -> None:
    """the blockquote rule alone wraps quote lines it sees."""
    rule = default_patterns()["blockquote"]
    assert rule.replacement.apply(rule.compile(), "> hi") == (
        "<blockquote>hi</blockquote>"
    )


def test_paragraph_rule_skips_tag_lines() -> None:
    """lines starting with opening or closing tags are not wrapped."""
    rule = default_patterns()["paragraph"]
    text = "<ul>\n</ul>\nplain"
    assert rule.replacement.apply(rule.compile(), text) == "<ul>\n</ul>\n<p>plain</p>"
