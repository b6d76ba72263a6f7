"""pattern table types and the built-in rule set."""

import html
import re
from dataclasses import dataclass
from typing import Callable, Optional, Union

from mdpreview.core.preprocessors import preprocess_blockquotes, preprocess_lists

PreprocessingFunction = Callable[[str], str]
ReplacementFunction = Callable[..., str]
Matcher = Union[str, "re.Pattern[str]"]

# $1..$99, $& (whole match), $$ (literal dollar)
GROUP_REFERENCE = re.compile(r"\$(\$|&|\d{1,2})")

PARAGRAPH = "paragraph"


@dataclass(frozen=True)
class Template:
    """literal replacement template with $N group references."""

    template: str

    def expand(self, match: "re.Match[str]") -> str:
        """expands group references against a single match."""
        group_count = match.re.groups

        def substitute(reference: "re.Match[str]") -> str:
            token = reference.group(1)
            if token == "$":
                return "$"
            if token == "&":
                return match.group(0)

            index = int(token)
            if 0 < index <= group_count:
                return match.group(index) or ""
            # "$12" with a single group reads as group 1 followed by "2"
            if len(token) == 2 and 0 < int(token[0]) <= group_count:
                return (match.group(int(token[0])) or "") + token[1]
            return reference.group(0)

        return GROUP_REFERENCE.sub(substitute, self.template)

    def apply(self, regex: "re.Pattern[str]", text: str) -> str:
        """replaces every match of regex in text."""
        return regex.sub(self.expand, text)


@dataclass(frozen=True)
class Callback:
    """replacement computed by a function of the full match and its groups."""

    function: ReplacementFunction

    def apply(self, regex: "re.Pattern[str]", text: str) -> str:
        """replaces every match of regex in text."""
        return regex.sub(
            lambda match: self.function(match.group(0), *match.groups("")), text
        )


Replacement = Union[Template, Callback]


@dataclass(frozen=True)
class Pattern:
    """
    named rule pairing a matcher with a replacement.

    String matchers are compiled with re.MULTILINE when the pattern is applied,
    so a malformed expression surfaces at render time, not at registration.
    """

    matcher: Matcher
    replacement: Replacement
    preprocessing: Optional[PreprocessingFunction] = None

    def compile(self) -> "re.Pattern[str]":
        """returns the compiled matcher."""
        if isinstance(self.matcher, re.Pattern):
            return self.matcher
        return re.compile(self.matcher, re.MULTILINE)


def _render_code_block(_match: str, lang: str, code: str) -> str:
    language = f' class="language-{lang}"' if lang else ""
    return f"<pre><code{language}>{html.escape(code)}</code></pre>"


def default_patterns() -> dict[str, Pattern]:
    """
    builds the built-in rule table.

    Order matters: the paragraph rule must stay last so it does not re-wrap
    block tags produced by the earlier rules.

    Returns:
        fresh ordered mapping of rule name to pattern
    """
    patterns: dict[str, Pattern] = {}

    for level in range(1, 7):
        patterns[f"h{level}"] = Pattern(
            re.compile(rf"^#{{{level}}} (.+)$", re.MULTILINE),
            Template(f"<h{level}>$1</h{level}>"),
        )

    patterns["bold"] = Pattern(
        re.compile(r"\*\*(.+?)\*\*"), Template("<strong>$1</strong>")
    )
    patterns["italic"] = Pattern(re.compile(r"\*(.+?)\*"), Template("<em>$1</em>"))

    patterns["unordered_list"] = Pattern(
        re.compile(r"^\s*[-*+][ \t]+(.+)$", re.MULTILINE),
        Template("<li>$1</li>"),
        preprocessing=preprocess_lists,
    )
    patterns["ordered_list"] = Pattern(
        re.compile(r"^\s*\d+\.[ \t]+(.+)$", re.MULTILINE),
        Template("<li>$1</li>"),
        preprocessing=preprocess_lists,
    )

    # the lookbehind leaves image syntax for the image rule
    patterns["link"] = Pattern(
        re.compile(r"(?<!!)\[(.+?)\]\((.+?)\)"), Template('<a href="$2">$1</a>')
    )
    patterns["image"] = Pattern(
        re.compile(r"!\[(.+?)\]\((.+?)\)"), Template('<img src="$2" alt="$1">')
    )

    patterns["code_block"] = Pattern(
        re.compile(r"```([a-z]*)\n([\s\S]*?)\n```"), Callback(_render_code_block)
    )
    patterns["inline_code"] = Pattern(
        re.compile(r"`(.+?)`"), Template("<code>$1</code>")
    )

    patterns["blockquote"] = Pattern(
        re.compile(r"^>[ \t]+(.+)$", re.MULTILINE),
        Template("<blockquote>$1</blockquote>"),
        preprocessing=preprocess_blockquotes,
    )

    patterns["hr"] = Pattern(re.compile(r"^---$", re.MULTILINE), Template("<hr>"))

    # closing tags count too: list and quote wrappers sit on their own lines
    patterns[PARAGRAPH] = Pattern(
        re.compile(r"^(?!</?[a-z][^>]*>)(.+)$", re.MULTILINE), Template("<p>$1</p>")
    )

    return patterns
