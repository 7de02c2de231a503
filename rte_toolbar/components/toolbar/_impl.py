"""
Toolbar grammar - parsing, exclusion, repair and serialization.

Toolbar strings follow the editor's compact grammar:

    section  := group ('|' group)*
    toolbar  := section (('/' | '#') section)*
    group    := tools | '{' tools '}'
    tools    := token (',' token)*

Tokens may carry a ':toggle' or ':dropdown' modifier which is always
stripped. Everything here is pure: no I/O, no shared state, never raises.

Key behaviors:
- normalize() tokenizes before removing tools, so names never fragment
- repair_structure() restores strings already damaged by substring edits
- Output never has empty groups, doubled or dangling separators
- normalize() is idempotent
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

# --- Presets ---

PRESETS: dict[str, str] = {
    "BASIC": "bold,italic,underline|fontname,fontsize|forecolor,backcolor|removeformat",
    "STANDARD": (
        "bold,italic,underline,strikethrough|fontname,fontsize|forecolor,backcolor"
        "|removeformat|undo,redo"
    ),
    "FULL": (
        "{bold,italic,underline,forecolor,backcolor}"
        "|{justifyleft,justifycenter,justifyright,justifyfull}"
        "|{insertorderedlist,insertunorderedlist,indent,outdent}{superscript,subscript}"
        " #{paragraphs:toggle,fontname:toggle,fontsize:toggle,inlinestyle,lineheight}"
        " / {removeformat,cut,copy,paste,delete,find}"
        "|{insertlink,unlink,insertblockquote,insertemoji,insertchars,inserttable,"
        "insertimage,insertgallery,insertvideo,insertdocument,insertcode}"
        "#{preview,code,selectall}"
        " /{paragraphs:dropdown | fontname:dropdown | fontsize:dropdown}"
        " {paragraphstyle,toggle_paragraphop,menu_paragraphop}"
        "#{toggleborder,fullscreenenter,fullscreenexit,undo,redo,togglemore}"
    ),
    "MINIMAL": "bold,italic|fontsize|forecolor|removeformat",
}

# Used when a normalized toolbar comes out empty.
DEFAULT_TOOLBAR = PRESETS["MINIMAL"]

# Tools the editor's primary mobile toolbar already shows.
BASIC_MOBILE_TOOLS: tuple[str, ...] = (
    "paragraphs",
    "fontname",
    "fontsize",
    "bold",
    "italic",
    "underline",
    "insertlink",
    "insertemoji",
    "insertimage",
    "insertvideo",
    "removeformat",
    "code",
    "toggleborder",
    "fullscreenenter",
    "fullscreenexit",
    "undo",
    "redo",
    "togglemore",
)

DEFAULT_MOBILE_TOOLBAR = (
    "{strike,subscript,superscript}|{forecolor,backcolor}"
    "|{justifyleft,justifycenter,justifyright,justifyfull}"
    "|{insertorderedlist,insertunorderedlist}|{outdent,indent}"
    "|{inserthorizontalrule,insertblockquote,inserttable}"
    "|{cut,copy,paste,pastetext,pasteword}"
    "|{find,replace}|{selectall,print,spellcheck}|{help}"
)

# (left, right-prefix) pairs that naive substring removal is known to glue
# together. Extend this when adding tools to the vocabulary.
KNOWN_ADJACENT_PAIRS: tuple[tuple[str, str], ...] = (
    ("fontname", "fontsize"),
    ("fontsize", "inlinestyle"),
    ("inlinestyle", "lineheight"),
    ("paragraphs", "fontname"),
    ("paragraphstyle", "menu_"),
    ("underline", "fore"),
    ("forecolor", "back"),
    ("outdent", "superscript"),
    ("insertlink", "un"),
    ("unlink", "insert"),
)

MODIFIERS: tuple[str, ...] = (":toggle", ":dropdown")

DIVIDERS = "/#"


@dataclass(frozen=True)
class ToolbarConfig:
    """Toolbar configuration from rules."""

    presets: dict[str, str] = field(default_factory=lambda: dict(PRESETS))
    default_toolbar: str = DEFAULT_TOOLBAR
    basic_mobile_tools: tuple[str, ...] = BASIC_MOBILE_TOOLS
    default_mobile_toolbar: str = DEFAULT_MOBILE_TOOLBAR
    adjacent_pairs: tuple[tuple[str, str], ...] = KNOWN_ADJACENT_PAIRS


DEFAULT_CONFIG = ToolbarConfig()


# --- Structured Form ---


@dataclass(frozen=True)
class ToolbarGroup:
    """A '|'-delimited cluster of tools, optionally brace-wrapped."""

    tools: tuple[str, ...]
    braced: bool = False

    def render(self) -> str:
        body = ",".join(self.tools)
        return f"{{{body}}}" if self.braced else body


@dataclass(frozen=True)
class ToolbarSection:
    """
    A '/'- or '#'-delimited cluster of groups.

    divider is the delimiter written before this section ("" for the first).
    """

    groups: tuple[ToolbarGroup, ...]
    divider: str = ""

    def render(self) -> str:
        return "|".join(group.render() for group in self.groups if group.tools)


@dataclass(frozen=True)
class ToolbarLayout:
    """Parsed toolbar: sections of groups of tool tokens."""

    sections: tuple[ToolbarSection, ...] = ()

    @property
    def tools(self) -> list[str]:
        """Every tool token, in order of appearance."""
        return [
            tool
            for section in self.sections
            for group in section.groups
            for tool in group.tools
        ]

    @property
    def is_empty(self) -> bool:
        return not self.tools


# --- Pipeline Stages ---

_MODIFIER_RE = re.compile("|".join(re.escape(m) for m in MODIFIERS))


def strip_modifiers(text: str) -> str:
    """Remove every ':toggle' and ':dropdown' suffix."""
    # Repeat until stable: removing one modifier can splice another together.
    while True:
        stripped = _MODIFIER_RE.sub("", text)
        if stripped == text:
            return stripped
        text = stripped


def tool_pattern(name: str) -> re.Pattern[str]:
    """Whole-word pattern for a tool name, with regex metacharacters escaped."""
    return re.compile(rf"(?<!\w){re.escape(name)}(?!\w)")


def apply_exclusions(text: str, excluded: Iterable[str]) -> str:
    """
    Remove every whole-word occurrence of each excluded name, in order.
    Names are reduced to bare names first, so "bold:toggle" excludes "bold".

    The result still carries separator artifacts; feed it to
    repair_structure().
    """
    for name in excluded:
        name = strip_modifiers(name)
        if not name:
            continue
        text = tool_pattern(name).sub("", text)
    return text


def _collapse_separators(text: str) -> str:
    text = re.sub(r",+", ",", text)
    return re.sub(r"\|+", "|", text)


_SINGLE_LETTER_RE = re.compile(r"\b([a-z]),(?=[a-z],|[a-z]\b)")


def _rejoin_single_letters(text: str) -> str:
    """Glue 'b,o,l,d' back into 'bold' until a pass changes nothing."""
    for _ in range(len(text)):
        joined = _SINGLE_LETTER_RE.sub(r"\1", text)
        if joined == text:
            break
        text = joined
    return text


def _split_adjacent(text: str, pairs: Sequence[tuple[str, str]]) -> str:
    for left, right in pairs:
        text = re.sub(rf"(?<={re.escape(left)})(?={re.escape(right)})", ",", text)
    return text


def repair_structure(
    text: str,
    adjacent_pairs: Sequence[tuple[str, str]] = KNOWN_ADJACENT_PAIRS,
) -> str:
    """
    Restore a well-formed toolbar string after destructive edits.

    Strips modifiers, collapses doubled separators, strips separators
    hugging braces, drops empty groups, trims whitespace, rejoins
    single-letter fragments, splits known glued tool names and
    re-serializes section by section.
    Malformed or fully emptied input comes back as "".
    """
    text = strip_modifiers(text)
    text = _collapse_separators(text)
    text = re.sub(r"\{[\s,|]*", "{", text)
    text = re.sub(r"[\s,|]*\}", "}", text)
    text = re.sub(r"\{\s*\}", "", text)

    text = re.sub(r"\s*([,|/#])\s*", r"\1", text)
    text = re.sub(r"\{\s+", "{", text)
    text = re.sub(r"\s+\}", "}", text)
    text = re.sub(r"\s+", ",", text.strip())
    text = _collapse_separators(text)

    text = _rejoin_single_letters(text)
    text = _split_adjacent(text, adjacent_pairs)

    return serialize_toolbar(parse_toolbar(text))


# --- Parser / Serializer ---


class _LayoutBuilder:
    """Accumulates tokens into groups and sections while scanning."""

    def __init__(self) -> None:
        self.sections: list[ToolbarSection] = []
        self.groups: list[ToolbarGroup] = []
        self.tools: list[str] = []
        self.token: list[str] = []
        self.divider = ""
        self.braced = False

    def end_token(self) -> None:
        if self.token:
            self.tools.append("".join(self.token))
            self.token = []

    def end_group(self) -> None:
        self.end_token()
        if self.tools:
            self.groups.append(ToolbarGroup(tools=tuple(self.tools), braced=self.braced))
            self.tools = []

    def end_section(self, next_divider: str) -> None:
        self.end_group()
        self.sections.append(ToolbarSection(groups=tuple(self.groups), divider=self.divider))
        self.groups = []
        self.divider = next_divider
        self.braced = False

    def build(self) -> ToolbarLayout:
        self.end_section("")
        return ToolbarLayout(sections=tuple(self.sections))


def parse_toolbar(text: str) -> ToolbarLayout:
    """
    Tokenize a toolbar string into sections, groups and tools.

    Lenient by construction: a stray '}' closes nothing, an unclosed '{'
    ends with its section, '|' inside braces splits the braced list, and
    whitespace between two names separates them.
    """
    builder = _LayoutBuilder()

    for ch in text:
        if ch in DIVIDERS:
            builder.end_section(ch)
        elif ch == "{":
            builder.end_group()
            builder.braced = True
        elif ch == "}":
            builder.end_group()
            builder.braced = False
        elif ch == "|":
            builder.end_group()
        elif ch == "," or ch.isspace():
            builder.end_token()
        else:
            builder.token.append(ch)

    return builder.build()


def serialize_toolbar(layout: ToolbarLayout) -> str:
    """Emit the canonical string, skipping empty groups and sections."""
    parts: list[str] = []
    for section in layout.sections:
        body = section.render()
        if not body:
            continue
        if parts:
            parts.append(section.divider or "/")
        parts.append(body)
    return "".join(parts)


def remove_tools(layout: ToolbarLayout, excluded: Iterable[str]) -> ToolbarLayout:
    """Drop every token whose bare name is excluded."""
    names = {strip_modifiers(name) for name in excluded if name}
    if not names:
        return layout

    return ToolbarLayout(
        sections=tuple(
            ToolbarSection(
                groups=tuple(
                    ToolbarGroup(
                        tools=tuple(tool for tool in group.tools if tool not in names),
                        braced=group.braced,
                    )
                    for group in section.groups
                ),
                divider=section.divider,
            )
            for section in layout.sections
        )
    )


# --- Public Operations ---


def normalize(toolbar: str, excluded: Iterable[str] = ()) -> str:
    """
    Strip modifiers, remove excluded tools and re-emit a canonical toolbar.

    An empty result means every tool was excluded; callers substitute a
    default toolbar.
    """
    layout = parse_toolbar(strip_modifiers(toolbar))
    return serialize_toolbar(remove_tools(layout, excluded))


def get_preset(name: str, presets: dict[str, str] | None = None) -> str | None:
    """Look up a preset by name, case-insensitively."""
    if presets is None:
        presets = PRESETS
    if name in presets:
        return presets[name]
    wanted = name.strip().upper()
    for key, value in presets.items():
        if key.upper() == wanted:
            return value
    return None


def derive_mobile_toolbar(
    toolbar: str,
    excluded: Iterable[str] = (),
    basic_tools: Iterable[str] = BASIC_MOBILE_TOOLS,
    fallback: str = DEFAULT_MOBILE_TOOLBAR,
) -> str:
    """
    Build the expanded mobile toolbar.

    Removes the tools the basic mobile toolbar already shows, then the
    caller's exclusions. Falls back to the default mobile toolbar when
    nothing is left.
    """
    derived = normalize(toolbar, [*basic_tools, *excluded])
    return derived or fallback


def build_image_toolbar(items: Iterable[str]) -> str:
    """
    Build the image control toolbar from a list of tools.

    With a '/' entry the caller controls layout and items are concatenated
    as given; otherwise all tools share one braced group.
    """
    tools = [item for item in items if item]
    if not tools:
        return ""
    if "/" in tools:
        return "".join(tools)
    return "{" + ",".join(tools) + "}"
