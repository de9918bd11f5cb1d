"""Marker strings and trigger characters for the tokenizer states.

Usage:
    from wikilex.lexer.markers import COMMENT_END_MARKER

    if run.endswith(COMMENT_END_MARKER):
        ...
"""

SINGLE_QUOTE = "'"

BOLD_MARKER = "'''"
ITALIC_MARKER = "''"

# Quote run lengths
ITALIC_QUOTES = len(ITALIC_MARKER)
BOLD_QUOTES = len(BOLD_MARKER)
BOLD_ITALIC_QUOTES = BOLD_QUOTES + ITALIC_QUOTES

COMMENT_BEGIN_MARKER = "<!--"
COMMENT_END_MARKER = "-->"

START_TAG_MARKER = "<"
END_TAG_MARKER = "</"

NEWLINE = "\n"
