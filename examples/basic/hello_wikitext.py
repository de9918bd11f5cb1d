"""Tokenize wikitext in 3 lines: zero config, zero deps."""

from wikilex import tokenize

for token in tokenize("'''Hello''' [[World]]"):
    print(token)
