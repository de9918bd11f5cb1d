"""Cache a token stream to disk: JSON round-trip."""

from wikilex import tokenize
from wikilex.serialization import from_json, to_json

tokens = tokenize("{{Infobox|name=Foo}}\n'''Foo''' is a <ref>bar</ref>.")

json_str = to_json(tokens)
restored = from_json(json_str)

print("Original == restored:", tokens == restored)
print("JSON length:", len(json_str), "chars")
