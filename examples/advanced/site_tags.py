"""Site-specific tag tables and profiling."""

from wikilex import TokenizeConfig, tokenize, tokenize_config_context
from wikilex.profiling import profiled_tokenize

source = "<quiz>Q1</quiz> <ref>cite</ref>"

config = TokenizeConfig(extension_tags_enabled=False, extra_tags=frozenset({"quiz"}))
with profiled_tokenize() as metrics, tokenize_config_context(config):
    tokens = tokenize(source)

print("Tag names:", [t.tag_name for t in tokens if t.tag_name])
print(metrics.summary())
