from . import lexicon, patterns

RULES_VERSION = "1.0.0"

__all__ = ["RULES_VERSION", "lexicon", "patterns"]
