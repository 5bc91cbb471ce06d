"""sqltemplate configuration models."""
from sqltemplate.schema.policy import DEFAULT_KEYWORDS, DEFAULT_POLICY, RawPolicy

__all__ = ["DEFAULT_KEYWORDS", "DEFAULT_POLICY", "RawPolicy"]
