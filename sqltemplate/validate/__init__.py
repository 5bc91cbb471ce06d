"""sqltemplate raw-value validation."""
from sqltemplate.validate.raw_validator import RawValueValidator

__all__ = ["RawValueValidator"]
