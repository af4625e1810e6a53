"""ddd-skeleton -- generates domain-driven TypeScript project skeletons."""

__version__ = "1.0.0"
