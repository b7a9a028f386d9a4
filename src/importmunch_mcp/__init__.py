"""Find every name a TypeScript codebase imports from a given package."""

__version__ = "0.1.0"
