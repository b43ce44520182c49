"""Interactive ESLint and Prettier setup for JavaScript projects."""

__version__ = "0.1.0"
