"""SnippetVault: timestamped markdown snippets, found with fuzzy search."""

__version__ = "0.1.0"
