"""Small helpers used across SnippetVault."""
