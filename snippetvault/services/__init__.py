"""Workflows shared by SnippetVault commands."""
