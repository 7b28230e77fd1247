"""Reference catalogue of language and tool names for snippet labels.

The catalogue only helps users pick a label; ``create`` accepts any language.
"""

from __future__ import annotations

LANGUAGES: tuple[str, ...] = (
    "python",
    "cpp",
    "bash",
    "terminal",
    "shell",
    "zsh",
    "php",
    "typescript",
    "scala",
    "nvim",
    "neovim",
    "pdf",
    "markdown",
    "org",
    "text",
    "powerShell",
    "perl",
    "haskell",
    "kotlin",
    "sql",
    "matlab",
    "groovy",
    "lua",
    "rust",
    "ruby",
    "html and css",
    "java",
    "javascript",
    "swift",
    "c++",
    "c#",
    "docker",
    "kubernetes",
    "docker-compose",
    "rlang(R)",
    "golang(Go)",
    "vim",
    "apple",
    "mac",
    "macos",
    "applescript",
    "git",
    "gnuplot",
    "github",
    "linux",
    "gnu-linux",
    "ubuntu",
    "note",
    "memo",
    "awk",
    "sed",
    "tr",
    "cat",
    "jupyter",
    "jupyterlab",
    "lab",
    "bat",
    "latex",
    "emacs",
)
