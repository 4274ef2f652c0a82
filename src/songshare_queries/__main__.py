"""Allow ``python -m songshare_queries``; the CLI lives in `cli.__main__`."""

from __future__ import annotations

from .cli.__main__ import build_parser, main

__all__ = ["build_parser", "main"]

if __name__ == "__main__":
    main()
