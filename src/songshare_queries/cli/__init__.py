"""Command-line interface for songshare-queries."""
