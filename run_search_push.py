"""Convenience shim to run the search-push workflow."""

from __future__ import annotations

import sys

from search_push.runner import main as search_push_main


if __name__ == "__main__":
    search_push_main(sys.argv[1:])
