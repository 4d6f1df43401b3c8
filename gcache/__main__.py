"""Entry point for ``python -m gcache``."""

from __future__ import annotations

from gcache.app.main import run

if __name__ == "__main__":
    run()
