"""Module entrypoint.

Allows:
    python -m ltsv_tokenizer
"""

from __future__ import annotations

from ltsv_tokenizer.server.ltsv_server import main

if __name__ == "__main__":
    main()
