# SPDX-License-Identifier: Apache-2.0
"""Module entrypoint for ``python -m avconnect``."""

from .cli import app

if __name__ == "__main__":
    app()
