"""Runtime settings.

The CLI fills these from its options, each of which falls back to an
environment variable. ``Settings.from_env()`` reads the same variables
for callers that do not go through the CLI.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DATA_DIR_ENV = "POS_DATA_DIR"
ENFORCE_STOCK_ENV = "POS_ENFORCE_STOCK"
OUTPUT_DIR_ENV = "POS_OUTPUT_DIR"

_TRUTHY = {"1", "true", "t", "yes", "y", "on"}


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    enforce_stock: bool = False  # reject checkouts that would oversell
    output_dir: Path = Path(".")  # receipts and exported reports

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return Settings(
            data_dir=Path(env.get(DATA_DIR_ENV) or DEFAULT_DATA_DIR),
            enforce_stock=env.get(ENFORCE_STOCK_ENV, "").strip().lower() in _TRUTHY,
            output_dir=Path(env.get(OUTPUT_DIR_ENV) or "."),
        )
