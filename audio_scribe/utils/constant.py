"""Project-wide constants for convenient reuse."""

# pylint: disable=line-too-long

from __future__ import annotations

import os
import pathlib
import sys
from typing import Final

from audio_scribe.utils.env_loader import load_project_env

# Ensure .env is loaded exactly once at import time for the whole project
if "pytest" not in sys.modules:
    load_project_env()


# Repository root resolved relative to this file (utils/constant.py → package → repo)
REPO_ROOT: Final[pathlib.Path] = pathlib.Path(__file__).resolve().parents[2]

# Product name shown in generated documents
PRODUCT_NAME: Final[str] = os.getenv("PRODUCT_NAME", "Audio Scribe AI")

# Fallback filename stem when the media source is unknown
DEFAULT_BASE_FILENAME: Final[str] = os.getenv("DEFAULT_BASE_FILENAME", "transcricao")

# Directory the CLI writes exports to
DEFAULT_OUTPUT_DIR: Final[pathlib.Path] = pathlib.Path(
    os.getenv("DEFAULT_OUTPUT_DIR", "./output")
)

# Reject malformed segment timestamps in SRT export instead of coercing them
STRICT_TIMESTAMPS: Final[bool] = os.getenv("STRICT_TIMESTAMPS", "False").lower() == "true"

# Paginated document layout (units are millimetres, font sizes in points)
PDF_TITLE: Final[str] = os.getenv("PDF_TITLE", "Transcrição")
PDF_PAGE_FORMAT: Final[str] = os.getenv("PDF_PAGE_FORMAT", "A4")
PDF_FONT_FAMILY: Final[str] = os.getenv("PDF_FONT_FAMILY", "helvetica")
PDF_MARGIN_MM: Final[float] = float(os.getenv("PDF_MARGIN_MM", "20"))
PDF_LINE_HEIGHT_MM: Final[float] = float(os.getenv("PDF_LINE_HEIGHT_MM", "7"))
PDF_BYLINE_OFFSET_MM: Final[float] = float(os.getenv("PDF_BYLINE_OFFSET_MM", "8"))
# Distance from the top margin to the first body line on page one
PDF_BODY_OFFSET_MM: Final[float] = float(os.getenv("PDF_BODY_OFFSET_MM", "20"))
PDF_TITLE_FONT_SIZE: Final[float] = float(os.getenv("PDF_TITLE_FONT_SIZE", "18"))
PDF_BYLINE_FONT_SIZE: Final[float] = float(os.getenv("PDF_BYLINE_FONT_SIZE", "10"))
PDF_BODY_FONT_SIZE: Final[float] = float(os.getenv("PDF_BODY_FONT_SIZE", "12"))
# Grey level (0-255) of the byline
PDF_BYLINE_GRAY: Final[int] = int(os.getenv("PDF_BYLINE_GRAY", "100"))
