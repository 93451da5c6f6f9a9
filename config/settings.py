#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings

from .constants import (
    DEFAULT_TEMPLATE_ID,
    DEFAULT_ZOOM,
    MIN_ZOOM,
    MAX_ZOOM,
    COLUMN_GAP_TWIPS,
    PARAGRAPH_SPACE_AFTER_TWIPS,
    CUSTOM_TEMPLATES_FILE,
    OUTPUT_DIR,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # ========== Templates ==========
    default_template_id: str = DEFAULT_TEMPLATE_ID
    custom_templates_file: Path = BASE_DIR / CUSTOM_TEMPLATES_FILE

    # ========== Preview ==========
    default_zoom: float = DEFAULT_ZOOM
    min_zoom: float = MIN_ZOOM
    max_zoom: float = MAX_ZOOM

    # ========== DOCX Export ==========
    column_gap_twips: int = COLUMN_GAP_TWIPS
    paragraph_space_after_twips: int = PARAGRAPH_SPACE_AFTER_TWIPS

    # ========== API ==========
    api_title: str = "DocMorph Formatting API"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: List[str] = ["*"]
    rate_limit_enabled: bool = True
    rate_limit: str = "60/minute"
    export_rate_limit: str = "30/minute"

    # ========== Directories ==========
    data_dir: Path = BASE_DIR / "data"
    output_dir: Path = BASE_DIR / OUTPUT_DIR
    logs_dir: Path = BASE_DIR / "logs"

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        env_prefix = "DOCMORPH_"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Create directories
        for dir_path in [
            self.data_dir,
            self.output_dir,
            self.logs_dir,
        ]:
            dir_path.mkdir(exist_ok=True, parents=True)


# Global settings instance
settings = Settings()
