"""
Centralized constants for DocMorph.
Values shared by the preview renderer, exporters and API.
"""

# ===========================================
# PREVIEW
# ===========================================
DEFAULT_ZOOM = 0.55                   # editor default zoom (55%)
MIN_ZOOM = 0.3
MAX_ZOOM = 1.5
DEFAULT_LINE_HEIGHT = 1.4             # preview line-height when a style has none
PREVIEW_COLUMN_GAP = "0.5in"
EMPTY_STATE_TEXT = "Start typing or upload a document"
HEADER_SUFFIX = " - Draft"
LOGO_PLACEHOLDER = "[LOGO]"
PAGE_INDICATOR_TEXT = "Page 1"

# ===========================================
# DOCX EXPORT
# ===========================================
COLUMN_GAP_TWIPS = 708                # ~0.5 inch between columns
PARAGRAPH_SPACE_AFTER_TWIPS = 200     # 10pt after each paragraph
TOC_LEVELS = 3

# ===========================================
# TEMPLATES
# ===========================================
DEFAULT_TEMPLATE_ID = "tpl-ieee"
CUSTOM_TEMPLATE_PREFIX = "tpl-custom-"
CUSTOM_TEMPLATES_FILE = "data/custom_templates.json"

# ===========================================
# FILE HANDLING
# ===========================================
OUTPUT_DIR = 'data/output'
FALLBACK_FILENAME = "document"

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = 'logs/docmorph.log'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
