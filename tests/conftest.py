"""
Pytest configuration and shared fixtures for DocMorph tests.
"""
import os
import sys
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Keep repeated API calls in one session under the limiter
os.environ.setdefault("DOCMORPH_RATE_LIMIT_ENABLED", "false")

from docmorph.formatting import (
    LayoutSpec,
    PreviewRenderer,
    RenderableDocument,
    Section,
    SectionType,
    StyleSpec,
    Template,
    TemplateElements,
    TemplateRegistry,
    TemplateStyles,
)
from docmorph.formatting.templates.system_templates import (
    CORPORATE_TEMPLATE,
    IEEE_TEMPLATE,
    LEGAL_TEMPLATE,
)


# ============================================================================
# Fixtures: Filesystem
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def templates_file(temp_dir: Path) -> Path:
    """Location for persisted user templates."""
    return temp_dir / "custom_templates.json"


# ============================================================================
# Fixtures: Sample Data
# ============================================================================

@pytest.fixture
def sample_sections():
    """A short document touching every section type."""
    return (
        Section(id="s1", type=SectionType.H1, content="Introduction"),
        Section(id="s2", type=SectionType.PARAGRAPH, content="Hello world."),
        Section(id="s3", type=SectionType.H2, content="Background"),
        Section(id="s4", type=SectionType.PARAGRAPH, content="Some more text here."),
        Section(id="s5", type=SectionType.H3, content="Details"),
        Section(id="s6", type=SectionType.LIST, content="first, second"),
        Section(id="s7", type=SectionType.TABLE, content="Results table"),
        Section(id="s8", type=SectionType.IMAGE, content="Figure 1"),
    )


@pytest.fixture
def sample_document(sample_sections):
    return RenderableDocument(title="Sample Report", sections=sample_sections)


@pytest.fixture
def title_document():
    """Heading followed by one paragraph."""
    return RenderableDocument(
        title="Title Doc",
        sections=(
            Section(id="a", type="h1", content="Title"),
            Section(id="b", type="paragraph", content="Hello world."),
        ),
    )


@pytest.fixture
def empty_document():
    return RenderableDocument(title="Empty", sections=())


@pytest.fixture
def ieee_template() -> Template:
    return IEEE_TEMPLATE


@pytest.fixture
def corporate_template() -> Template:
    return CORPORATE_TEMPLATE


@pytest.fixture
def legal_template() -> Template:
    return LEGAL_TEMPLATE


@pytest.fixture
def simple_styles() -> TemplateStyles:
    """Plain styles: uppercase h1, everything else Arial 11."""
    base = StyleSpec(family="Arial", size_pt=11)
    return TemplateStyles(
        h1=StyleSpec(family="Arial", size_pt=20, bold=True, uppercase=True, alignment="center"),
        h2=StyleSpec(family="Arial", size_pt=16, bold=True),
        h3=StyleSpec(family="Arial", size_pt=13, italic=True),
        body=StyleSpec(family="Georgia", size_pt=11, color_hex="#333333", line_spacing=1.5),
        caption=base,
        header=StyleSpec(family="Arial", size_pt=8, color_hex="#888888", alignment="right"),
        footer=StyleSpec(family="Arial", size_pt=8, color_hex="#888888", alignment="center"),
    )


@pytest.fixture
def simple_template(simple_styles) -> Template:
    """Single column A4 user template without TOC."""
    return Template(
        id="tpl-test",
        name="Test Template",
        description="Used by tests",
        layout=LayoutSpec(),
        styles=simple_styles,
        elements=TemplateElements(show_page_numbers=True, show_toc=False),
    )


@pytest.fixture
def template_payload(simple_template) -> dict:
    """JSON shape of a user template as sent by the web client."""
    data = simple_template.to_dict()
    data.pop("id")
    data.pop("isSystem")
    return data


# ============================================================================
# Fixtures: Components
# ============================================================================

@pytest.fixture
def registry(templates_file: Path) -> TemplateRegistry:
    return TemplateRegistry(storage_path=templates_file)


@pytest.fixture
def renderer() -> PreviewRenderer:
    return PreviewRenderer()


@pytest.fixture
def api_client(templates_file: Path):
    """FastAPI test client backed by a temporary template store."""
    from fastapi.testclient import TestClient
    from api.main import app
    from api.formatting_routes import get_template_registry, reset_template_registry

    reset_template_registry()
    registry = TemplateRegistry(storage_path=templates_file)
    app.dependency_overrides[get_template_registry] = lambda: registry

    yield TestClient(app)

    app.dependency_overrides.clear()
    reset_template_registry()


def pytest_configure(config):
    """Configure pytest session."""
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: tests through the HTTP API")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        # Auto-add 'unit' marker to test files in tests/unit/
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        # Auto-add 'integration' marker to test files in tests/integration/
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
