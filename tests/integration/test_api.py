"""
Integration tests for API endpoints (api/main.py)
"""
import io
import json

import pytest
from docx import Document


@pytest.fixture
def document_payload():
    return {
        "title": "Quarterly Report",
        "templateId": "tpl-corp",
        "sections": [
            {"id": "s1", "type": "h1", "content": "Summary"},
            {"id": "s2", "type": "paragraph", "content": "Revenue grew this quarter."},
            {"id": "s3", "type": "h2", "content": "Outlook"},
        ],
    }


class TestAPIBasics:

    def test_health_check(self, api_client):
        response = api_client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestTemplatesEndpoints:
    """Test /api/formatting/templates endpoints."""

    def test_list_templates(self, api_client):
        response = api_client.get("/api/formatting/templates")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 6
        assert data["default"] == "tpl-ieee"
        assert data["templates"][0]["id"] == "tpl-ieee"
        assert data["templates"][0]["isSystem"] is True

    def test_get_template(self, api_client):
        response = api_client.get("/api/formatting/templates/tpl-legal")
        assert response.status_code == 200
        assert response.json()["layout"]["pageSize"] == "Letter"

    def test_get_unknown_template(self, api_client):
        response = api_client.get("/api/formatting/templates/tpl-missing")
        assert response.status_code == 404

    def test_create_and_delete_template(self, api_client, template_payload):
        response = api_client.post("/api/formatting/templates", json=template_payload)
        assert response.status_code == 201
        created = response.json()
        assert created["id"].startswith("tpl-custom-")
        assert created["isSystem"] is False

        listing = api_client.get("/api/formatting/templates").json()
        assert listing["templates"][-1]["id"] == created["id"]

        response = api_client.delete(f"/api/formatting/templates/{created['id']}")
        assert response.status_code == 200
        assert api_client.get(f"/api/formatting/templates/{created['id']}").status_code == 404

    def test_create_invalid_template(self, api_client, template_payload):
        template_payload["styles"]["body"]["color"] = "blue"
        response = api_client.post("/api/formatting/templates", json=template_payload)
        assert response.status_code == 422
        assert "styles.body" in response.json()["detail"]

    def test_create_template_with_non_finite_number(self, api_client, template_payload):
        template_payload["styles"]["body"]["size"] = float("nan")
        response = api_client.post(
            "/api/formatting/templates",
            content=json.dumps(template_payload),
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422

        listing = api_client.get("/api/formatting/templates")
        assert listing.status_code == 200
        assert listing.json()["total"] == 6

    def test_delete_system_template_forbidden(self, api_client):
        response = api_client.delete("/api/formatting/templates/tpl-ieee")
        assert response.status_code == 403

    def test_delete_unknown_template(self, api_client):
        response = api_client.delete("/api/formatting/templates/tpl-custom-missing")
        assert response.status_code == 404


class TestPreviewEndpoint:
    """Test /api/formatting/preview."""

    def test_preview(self, api_client, document_payload):
        response = api_client.post(
            "/api/formatting/preview", json={"document": document_payload, "zoom": 0.8}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["template_id"] == "tpl-corp"
        assert data["zoom"] == 0.8
        assert data["block_count"] == 3
        assert data["word_count"] == 6
        assert "[LOGO] Quarterly Report - Draft" in data["html"]
        assert data["tree"]["role"] == "page"

    def test_preview_clamps_zoom(self, api_client, document_payload):
        response = api_client.post(
            "/api/formatting/preview", json={"document": document_payload, "zoom": 5}
        )
        assert response.json()["zoom"] == 1.5

    def test_preview_zoom_not_shared_between_requests(self, api_client, document_payload):
        api_client.post("/api/formatting/preview", json={"document": document_payload, "zoom": 1.2})
        response = api_client.post("/api/formatting/preview", json={"document": document_payload})
        assert response.json()["zoom"] == 0.55

    def test_preview_unknown_template_falls_back(self, api_client, document_payload):
        document_payload["templateId"] = "tpl-custom-deleted"
        response = api_client.post("/api/formatting/preview", json={"document": document_payload})
        assert response.status_code == 200
        assert response.json()["template_id"] == "tpl-ieee"

    def test_preview_empty_document(self, api_client):
        response = api_client.post(
            "/api/formatting/preview", json={"document": {"title": "Blank", "sections": []}}
        )
        data = response.json()
        assert data["block_count"] == 0
        assert "Start typing or upload a document" in data["html"]

    def test_preview_invalid_section_type(self, api_client, document_payload):
        document_payload["sections"][0]["type"] = "quote"
        response = api_client.post("/api/formatting/preview", json={"document": document_payload})
        assert response.status_code == 422


class TestExportEndpoint:
    """Test /api/formatting/export/{format}."""

    def test_export_markdown(self, api_client, document_payload):
        response = api_client.post("/api/formatting/export/md", json=document_payload)
        assert response.status_code == 200
        assert response.text == "# Summary\n\nRevenue grew this quarter.\n\n## Outlook"
        assert 'filename="Quarterly_Report.md"' in response.headers["content-disposition"]

    def test_export_text(self, api_client, document_payload):
        response = api_client.post("/api/formatting/export/txt", json=document_payload)
        assert response.status_code == 200
        assert response.content == b"Summary\n\nRevenue grew this quarter.\n\nOutlook"

    def test_export_docx(self, api_client, document_payload):
        response = api_client.post("/api/formatting/export/docx", json=document_payload)
        assert response.status_code == 200
        assert "Quarterly_Report_formatted.docx" in response.headers["content-disposition"]

        doc = Document(io.BytesIO(response.content))
        texts = [p.text for p in doc.paragraphs]
        assert texts[-3:] == ["Summary", "Revenue grew this quarter.", "Outlook"]

    @pytest.mark.parametrize("metadata", [
        {"headers": 5},
        {"rows": "abc"},
        {"headers": ["A"], "colour": "red"},
    ])
    def test_export_malformed_table_metadata(self, api_client, document_payload, metadata):
        document_payload["sections"].append(
            {"id": "t1", "type": "table", "content": "", "metadata": metadata}
        )
        response = api_client.post("/api/formatting/export/txt", json=document_payload)
        assert response.status_code == 422
        assert response.json()["detail"].startswith("metadata:")

    def test_export_unknown_format(self, api_client, document_payload):
        response = api_client.post("/api/formatting/export/pdf", json=document_payload)
        assert response.status_code == 422

    def test_export_failure(self, api_client, document_payload, monkeypatch):
        from docmorph.formatting.exporters import MarkdownStyleExporter

        def explode(self, document, template=None):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(MarkdownStyleExporter, "encode", explode)
        response = api_client.post("/api/formatting/export/md", json=document_payload)
        assert response.status_code == 500
        assert response.json()["detail"] == "Export failed"
