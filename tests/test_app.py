"""
Tests for the Flask upload surface.
"""
import io

import pytest

import csv_insights.app as app_module
from csv_insights.app import create_app
from csv_insights.pipeline import AnalysisConfig


@pytest.fixture
def client():
    app = create_app(AnalysisConfig(max_upload_mb=1))
    app.config["TESTING"] = True
    return app.test_client()


def upload(client, payload, filename="data.csv", query=""):
    return client.post(
        f"/analyze{query}",
        data={"csvFile": (io.BytesIO(payload), filename)},
        content_type="multipart/form-data",
    )


class TestAnalyzeEndpoint:

    def test_success(self, client, expenses_csv):
        resp = upload(client, expenses_csv.encode("utf-8"))

        assert resp.status_code == 200
        body = resp.get_json()
        assert body["dataset_summary"]["total_rows"] == 4
        assert body["financial_insights"]["category_wise_totals"] == {"food": 390, "travel": 5000}

    def test_no_file(self, client):
        resp = client.post("/analyze")

        assert resp.status_code == 400
        assert resp.get_json() == {"error": "No CSV file uploaded"}

    def test_header_only_is_client_error(self, client):
        resp = upload(client, b"amount,category\n")

        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Failed to analyze CSV"

    def test_binary_payload_rejected(self, client):
        resp = upload(client, b"\x89PNG\r\n\x1a\n\x00\x00\x00", filename="img.png")

        assert resp.status_code == 400

    def test_too_large(self, client):
        resp = upload(client, b"a,b\n" + b"1,2\n" * (400 * 1024))

        assert resp.status_code == 413

    def test_unexpected_failure(self, client, monkeypatch, expenses_csv):
        def boom(text):
            raise RuntimeError("boom")

        monkeypatch.setattr(app_module, "run_analysis", boom)
        resp = upload(client, expenses_csv.encode("utf-8"))

        assert resp.status_code == 500
        assert resp.get_json() == {"error": "Failed to analyze CSV", "details": "boom"}

    def test_latin1_upload_decoded(self, client):
        resp = upload(client, "vendor,amount\ncafé,3\ncafé,4\n".encode("latin-1"))

        assert resp.status_code == 200

    def test_markdown_format(self, client, expenses_csv):
        resp = upload(client, expenses_csv.encode("utf-8"), query="?format=markdown")

        assert resp.status_code == 200
        assert resp.mimetype == "text/markdown"
        assert b"# CSV Analysis Report" in resp.data

    def test_html_format(self, client, expenses_csv):
        resp = upload(client, expenses_csv.encode("utf-8"), query="?format=html")

        assert resp.status_code == 200
        assert b"<html>" in resp.data

    def test_report_written_when_output_dir_set(self, tmp_path, expenses_csv):
        app = create_app(AnalysisConfig(max_upload_mb=1, output_dir=str(tmp_path)))
        resp = upload(app.test_client(), expenses_csv.encode("utf-8"))

        run_id = resp.headers["X-Report-Id"]
        assert (tmp_path / run_id / "report.json").exists()


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}
