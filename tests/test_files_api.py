"""
Tests for report uploads, SOS events and the hospital search link.
"""
import os
import sqlite3
from urllib.parse import unquote

import pytest


def upload_report(client, headers, name="Blood test", content=b"%PDF-1.4 test report"):
    return client.post(
        "/api/reports",
        files={"report": ("blood test.pdf", content, "application/pdf")},
        data={"name": name, "type": "pdf"},
        headers=headers,
    )


class TestReportRoutes:

    def test_upload_list_download(self, client, auth_headers, settings):
        response = upload_report(client, auth_headers)
        assert response.status_code == 200, response.text
        report_id = response.json()["id"]

        reports = client.get("/api/reports", headers=auth_headers).json()
        assert [r["name"] for r in reports] == ["Blood test"]
        assert reports[0]["type"] == "pdf"

        stored = os.listdir(settings.upload_dir)
        assert len(stored) == 1
        assert stored[0].endswith("-blood_test.pdf")

        download = client.get(f"/api/reports/{report_id}/download", headers=auth_headers)
        assert download.status_code == 200
        assert download.content == b"%PDF-1.4 test report"
        assert unquote(download.headers["content-disposition"]).endswith("Blood test.pdf")

    def test_upload_without_file(self, client, auth_headers):
        response = client.post(
            "/api/reports", data={"name": "Empty", "type": "pdf"}, headers=auth_headers
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "No file uploaded"

    def test_upload_rejects_unknown_type(self, client, auth_headers):
        response = client.post(
            "/api/reports",
            files={"report": ("notes.txt", b"hello", "text/plain")},
            data={"name": "Notes", "type": "text"},
            headers=auth_headers,
        )
        assert response.status_code == 422

    def test_upload_too_large(self, client, auth_headers, settings):
        response = upload_report(client, auth_headers, content=b"x" * (1024 * 1024 + 1))
        assert response.status_code == 413
        assert os.listdir(settings.upload_dir) == []

    def test_failed_insert_leaves_no_file(self, client, auth_headers, settings):
        conn = sqlite3.connect(settings.db_path)
        try:
            conn.execute("DROP TABLE reports")
            conn.commit()
        finally:
            conn.close()

        with pytest.raises(sqlite3.OperationalError):
            upload_report(client, auth_headers)
        assert os.listdir(settings.upload_dir) == []

    def test_delete_removes_file(self, client, auth_headers, settings):
        report_id = upload_report(client, auth_headers).json()["id"]

        response = client.delete(f"/api/reports/{report_id}", headers=auth_headers)
        assert response.status_code == 200
        assert os.listdir(settings.upload_dir) == []
        assert client.get("/api/reports", headers=auth_headers).json() == []

    def test_other_users_cannot_reach_report(self, client, auth_headers, other_auth_headers):
        report_id = upload_report(client, auth_headers).json()["id"]

        assert client.get(f"/api/reports/{report_id}/download", headers=other_auth_headers).status_code == 404
        assert client.delete(f"/api/reports/{report_id}", headers=other_auth_headers).status_code == 404

    def test_download_missing_file(self, client, auth_headers, settings):
        report_id = upload_report(client, auth_headers).json()["id"]
        for name in os.listdir(settings.upload_dir):
            os.remove(os.path.join(settings.upload_dir, name))

        response = client.get(f"/api/reports/{report_id}/download", headers=auth_headers)
        assert response.status_code == 404


class TestSosRoutes:

    def test_sos_without_audio(self, client, auth_headers):
        response = client.post(
            "/api/sos", data={"latitude": "12.97", "longitude": "77.59"}, headers=auth_headers
        )
        assert response.status_code == 200, response.text
        body = response.json()
        assert body["audio_attached"] is False
        assert body["maps_url"] == "https://www.google.com/maps?q=12.97,77.59"

    def test_sos_with_audio(self, client, auth_headers, settings):
        response = client.post(
            "/api/sos",
            data={"latitude": "12.97", "longitude": "77.59"},
            files={"audio": ("clip.webm", b"\x1aE\xdf\xa3audio", "audio/webm")},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["audio_attached"] is True
        assert len(os.listdir(settings.upload_dir)) == 1

        events = client.get("/api/sos", headers=auth_headers).json()
        assert len(events) == 1
        assert events[0]["audio_attached"] is True
        assert events[0]["latitude"] == 12.97

    def test_sos_rejects_bad_coordinates(self, client, auth_headers):
        response = client.post(
            "/api/sos", data={"latitude": "123", "longitude": "77.59"}, headers=auth_headers
        )
        assert response.status_code == 422

    def test_sos_requires_auth(self, client):
        response = client.post("/api/sos", data={"latitude": "1", "longitude": "1"})
        assert response.status_code == 401


class TestHospitalSearch:

    def test_nearby_link(self, client, auth_headers):
        response = client.get(
            "/api/hospitals/nearby?latitude=28.61&longitude=77.2", headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json()["maps_url"] == (
            "https://www.google.com/maps/search/hospitals/@28.61,77.2,15z"
        )

    def test_requires_auth(self, client):
        response = client.get("/api/hospitals/nearby?latitude=28.61&longitude=77.2")
        assert response.status_code == 401
