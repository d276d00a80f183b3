"""Tests for the JSON icon API: GET /api/icons and GET /api/download/{filename}."""


class TestIconListing:
    """Tests for the GET /api/icons listing endpoint."""

    def test_list_returns_200(self, client):
        response = client.get("/api/icons")
        assert response.status_code == 200

    def test_list_contains_every_svg(self, client):
        data = client.get("/api/icons").json()
        assert sorted(item["filename"] for item in data) == [
            "arrow-filled.svg",
            "arrow-stroke.svg",
            "calendar.svg",
            "home-duo_solid.svg",
        ]

    def test_record_fields_use_wire_names(self, client):
        data = client.get("/api/icons").json()
        record = next(item for item in data if item["filename"] == "calendar.svg")
        assert set(record) == {
            "filename",
            "name",
            "size",
            "dimensions",
            "lastModified",
            "url",
            "downloadUrl",
        }
        assert record["name"] == "calendar"
        assert record["dimensions"] == "32×32"
        assert record["url"] == "/icons/calendar.svg"
        assert record["downloadUrl"] == "/api/download/calendar.svg"

    def test_missing_directory_returns_500(self, missing_dir_client):
        response = missing_dir_client.get("/api/icons")
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to read icons directory"}


class TestIconDownload:
    """Tests for the GET /api/download/{filename} endpoint."""

    def test_download_returns_raw_content(self, client, icons_dir):
        response = client.get("/api/download/arrow-filled.svg")
        assert response.status_code == 200
        assert response.content == (icons_dir / "arrow-filled.svg").read_bytes()

    def test_download_headers(self, client):
        response = client.get("/api/download/arrow-filled.svg")
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert response.headers["content-disposition"] == 'attachment; filename="arrow-filled.svg"'

    def test_wrong_extension_returns_400(self, client):
        response = client.get("/api/download/photo.png")
        assert response.status_code == 400
        assert response.json() == {"error": "Only SVG files are allowed"}

    def test_missing_icon_returns_404(self, client):
        response = client.get("/api/download/ghost.svg")
        assert response.status_code == 404
        assert response.json() == {"error": "Icon not found"}

    def test_directory_named_like_icon_returns_404(self, client):
        response = client.get("/api/download/nested.svg")
        assert response.status_code == 404


class TestStaticPassthrough:
    """Tests for GET /icons/* served straight from the icons directory."""

    def test_icon_file_is_served(self, client, icons_dir):
        response = client.get("/icons/calendar.svg")
        assert response.status_code == 200
        assert response.content == (icons_dir / "calendar.svg").read_bytes()

    def test_unknown_file_is_404(self, client):
        assert client.get("/icons/ghost.svg").status_code == 404

    def test_missing_directory_is_404(self, missing_dir_client):
        assert missing_dir_client.get("/icons/a.svg").status_code == 404

    def test_public_root_is_served(self, client):
        response = client.get("/static/app.js")
        assert response.status_code == 200
        assert "refreshResults" in response.text
