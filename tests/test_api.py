from fastapi.testclient import TestClient

import api
from config import get_settings
from web.app import app as web_app


def test_analyze_endpoint(sample_tree):
	client = TestClient(api.app)
	resp = client.post("/analyze", json={"root_path": str(sample_tree)})
	assert resp.status_code == 200
	body = resp.json()
	assert body["inbound"][0] == {"module": "a", "count": 2, "dependents": ["b.rs", "c.rs"]}
	assert [(i["item"], i["count"]) for i in body["items"]] == [("Foo", 2), ("Bar", 1)]


def test_analyze_endpoint_rejects_missing_directory(tmp_path):
	client = TestClient(api.app)
	resp = client.post("/analyze", json={"root_path": str(tmp_path / "nope")})
	assert resp.status_code == 400


def test_analyze_endpoint_reports_unreadable_file(sample_tree):
	(sample_tree / "broken.rs").write_bytes(b"\xff\xfe")
	client = TestClient(api.app)
	resp = client.post("/analyze", json={"root_path": str(sample_tree)})
	assert resp.status_code == 500
	assert "broken.rs" in resp.json()["detail"]


def test_html_report(sample_tree):
	client = TestClient(web_app)
	resp = client.get("/", params={"root_path": str(sample_tree)})
	assert resp.status_code == 200
	assert resp.headers["content-type"].startswith("text/html")
	assert "Foo" in resp.text
	assert "b.rs, c.rs" in resp.text


def test_html_report_uses_configured_root(sample_tree, monkeypatch):
	monkeypatch.setenv("USEGRAPH_ROOT", str(sample_tree))
	get_settings.cache_clear()
	try:
		resp = TestClient(web_app).get("/report.json")
	finally:
		get_settings.cache_clear()
	assert resp.status_code == 200
	assert resp.json()["inbound"][0]["module"] == "a"


def test_html_report_without_root(monkeypatch):
	monkeypatch.delenv("USEGRAPH_ROOT", raising=False)
	get_settings.cache_clear()
	try:
		resp = TestClient(web_app).get("/")
	finally:
		get_settings.cache_clear()
	assert resp.status_code == 400
