import httpx
import pytest
import pytest_asyncio
import uvicorn
from fastapi import FastAPI

from travel_rec import main
from travel_rec.config import settings


@pytest.fixture
def build_dir(tmp_path):
    build = tmp_path / "client" / "build"
    (build / "static").mkdir(parents=True)
    (build / "index.html").write_text("<html>spa</html>")
    (build / "manifest.json").write_text('{"name": "travel"}')
    (build / "static" / "app.js").write_text("console.log('app')")
    (tmp_path / "secret.txt").write_text("TOPSECRET")
    return build


@pytest_asyncio.fixture
async def spa_client(build_dir, monkeypatch):
    monkeypatch.setattr(settings, "app_env", "production")
    spa_app = FastAPI()
    main.mount_client(spa_app, build_dir)
    transport = httpx.ASGITransport(app=spa_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def test_serves_files_from_build(spa_client):
    resp = await spa_client.get("/manifest.json")
    assert resp.status_code == 200
    assert resp.json() == {"name": "travel"}

    resp = await spa_client.get("/static/app.js")
    assert resp.text == "console.log('app')"


async def test_unknown_path_falls_back_to_index(spa_client):
    resp = await spa_client.get("/destinations/kyoto")
    assert resp.status_code == 200
    assert resp.text == "<html>spa</html>"


@pytest.mark.parametrize(
    "path",
    ["/..%2F..%2Fsecret.txt", "/..%2F..%2F..%2F..%2F..%2F..%2Fetc%2Fpasswd"],
)
async def test_encoded_parent_segments_stay_inside_build(spa_client, path):
    resp = await spa_client.get(path)
    assert resp.status_code == 200
    assert "TOPSECRET" not in resp.text
    assert resp.text == "<html>spa</html>"


def test_run_binds_configured_port(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    monkeypatch.setattr(settings, "port", 6123)

    main.run()

    assert calls == [(("travel_rec.main:app",), {"host": "0.0.0.0", "port": 6123})]
