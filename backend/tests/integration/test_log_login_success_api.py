"""
Successful Login Log API integration tests
"""

import json

import pytest
from httpx import ASGITransport, AsyncClient

from restapi.api.deps import get_db
from restapi.main import app


@pytest.mark.asyncio
async def test_login_log_endpoints(db_session, users, login_logs):
    app.dependency_overrides[get_db] = lambda: db_session
    
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get(
            "/log_login_success",
            params={"where": json.dumps({"user": users["john"].id}), "order": "ip"},
        )
        assert resp.status_code == 200, resp.text
        assert [log["ip"] for log in resp.json()] == ["10.0.0.1", "10.0.0.2"]
        
        resp = await ac.get("/log_login_success/count", params={"search": "safari"})
        assert resp.json() == {"count": 1}
        
        resp = await ac.get(f"/log_login_success/{login_logs[0].id}")
        assert resp.status_code == 200
        assert resp.json()["client_name"] == "Firefox"
        assert resp.json()["login_time"].endswith(("Z", "+00:00"))
        
        resp = await ac.get("/log_login_success/missing")
        assert resp.status_code == 404
        
        # Read-only resource
        resp = await ac.post("/log_login_success", json={})
        assert resp.status_code == 405
    
    app.dependency_overrides = {}
