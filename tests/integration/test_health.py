from datetime import datetime
from fastapi.testclient import TestClient


class TestHealth:
    def test_health_reports_storage_mode(self, test_client: TestClient) -> None:
        response = test_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["storage"] == "in-memory"
        datetime.fromisoformat(data["timestamp"])
