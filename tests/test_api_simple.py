"""
Simple tests for FastAPI server endpoints.
"""

from fastapi.testclient import TestClient

from accessortracker.api_server import app


class TestFastAPISimple:
    """Simple FastAPI server tests."""

    def setup_method(self):
        """Set up test client."""
        self.client = TestClient(app)

    def test_health_check(self):
        response = self.client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert "message" in data

    def test_classify(self):
        source = (
            "class T {\n"
            "  private int a;\n"
            "  T() {}\n"
            "  int getA() { return a; }\n"
            "  void setA(int a) { this.a = a; }\n"
            "  int twice() { return a * 2; }\n"
            "}\n"
            "interface I { boolean isB(); }\n"
        )
        response = self.client.post("/classify", json={"source": source, "filename": "T.java"})
        assert response.status_code == 200

        data = response.json()
        assert data["accessor_count"] == 2
        t, i = data["classes"]
        assert t["name"] == "T"
        assert t["method_count"] == 4
        assert t["accessors"] == [
            {"method": "getA", "kind": "getter", "line": 4},
            {"method": "setA", "kind": "setter", "line": 5},
        ]
        assert i == {"name": "I", "kind": "interface", "method_count": 1, "accessors": []}

    def test_classify_syntax_error(self):
        response = self.client.post("/classify", json={"source": "class T { int x = ; }"})
        assert response.status_code == 400
        assert "syntax error" in response.json()["detail"]

    def test_classify_validation(self):
        response = self.client.post("/classify", json={"source": ""})
        assert response.status_code == 422

        response = self.client.post("/classify", json={"filename": "T.java"})
        assert response.status_code == 422

    def test_classify_deeply_nested_source(self):
        source = "class D { int f() { return " + "(" * 3000 + "1" + ")" * 3000 + "; } }"
        response = self.client.post("/classify", json={"source": source})
        assert response.status_code == 400
        assert "too deeply nested" in response.json()["detail"]
