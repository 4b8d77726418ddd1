import sys
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
TESTS_DIR = Path(__file__).resolve().parent
for path in (PROJECT_ROOT, TESTS_DIR):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from fastapi.testclient import TestClient

from gateway_fakes import FakeGateway
from wem.ai.types import ResponseFormat
from wem.core.errors import InferenceError, MalformedResponse
from wem.core.rate_limit import limiter
from wem.main import create_app
from wem.services.risk_service import clamp_score, normalize_tier

PROFILE = {
    "jobTitle": "Accountant",
    "ageRange": "30-39",
    "industry": "Finance",
    "companySize": "51-200 employees",
    "region": "North America",
}

MODEL_REPLY = {
    "riskScore": 72,
    "riskTier": "High",
    "summary": "Routine reconciliation work is increasingly automated.",
    "whatTheDataSays": ["Bookkeeping tasks are highly automatable"],
    "keyPotentialDisruptors": ["AI reconciliation tools"],
    "researchReferences": ["Industry trend reports"],
}


class RiskApiTests(unittest.TestCase):
    def setUp(self):
        limiter.reset()

    def _client(self, gateway, raise_server_exceptions=True):
        return TestClient(create_app(gateway=gateway), raise_server_exceptions=raise_server_exceptions)

    def test_scores_a_complete_profile(self):
        gateway = FakeGateway(result=dict(MODEL_REPLY))
        response = self._client(gateway).post("/api/analyze-risk", json=PROFILE)

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["riskScore"], 72)
        self.assertEqual(body["riskTier"], "High")
        self.assertEqual(body["summary"], MODEL_REPLY["summary"])
        self.assertEqual(body["whatTheDataSays"], ["Bookkeeping tasks are highly automatable"])
        self.assertEqual(len(gateway.calls), 1)

        messages, response_format = gateway.calls[0]
        self.assertEqual(response_format, ResponseFormat.JSON_OBJECT)
        self.assertIn("Accountant", messages[-1].content)

    def test_model_failure_returns_moderate_fallback(self):
        gateway = FakeGateway(error=InferenceError("upstream unavailable"))
        response = self._client(gateway).post("/api/analyze-risk", json=PROFILE)

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["riskScore"], 50)
        self.assertEqual(body["riskTier"], "Moderate")
        for value in PROFILE.values():
            self.assertIn(value, body["summary"])
        self.assertEqual(len(body["keyPotentialDisruptors"]), 3)

    def test_unparseable_reply_returns_fallback(self):
        gateway = FakeGateway(result={"riskScore": "very risky", "summary": "x"})
        response = self._client(gateway).post("/api/analyze-risk", json=PROFILE)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["riskScore"], 50)

    def test_out_of_range_scores_are_clamped(self):
        for raw, expected in ((-5, 0), (150, 100)):
            limiter.reset()
            gateway = FakeGateway(result=dict(MODEL_REPLY, riskScore=raw))
            response = self._client(gateway).post("/api/analyze-risk", json=PROFILE)
            self.assertEqual(response.status_code, 200)
            self.assertEqual(response.json()["riskScore"], expected)

    def test_legacy_tier_is_mapped(self):
        gateway = FakeGateway(result=dict(MODEL_REPLY, riskScore=88, riskTier="Very High"))
        response = self._client(gateway).post("/api/analyze-risk", json=PROFILE)
        self.assertEqual(response.json()["riskTier"], "Critical")

    def test_missing_fields_rejected_without_model_call(self):
        gateway = FakeGateway(result=dict(MODEL_REPLY))
        client = self._client(gateway)

        for field in PROFILE:
            payload = dict(PROFILE)
            payload[field] = "   "
            response = client.post("/api/analyze-risk", json=payload)
            self.assertEqual(response.status_code, 400)
            self.assertIn("Missing required fields", response.json()["error"])

        response = client.post("/api/analyze-risk", json={"jobTitle": "Accountant"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(gateway.total_calls, 0)

    def test_rejection_logs_missing_field_details(self):
        client = self._client(FakeGateway(result=dict(MODEL_REPLY)))
        with self.assertLogs("wem.main", level="INFO") as logs:
            response = client.post("/api/analyze-risk", json=dict(PROFILE, region=""))

        self.assertEqual(response.status_code, 400)
        self.assertEqual(set(response.json()), {"error"})
        self.assertTrue(any("details={'fields': ['region']}" in line for line in logs.output))

    def test_malformed_body_is_400(self):
        gateway = FakeGateway(result=dict(MODEL_REPLY))
        response = self._client(gateway).post(
            "/api/analyze-risk",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Invalid request body"})
        self.assertEqual(gateway.total_calls, 0)

    def test_other_methods_are_405(self):
        client = self._client(FakeGateway())
        for method in ("get", "put", "delete"):
            response = getattr(client, method)("/api/analyze-risk")
            self.assertEqual(response.status_code, 405)
            self.assertEqual(response.json(), {"error": "Method Not Allowed"})

    def test_any_gateway_exception_returns_fallback(self):
        gateway = FakeGateway(error=RuntimeError("boom"))
        response = self._client(gateway, raise_server_exceptions=False).post("/api/analyze-risk", json=PROFILE)

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["riskScore"], 50)
        self.assertEqual(body["riskTier"], "Moderate")
        self.assertIn("Accountant", body["summary"])

    def test_failure_outside_gateway_is_500(self):
        gateway = FakeGateway(result=dict(MODEL_REPLY))
        client = self._client(gateway, raise_server_exceptions=False)
        with patch("wem.services.risk_service.build_risk_prompt", side_effect=RuntimeError("template broke")):
            response = client.post("/api/analyze-risk", json=PROFILE)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Internal Server Error"})
        self.assertEqual(gateway.total_calls, 0)


class ScoreNormalizationTests(unittest.TestCase):
    def test_clamp_accepts_numeric_strings(self):
        self.assertEqual(clamp_score("64"), 64)
        self.assertEqual(clamp_score("81.6%"), 82)
        self.assertEqual(clamp_score(12.4), 12)

    def test_clamp_rejects_non_numbers(self):
        for raw in (None, True, "n/a", float("nan"), [72]):
            with self.assertRaises(MalformedResponse):
                clamp_score(raw)

    def test_tier_derived_only_when_missing(self):
        self.assertEqual(normalize_tier(None, 10), "Low")
        self.assertEqual(normalize_tier("", 80), "Critical")
        self.assertEqual(normalize_tier("Moderate", 90), "Moderate")


if __name__ == "__main__":
    unittest.main()
