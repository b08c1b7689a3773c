def test_metrics_endpoint_returns_typed_payload(client):
    response = client.get("/metrics")

    assert response.status_code == 200
    payload = response.json()
    assert isinstance(payload["counters"], dict)
    assert isinstance(payload["timings"], dict)


def test_metrics_endpoint_counts_requests(client):
    client.get("/health")

    payload = client.get("/metrics").json()

    assert payload["counters"]["http_requests_total"] >= 1
    assert payload["timings"]["http_request_duration_seconds"]["count"] >= 1


def test_metrics_endpoint_exposes_explicit_response_schema(client):
    openapi = client.get("/openapi.json")
    assert openapi.status_code == 200

    metrics_get = openapi.json()["paths"]["/metrics"]["get"]

    assert metrics_get["responses"]["200"]["content"]["application/json"]["schema"]["$ref"] == (
        "#/components/schemas/MetricsResponse"
    )


def test_metrics_endpoint_reports_zero_activity_on_fresh_store(client):
    activity = client.get("/metrics").json()["parcel_requests"]

    assert set(activity.values()) == {0}
