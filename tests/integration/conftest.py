import pytest


@pytest.fixture
def parcel_payload(customer_id):
    return {
        "customer_id": str(customer_id),
        "pickup_lat": "12.34560000",
        "pickup_lng": "56.7891000",
        "dropoff_lat": "12.40000000",
        "dropoff_lng": "56.80000000",
        "weight_kg": "5.00",
        "volume_m3": "0.20",
        "max_budget": "100.00",
        "deadline": "2025-06-01T12:00:00Z",
        "description": "Two boxes of books",
        "pickup_contact_name": "Ada Sender",
        "pickup_contact_phone": "+10000000001",
    }


@pytest.fixture
def created_parcel_request(client, parcel_payload):
    response = client.post("/api/v1/parcel-requests", json=parcel_payload)
    assert response.status_code == 201
    return response.json()
