from conftest import register


def _add(client, **fields):
    response = client.post("/v1/budget", json=fields)
    assert response.status_code == 200, response.text
    return response.json()


def test_budget_summary_and_categories(client) -> None:
    register(client)
    _add(client, amount="1000.50", category="Salary", type="income", date="2024-03-01")
    _add(client, amount="200.25", category="Rent", type="expense", date="2024-03-02")
    _add(client, amount="30", category="Food", type="expense", date="2024-02-10")

    summary = client.get("/v1/budget/summary").json()
    assert summary == {"income": 1000.5, "expenses": 230.25, "balance": 770.25}

    march = client.get("/v1/budget/summary", params={"month": "2024-03"}).json()
    assert march["balance"] == 800.25

    categories = {row["category"]: row["amount"] for row in client.get("/v1/budget/categories").json()["items"]}
    assert categories == {"Salary": 1000.5, "Rent": 200.25, "Food": 30}


def test_budget_rejects_bad_amounts_and_month(client) -> None:
    register(client)
    assert client.post(
        "/v1/budget", json={"amount": "0", "category": "x", "type": "expense", "date": "2024-01-01"}
    ).status_code == 422
    assert client.post(
        "/v1/budget", json={"amount": "5", "category": "x", "type": "refund", "date": "2024-01-01"}
    ).status_code == 422
    assert client.get("/v1/budget/summary", params={"month": "March"}).status_code == 422


def test_budget_patch_and_delete(client) -> None:
    register(client)
    entry = _add(client, amount="12.40", category="Coffee", type="expense", date="2024-01-01")
    assert entry["amount"] == 12.4

    patched = client.patch(f"/v1/budget/{entry['id']}", json={"amount": "15.00"}).json()
    assert patched["amount"] == 15.0
    assert patched["category"] == "Coffee"

    assert client.delete(f"/v1/budget/{entry['id']}").status_code == 200
    assert client.get("/v1/budget/summary").json()["balance"] == 0
    assert client.delete(f"/v1/budget/{entry['id']}").status_code == 404
