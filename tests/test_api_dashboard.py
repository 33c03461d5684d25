from decimal import Decimal

AS_OF = "2026-10-18T12:00:00Z"


def post_txn(client, headers, customer_id, amount, event_date):
    resp = client.post(
        f"/customers/{customer_id}/transactions",
        json={"amount": amount, "event_date": event_date},
        headers=headers,
    )
    assert resp.status_code == 201, resp.text


def test_empty_ledger(client, headers):
    body = client.get("/dashboard/metrics", params={"as_of": AS_OF}, headers=headers).json()

    assert body["total_customers"] == 0
    assert body["active_customers"] == 0
    for field in ("last_week_amount", "last_month_amount", "credit_amount", "debit_amount"):
        assert Decimal(body[field]) == 0
    assert body["credit_amount_display"] == "₹0"


def test_metrics_use_event_date_windows(client, headers, make_customer):
    recent = make_customer(first_name="Recent")
    dormant = make_customer(first_name="Dormant")
    make_customer(first_name="Silent")

    post_txn(client, headers, recent["id"], 1500, "2026-10-13T12:00:00Z")
    post_txn(client, headers, recent["id"], -400, "2026-10-11T12:00:00Z")
    post_txn(client, headers, recent["id"], 2000, "2026-09-25T09:00:00Z")
    post_txn(client, headers, dormant["id"], -700, "2026-09-08T12:00:00Z")

    body = client.get("/dashboard/metrics", params={"as_of": AS_OF}, headers=headers).json()

    assert body["total_customers"] == 3
    assert body["active_customers"] == 1
    assert Decimal(body["last_week_amount"]) == Decimal("1100")
    assert Decimal(body["last_month_amount"]) == Decimal("3100")
    assert Decimal(body["credit_amount"]) == Decimal("3500")
    assert Decimal(body["debit_amount"]) == Decimal("1100")
    assert body["last_week_amount_display"] == "+₹1,100"
    assert body["debit_amount_display"] == "₹1,100"


def test_metrics_only_count_the_callers_ledger(client, headers, other_headers, make_customer):
    mine = make_customer()
    theirs = make_customer(as_headers=other_headers)
    post_txn(client, headers, mine["id"], 100, "2026-10-17T12:00:00Z")
    post_txn(client, other_headers, theirs["id"], 9000, "2026-10-17T12:00:00Z")

    body = client.get("/dashboard/metrics", params={"as_of": AS_OF}, headers=headers).json()

    assert body["total_customers"] == 1
    assert Decimal(body["credit_amount"]) == Decimal("100")


def test_metrics_default_to_now(client, headers, make_customer):
    customer = make_customer()
    post_txn(client, headers, customer["id"], 100, "2000-01-01T00:00:00Z")

    body = client.get("/dashboard/metrics", headers=headers).json()

    assert body["active_customers"] == 0
    assert Decimal(body["last_month_amount"]) == 0
    assert Decimal(body["credit_amount"]) == Decimal("100")
