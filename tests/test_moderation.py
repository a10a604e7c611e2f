"""Return and review moderation"""

import asyncio

import pytest

from seller_portal.api.v1.returns.services import ReturnService, to_response
from seller_portal.api.v1.reviews.services import ReviewService, review_stats
from seller_portal.core.exceptions import ReplyAlreadyExistsException, ValidationException
from seller_portal.models import ReturnRequest, Review

@pytest.fixture
def returns(marketplace):
    marketplace.seed(
        "returns",
        {"id": "r-1", "order_id": "o-1", "order_item_id": "i-1", "reason": "Too small",
         "status": "pending", "created_at": "2026-10-08T10:00:00+00:00"},
        {"id": "r-2", "order_id": "o-1", "order_item_id": "i-2", "reason": "Damaged",
         "status": "pending", "created_at": "2026-10-09T10:00:00+00:00"},
        {"id": "r-3", "order_id": "o-2", "order_item_id": "i-3", "reason": "Changed mind",
         "status": "approved", "created_at": "2026-09-25T10:00:00+00:00"},
    )
    return marketplace

@pytest.fixture
def reviews(marketplace):
    marketplace.seed(
        "reviews",
        {"id": "v-1", "product_id": "p-a1", "rating": 5, "comment": "Lovely",
         "created_at": "2026-10-10T10:00:00+00:00"},
        {"id": "v-2", "product_id": "p-a2", "rating": 2, "comment": "Shrunk",
         "seller_reply": "Sorry, please contact us", "created_at": "2026-10-11T10:00:00+00:00"},
        {"id": "v-3", "product_id": "p-b1", "rating": 4, "created_at": "2026-10-12T10:00:00+00:00"},
    )
    return marketplace

# Returns

def test_list_returns_scoped_to_seller(returns, remote):
    items = asyncio.run(ReturnService(remote).list_returns("seller-a"))

    assert [r.id for r in items] == ["r-1", "r-3"]
    assert items[0].product_name == "Cotton Kurta"
    assert items[0].product_id == "p-a1"

def test_unknown_product_name():
    record = ReturnRequest(id="r-9", status="pending")
    assert to_response(record).product_name == "Unknown Product"

def test_approve_is_idempotent(returns, remote):
    service = ReturnService(remote)

    asyncio.run(service.approve_return("r-1"))
    asyncio.run(service.approve_return("r-1"))

    assert returns.row("returns", "r-1")["status"] == "approved"

@pytest.mark.parametrize("reason", [None, "", "   "])
def test_reject_requires_reason(returns, remote, reason):
    with pytest.raises(ValidationException) as exc_info:
        asyncio.run(ReturnService(remote).reject_return("r-1", reason))

    assert exc_info.value.error_code == "REJECTION_REASON_REQUIRED"
    assert returns.calls("returns", "PATCH") == []
    assert returns.row("returns", "r-1")["status"] == "pending"

def test_reject_stores_reason(returns, remote):
    stored = asyncio.run(ReturnService(remote).reject_return("r-1", "  Worn item "))

    assert stored == "Worn item"
    row = returns.row("returns", "r-1")
    assert row["status"] == "rejected"
    assert row["rejection_reason"] == "Worn item"

def test_returns_endpoints(client, returns, auth_headers):
    listed = client.get("/api/v1/returns/", headers=auth_headers).json()
    assert listed["total"] == 2
    assert listed["pending"] == 1

    rejected = client.post("/api/v1/returns/r-1/reject", json={}, headers=auth_headers)
    assert rejected.status_code == 422

    approved = client.post("/api/v1/returns/r-1/approve", headers=auth_headers)
    assert approved.json() == {"id": "r-1", "status": "approved", "rejection_reason": None}

# Reviews

def test_list_reviews_scoped_to_seller(reviews, remote):
    items = asyncio.run(ReviewService(remote).list_reviews("seller-a"))

    assert [r.id for r in items] == ["v-2", "v-1"]
    assert items[0].products.name == "Linen Shirt"

def test_review_stats():
    stats = review_stats([
        Review(id="1", product_id="p", rating=5),
        Review(id="2", product_id="p", rating=4, seller_reply="Thanks"),
        Review(id="3", product_id="p", rating=2),
    ])

    assert stats.total == 3
    assert stats.average_rating == 3.7
    assert stats.positive == 2
    assert stats.awaiting_reply == 2

def test_review_stats_empty():
    assert review_stats([]).average_rating == 0.0

def test_reply_once(reviews, remote):
    service = ReviewService(remote)

    assert asyncio.run(service.reply_to_review("v-1", " Thank you! ")) == "Thank you!"
    assert reviews.row("reviews", "v-1")["seller_reply"] == "Thank you!"

    with pytest.raises(ReplyAlreadyExistsException):
        asyncio.run(service.reply_to_review("v-1", "Edited"))
    assert reviews.row("reviews", "v-1")["seller_reply"] == "Thank you!"

def test_blank_reply_sends_nothing(reviews, remote):
    with pytest.raises(ValidationException):
        asyncio.run(ReviewService(remote).reply_to_review("v-1", "  "))

    assert reviews.calls("reviews", "PATCH") == []

def test_reviews_endpoints(client, reviews, auth_headers):
    listed = client.get("/api/v1/reviews/", headers=auth_headers).json()
    assert listed["stats"]["total"] == 2
    assert listed["stats"]["awaiting_reply"] == 1

    conflict = client.post(
        "/api/v1/reviews/v-2/reply", json={"reply": "Again"}, headers=auth_headers
    )
    assert conflict.status_code == 409
    assert conflict.json()["error_code"] == "REPLY_ALREADY_EXISTS"
