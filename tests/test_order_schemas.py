"""Transfer record behaviour: construction, accessors, equality, immutability."""
from datetime import date

import pytest
from pydantic import ValidationError

from services.order_service.schemas import (
    OrderItemRequest,
    OrderItemResponse,
    OrderRequest,
    OrderResponse,
)


def _request() -> OrderRequest:
    return OrderRequest(
        customer_name="Alice",
        email="alice@example.com",
        items=[OrderItemRequest(product_id=1, quantity=2)],
    )


class TestOrderRequest:

    def test_accessors_return_constructor_values(self):
        items = [OrderItemRequest(product_id=1, quantity=2)]
        req = OrderRequest(customer_name="Alice", email="alice@example.com", items=items)
        assert req.customer_name == "Alice"
        assert req.email == "alice@example.com"
        assert req.items == items

    def test_equal_values_give_equal_records(self):
        assert _request() == _request()

    def test_different_values_are_not_equal(self):
        other = OrderRequest(customer_name="Bob", email="alice@example.com", items=[])
        assert _request() != other

    @pytest.mark.parametrize("missing", ["customer_name", "email", "items"])
    def test_every_field_is_required(self, missing):
        fields = {"customer_name": "Alice", "email": "alice@example.com", "items": []}
        del fields[missing]
        with pytest.raises(ValidationError):
            OrderRequest(**fields)

    def test_is_immutable(self):
        req = _request()
        with pytest.raises(ValidationError):
            req.customer_name = "Mallory"

    def test_accepts_camel_case_keys(self):
        req = OrderRequest.model_validate({
            "customerName": "Alice",
            "email": "alice@example.com",
            "items": [{"productId": 1, "quantity": 2}],
        })
        assert req == _request()


class TestOrderResponse:

    def test_accessors_and_wire_format(self):
        resp = OrderResponse(
            order_id="ORD1234ABCD",
            customer_name="Alice",
            email="alice@example.com",
            status="PLACED",
            order_date=date(2024, 5, 1),
            items=[OrderItemResponse(product_name="Widget", quantity=3, total_price=45.0)],
        )
        assert resp.order_id == "ORD1234ABCD"
        assert resp.order_date == date(2024, 5, 1)
        assert resp.items[0].product_name == "Widget"

        wire = resp.model_dump(by_alias=True, mode="json")
        assert wire == {
            "orderId": "ORD1234ABCD",
            "customerName": "Alice",
            "email": "alice@example.com",
            "status": "PLACED",
            "orderDate": "2024-05-01",
            "items": [{"productName": "Widget", "quantity": 3, "totalPrice": 45.0}],
        }

    def test_missing_order_date_is_rejected(self):
        with pytest.raises(ValidationError):
            OrderResponse(
                order_id="ORD1234ABCD",
                customer_name="Alice",
                email="alice@example.com",
                status="PLACED",
                items=[],
            )


def _response(**overrides) -> OrderResponse:
    fields = dict(
        order_id="ORD1234ABCD",
        customer_name="Alice",
        email="alice@example.com",
        status="PLACED",
        order_date=date(2024, 5, 1),
        items=[OrderItemResponse(product_name="Widget", quantity=3, total_price=45.0)],
    )
    fields.update(overrides)
    return OrderResponse(**fields)


class TestResponseEquality:

    def test_equal_values_give_equal_records(self):
        assert _response() == _response()
        assert OrderItemResponse(product_name="Widget", quantity=3, total_price=45.0) == \
            OrderItemResponse(product_name="Widget", quantity=3, total_price=45.0)

    def test_different_values_are_not_equal(self):
        assert _response() != _response(status="SHIPPED")
        assert OrderItemResponse(product_name="Widget", quantity=3, total_price=45.0) != \
            OrderItemResponse(product_name="Widget", quantity=4, total_price=60.0)

    def test_response_records_are_immutable(self):
        resp = _response()
        with pytest.raises(ValidationError):
            resp.status = "CANCELLED"
        with pytest.raises(ValidationError):
            resp.items[0].quantity = 99
