"""Tests for the domain enums and dataclasses."""

from datetime import datetime, timedelta, timezone

from app.models import MenuCategory, MenuItem, Order, OrderStatus, format_timestamp


class TestOrderStatus:

    def test_wire_values(self):
        assert [s.value for s in OrderStatus] == ["Preparing", "Out for Delivery", "Delivered"]

    def test_next(self):
        assert OrderStatus.PREPARING.next() is OrderStatus.OUT_FOR_DELIVERY
        assert OrderStatus.OUT_FOR_DELIVERY.next() is OrderStatus.DELIVERED
        assert OrderStatus.DELIVERED.next() is OrderStatus.DELIVERED

    def test_only_delivered_is_terminal(self):
        assert [s for s in OrderStatus if s.is_terminal] == [OrderStatus.DELIVERED]


class TestOrder:

    def test_defaults(self):
        order = Order(id=1, items=[1])
        assert order.status is OrderStatus.PREPARING
        assert order.created_at.tzinfo is not None

    def test_advance_stops_at_delivered(self):
        order = Order(id=1, items=[])
        assert [order.advance() for _ in range(4)] == [True, True, False, False]
        assert order.status is OrderStatus.DELIVERED


class TestSerialization:

    def test_menu_item_to_dict(self):
        item = MenuItem(id=2, name="Pizza", price=10, category=MenuCategory.MAIN_COURSE)
        assert item.to_dict() == {
            "id": 2,
            "name": "Pizza",
            "price": 10,
            "category": "Main Course",
        }

    def test_format_timestamp_converts_to_utc(self):
        local = datetime(2026, 10, 19, 14, 30, 5, 123456, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(local) == "2026-10-19T12:30:05.123Z"
