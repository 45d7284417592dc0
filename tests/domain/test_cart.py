"""Unit tests for the Cart aggregate."""

import pytest

from shop.domain.exceptions import CapacityExceededError, EntityNotFoundError
from shop.domain.model.cart import Cart
from shop.domain.model.value_objects import Quantity
from tests.fakes import make_product


class TestCartAdd:

    def test_new_cart_is_empty(self):
        assert Cart(user_id="u1").is_empty

    def test_add_creates_line(self):
        cart = Cart(user_id="u1")
        widget = make_product(stock=10)
        cart.add(widget, Quantity(3))
        assert len(cart.lines) == 1
        assert cart.quantity_of(widget.id) == 3

    def test_add_same_product_merges(self):
        cart = Cart(user_id="u1")
        widget = make_product(stock=10)
        cart.add(widget, Quantity(3))
        cart.add(widget, Quantity(4))
        assert len(cart.lines) == 1
        assert cart.quantity_of(widget.id) == 7

    def test_distinct_products_get_distinct_lines(self):
        cart = Cart(user_id="u1")
        cart.add(make_product("Widget"), Quantity(1))
        cart.add(make_product("Gadget"), Quantity(1))
        assert len(cart.lines) == 2

    def test_add_up_to_stock_accepted(self):
        cart = Cart(user_id="u1")
        widget = make_product(stock=5)
        cart.add(widget, Quantity(5))
        assert cart.quantity_of(widget.id) == 5

    def test_add_beyond_stock_rejected(self):
        cart = Cart(user_id="u1")
        widget = make_product(stock=5)
        with pytest.raises(CapacityExceededError, match=r"available stock \(5\)"):
            cart.add(widget, Quantity(6))
        assert cart.is_empty

    def test_merge_beyond_stock_rejected_and_line_kept(self):
        cart = Cart(user_id="u1")
        widget = make_product(stock=5)
        cart.add(widget, Quantity(4))
        with pytest.raises(CapacityExceededError):
            cart.add(widget, Quantity(2))
        assert cart.quantity_of(widget.id) == 4


class TestCartRemove:

    def test_remove_drops_whole_line(self):
        cart = Cart(user_id="u1")
        widget = make_product()
        cart.add(widget, Quantity(3))
        cart.remove(widget.id)
        assert cart.is_empty

    def test_remove_missing_line_rejected(self):
        cart = Cart(user_id="u1")
        widget = make_product()
        cart.add(widget, Quantity(1))
        with pytest.raises(EntityNotFoundError, match="not found in cart"):
            cart.remove(make_product().id)
        assert cart.quantity_of(widget.id) == 1

    def test_take_lines_empties_cart(self):
        cart = Cart(user_id="u1")
        widget = make_product(stock=10)
        cart.add(widget, Quantity(2))
        taken = cart.take_lines()
        assert [(line.product_id, line.quantity.value) for line in taken] == [(widget.id, 2)]
        assert cart.is_empty
        assert cart.user_id == "u1"


class TestCartPutBack:

    def test_restores_taken_lines(self):
        cart = Cart(user_id="u1")
        widget = make_product(stock=10)
        gadget = make_product(stock=10)
        cart.add(widget, Quantity(2))
        cart.add(gadget, Quantity(1))
        cart.put_back(cart.take_lines())
        assert cart.quantity_of(widget.id) == 2
        assert cart.quantity_of(gadget.id) == 1

    def test_merges_with_lines_added_meanwhile(self):
        cart = Cart(user_id="u1")
        widget = make_product(stock=10)
        cart.add(widget, Quantity(2))
        taken = cart.take_lines()
        cart.add(widget, Quantity(1))
        cart.put_back(taken)
        assert len(cart.lines) == 1
        assert cart.quantity_of(widget.id) == 3

    def test_nothing_to_put_back(self):
        cart = Cart(user_id="u1")
        before = cart.updated_at
        cart.put_back([])
        assert cart.is_empty
        assert cart.updated_at == before
