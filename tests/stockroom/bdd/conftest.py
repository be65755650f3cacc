"""Shared BDD fixtures and step definitions for the stockroom registry."""

import pytest
from pytest_bdd import given, parsers, then
from stockroom.item.item import Category
from stockroom.registry.registry import Registry


@pytest.fixture()
def outcome():
    """Holds the exception raised by the last When step, if any."""
    return {"error": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("an empty registry", target_fixture="registry")
def _():
    return Registry()


@given(parsers.parse('the item "{item_number}" "{description}" is registered with {amount:d} units at {price:d}'))
def _(registry, item_number, description, amount, price):
    registry.register_new_item(item_number, description, amount, price, Category.TABLES, "Acme", 5.0, 1.0, 2.0, "Brown")


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.parse('"{item_number}" has {amount:d} units in storage'))
def _(registry, item_number, amount):
    assert registry.get_item(item_number).amount_in_storage == amount


@then(parsers.parse('the price after discount of "{item_number}" is {price:d}'))
def _(registry, item_number, price):
    assert registry.get_item(item_number).price_after_discount() == price


@then(parsers.parse('the stored price of "{item_number}" is {price:d}'))
def _(registry, item_number, price):
    assert registry.get_item(item_number).price == price


@then(parsers.parse('the description of "{item_number}" is "{description}"'))
def _(registry, item_number, description):
    assert registry.get_item(item_number).description == description


@then(parsers.parse('the item number "{item_number}" is free'))
def _(registry, item_number):
    assert not registry.item_number_taken(item_number)
