"""Tests for keyword-based product metadata inference."""
import pytest

from gateway.app.metadata import infer_metadata


@pytest.mark.parametrize("name,category,brand,price", [
    ("iPhone 15 Pro", "Smartphones", "Apple", "Varies"),
    ("Samsung Galaxy S24", "Smartphones", "Samsung", "Varies"),
    ("Google Pixel 8", "Smartphones", "Google", "Varies"),
    ("Tesla Model 3", "Automotive", "Tesla", "$35,000+"),
    ("MacBook Air M2", "Computers", "Apple", "$1,000+"),
    ("Gaming Laptop 15", "Computers", "Apple", "$1,000+"),
    ("Sony WH-1000XM5", "Audio", "Sony", "$200+"),
    ("Nintendo Switch OLED", "Gaming", "Nintendo", "$300+"),
    ("Canon EOS R6", "Photography", "Canon", "$500+"),
    ("Nikon Z6", "Photography", "Nikon", "$500+"),
    ("Action Camera 4K", "Photography", "Various", "$500+"),
])
def test_keyword_rules(name, category, brand, price):
    meta = infer_metadata(name)
    assert (meta.category, meta.brand, meta.price) == (category, brand, price)
    assert meta.release_date == "Recent"


def test_defaults_for_unknown_product():
    meta = infer_metadata("Widget X")
    assert (meta.category, meta.brand, meta.price) == ("General", "Various", "Varies")


def test_first_matching_rule_wins():
    # "samsung" is checked before "laptop"
    assert infer_metadata("Samsung Galaxy Book Laptop").category == "Smartphones"
