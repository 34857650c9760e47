"""
Best-guess product metadata for live-data analyses, where the catalog has none.
Keyword rules are checked in order; the first hit wins.
"""
from .models import ProductMetadata

# (keywords, category, price, [(brand keyword, brand)], default brand)
_RULES = [
    (("iphone", "samsung", "pixel"), "Smartphones", "Varies",
     [("iphone", "Apple"), ("samsung", "Samsung"), ("pixel", "Google")], "Various"),
    (("tesla", "model"), "Automotive", "$35,000+", [], "Tesla"),
    (("macbook", "laptop"), "Computers", "$1,000+", [], "Apple"),
    (("sony", "headphone"), "Audio", "$200+", [], "Sony"),
    (("nintendo", "switch"), "Gaming", "$300+", [], "Nintendo"),
    (("camera", "canon", "nikon"), "Photography", "$500+",
     [("canon", "Canon"), ("nikon", "Nikon")], "Various"),
]


def infer_metadata(product_name: str) -> ProductMetadata:
    name = (product_name or "").lower()

    for keywords, category, price, brand_rules, default_brand in _RULES:
        if not any(k in name for k in keywords):
            continue
        brand = next((b for k, b in brand_rules if k in name), default_brand)
        return ProductMetadata(category=category, brand=brand, price=price, release_date="Recent")

    return ProductMetadata(release_date="Recent")
