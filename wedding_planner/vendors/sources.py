"""
Synthetic vendor sources.

Each source takes a search request and a ``random.Random`` and returns a list
of Vendor candidates. No network calls are made; the generators produce
plausible UK listings so the matching pipeline has something to work on.
"""
from __future__ import annotations

import random
import re
from typing import Callable

from .catalog import real_vendors
from .models import PRICE_INDICATORS, Vendor, VendorSearchRequest

VendorSource = Callable[[VendorSearchRequest, random.Random], list[Vendor]]

_NAMES: dict[str, list[str]] = {
    "venue": [
        "Grand Ballroom", "Rose Manor Estate", "Crystal Palace Hotel", "Garden View Hall",
        "Riverside Manor", "Golden Oak Country Club", "The Victorian", "Lakeside Lodge",
        "Sunset Terrace", "Ivy House",
    ],
    "photographer": [
        "Emma Stone Photography", "Golden Hour Studios", "Candid Moments", "Perfect Day Photos",
        "Artistic Vision Photography", "Love Story Pictures", "Timeless Memories",
        "Modern Romance Photo", "Classic Portraits", "Dream Wedding Photos",
    ],
    "catering": [
        "Gourmet Wedding Catering", "Elegant Eats", "Fine Dining Catering", "Culinary Delights",
        "Artisan Kitchen", "Premium Catering Co", "Royal Feast Catering", "Garden Fresh Catering",
        "Signature Cuisine", "Divine Dining",
    ],
    "florist": [
        "Bloom & Blossom", "Petal Perfect Florist", "Garden Dreams Floral", "Rose & Lily Designs",
        "Enchanted Flowers", "Wildflower Wedding Co", "Elegant Blooms", "Floral Fantasy",
        "Natural Beauty Flowers", "Wedding Petals",
    ],
    "music": [
        "Harmony Wedding Band", "Elite DJ Services", "Music & Memories", "Wedding Rhythms",
        "Sound Perfection", "Love Songs Entertainment", "Premier Music Co", "Melody Makers",
        "Wedding Beats", "Celebration Sounds",
    ],
    "decoration": [
        "Dream Wedding Decor", "Elegant Events Design", "Magical Moments Decor",
        "Artistic Celebrations", "Wedding Wonders", "Perfect Setting Design",
        "Romance & Style Decor", "Enchanted Events", "Luxe Wedding Design", "Timeless Decorations",
    ],
}

_DESCRIPTIONS: dict[str, str] = {
    "venue": (
        "Stunning wedding venue with elegant architecture and beautiful surroundings. "
        "Perfect for intimate ceremonies and grand celebrations."
    ),
    "photographer": (
        "Professional wedding photographer specializing in capturing your most precious "
        "moments with artistic flair and attention to detail."
    ),
    "catering": "Premium catering service offering exquisite cuisine and exceptional service for your special day.",
    "florist": (
        "Creative floral designer creating beautiful arrangements that perfectly complement "
        "your wedding theme and style."
    ),
    "music": "Professional wedding entertainment providing the perfect soundtrack for your celebration.",
    "decoration": "Expert wedding decorators transforming venues into magical spaces that reflect your unique style.",
}

_FEATURES: dict[str, list[str]] = {
    "venue": [
        "On-site catering", "Bridal suite", "Parking available", "Garden ceremony space",
        "Indoor backup option", "Dance floor", "Full bar service",
    ],
    "photographer": [
        "8-hour coverage", "Engagement shoot included", "Online gallery", "Same-day sneak peeks",
        "Wedding album", "USB with high-res images",
    ],
    "catering": [
        "Custom menu planning", "Dietary accommodations", "Professional service staff",
        "Equipment rental", "Tastings available", "Late-night snacks",
    ],
    "florist": [
        "Bridal bouquet", "Ceremony arrangements", "Reception centerpieces", "Boutonniere included",
        "Setup service", "Fresh seasonal flowers",
    ],
    "music": [
        "Professional sound system", "Wireless microphones", "LED lighting", "Music requests",
        "Ceremony music", "Reception entertainment",
    ],
    "decoration": [
        "Theme consultation", "Setup & breakdown", "Centerpieces", "Ceremony arch",
        "Lighting design", "Linens & tableware",
    ],
}

_SPECIALTIES: dict[str, list[str]] = {
    "venue": ["Outdoor ceremonies", "Historic venues"],
    "photographer": ["Natural light", "Candid photography"],
    "catering": ["Italian cuisine", "Vegan options"],
    "florist": ["Rustic arrangements", "Modern designs"],
    "music": ["Jazz band", "Classical music"],
    "decoration": ["Vintage style", "Modern elegance"],
}

PRICE_RANGES = ["£500-£1,000", "£1,000-£2,500", "£2,500-£5,000", "£5,000-£10,000", "£10,000+"]
RESPONSE_TIMES = ["Within 1 hour", "Within 2 hours", "Within 4 hours", "Within 24 hours", "Within 2 days"]
_STREETS = [
    "High Street", "Church Lane", "Mill Road", "Victoria Street", "King's Road",
    "Queen's Avenue", "Park Lane", "Oak Street",
]
_WEBSITE_ADJECTIVES = ["elegant", "perfect", "divine", "royal", "premium", "luxury"]

_BUSINESS_HOURS = {
    "Monday": "9:00 AM - 5:00 PM",
    "Tuesday": "9:00 AM - 5:00 PM",
    "Wednesday": "9:00 AM - 5:00 PM",
    "Thursday": "9:00 AM - 5:00 PM",
    "Friday": "9:00 AM - 5:00 PM",
    "Saturday": "10:00 AM - 4:00 PM",
    "Sunday": "By appointment only",
}

_AREA_VARIATIONS: dict[str, list[str]] = {
    "london": ["Central London", "West London", "East London", "South London", "North London"],
    "manchester": ["Greater Manchester", "Manchester City Centre", "Salford", "Stockport"],
    "birmingham": ["Birmingham City Centre", "West Midlands", "Solihull"],
}


def location_variations(location: str) -> list[str]:
    """The requested location plus nearby areas generated listings spread over."""
    lowered = location.lower()
    for city, areas in _AREA_VARIATIONS.items():
        if city in lowered:
            return [location, *areas]
    return [location, f"{location} City Centre", f"Greater {location}", f"{location} Suburbs"]


def _image_urls(category: str, count: int) -> list[str]:
    return [f"/api/placeholder/400/300?category={category}&index={i}" for i in range(count)]


def _slug(name: str) -> str:
    return re.sub(r"\s+", "", name).lower()


def generate_vendor(
    category: str,
    locations: list[str],
    index: int,
    rng: random.Random,
    source: str,
) -> Vendor:
    """Build one plausible listing; ``source`` keeps ids unique across sources."""
    names = _NAMES.get(category, ["Professional Wedding Services"])
    location = rng.choice(locations)
    site = f"{rng.choice(_WEBSITE_ADJECTIVES)}{category}{rng.randrange(100)}"
    extra_languages = ["Spanish", "French"] if rng.random() > 0.7 else []

    return Vendor(
        id=f"{source}-{category}-{index}-{rng.randrange(10**6):06d}",
        name=rng.choice(names),
        category=category,
        description=_DESCRIPTIONS.get(category, "Professional wedding service provider"),
        location=location,
        address=f"{rng.randint(1, 999)} {rng.choice(_STREETS)}, {location}",
        phone=f"+44 {rng.randint(1000, 9999)} {rng.randint(100000, 999999)}",
        website=f"https://{site}.com",
        email=f"info@{site}.com",
        rating=round(4.0 + rng.random(), 1),
        review_count=rng.randint(20, 219),
        price_range=rng.choice(PRICE_RANGES),
        price_indicator=rng.choice(PRICE_INDICATORS),
        images=_image_urls(category, 3),
        features=list(_FEATURES.get(category, ["Professional service"])),
        business_hours=dict(_BUSINESS_HOURS),
        social_media={
            "facebook": f"https://facebook.com/{site}",
            "instagram": f"https://instagram.com/{site}",
        },
        verified=rng.random() > 0.3,
        specialties=list(_SPECIALTIES.get(category, [])),
        availability=rng.random() > 0.2,
        response_time=rng.choice(RESPONSE_TIMES),
        languages=["English", *extra_languages],
    )


# ── Sources ──────────────────────────────────────────────────────────────────

def google_places(request: VendorSearchRequest, rng: random.Random) -> list[Vendor]:
    """Curated real vendors for the category followed by 5-14 local listings."""
    locations = location_variations(request.location)
    count = rng.randint(5, 14)
    generated = [
        generate_vendor(request.category, locations, i, rng, "google_places")
        for i in range(count)
    ]
    return real_vendors(request.category) + generated


def wedding_platforms(request: VendorSearchRequest, rng: random.Random) -> list[Vendor]:
    """3-7 verified, highly reviewed listings in the requested location."""
    vendors = []
    for i in range(rng.randint(3, 7)):
        vendor = generate_vendor(
            request.category, [request.location], i, rng, "wedding_platforms"
        )
        vendor.verified = True
        vendor.rating = round(4.5 + rng.random() * 0.5, 1)
        vendor.review_count = rng.randint(50, 149)
        vendor.response_time = "Within 1 hour"
        vendors.append(vendor)
    return vendors


def social_media(request: VendorSearchRequest, rng: random.Random) -> list[Vendor]:
    """2-5 listings with a full set of social links and a larger gallery."""
    vendors = []
    for i in range(rng.randint(2, 5)):
        vendor = generate_vendor(request.category, [request.location], i, rng, "social_media")
        handle = _slug(vendor.name)
        vendor.social_media = {
            "facebook": f"https://facebook.com/{handle}",
            "instagram": f"https://instagram.com/{handle}",
            "twitter": f"https://twitter.com/{handle}",
        }
        vendor.images = _image_urls(request.category, 5)
        vendors.append(vendor)
    return vendors


SOURCES: dict[str, VendorSource] = {
    "google_places": google_places,
    "wedding_platforms": wedding_platforms,
    "social_media": social_media,
}
