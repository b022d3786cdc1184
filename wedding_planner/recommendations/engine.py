from __future__ import annotations

from .models import (
    CategoryRecommendation,
    EstimatedCost,
    Moodboard,
    Priority,
    WeddingPreferences,
)
from .preferences import guest_count_estimate, round_half_up

_PRIORITY_ORDER = {Priority.high: 3, Priority.medium: 2, Priority.low: 1}

# (threshold, spec) pairs checked top-down; first threshold the value exceeds wins.
# Each spec: id, title, description, (min share, max share), priority, reasons, suggested vendors.
_VENUE_TIERS = [
    (50000, (
        "venue-luxury", "Luxury Hotel or Historic Venue",
        "Premium venues with full-service coordination and elegant settings",
        (0.4, 0.6), Priority.high,
        ["High budget allows for premium venues", "Full-service coordination included"],
        ["Five-star hotels", "Historic castles", "Luxury estates"],
    )),
    (25000, (
        "venue-mid-range", "Boutique Hotels or Event Halls",
        "Beautiful mid-range venues with good amenities and flexibility",
        (0.35, 0.5), Priority.high,
        ["Good balance of quality and cost", "Flexible packages available"],
        ["Boutique hotels", "Event centers", "Garden venues"],
    )),
    (float("-inf"), (
        "venue-budget", "Community Halls or Outdoor Venues",
        "Budget-friendly venues that can be beautifully decorated",
        (0.2, 0.35), Priority.high,
        ["Cost-effective option", "More budget for decorations and other elements"],
        ["Community centers", "Public gardens", "Beach locations"],
    )),
]

_PHOTOGRAPHY_TIERS = [
    (40000, (
        "photography-premium", "Premium Wedding Photography Package",
        "Award-winning photographers with full-day coverage and engagement shoot",
        (0.08, 0.15), Priority.high,
        ["Budget allows for top-tier photographers", "Memories are priceless"],
        ["Award-winning photographers", "Studio packages", "Destination specialists"],
    )),
    (20000, (
        "photography-standard", "Professional Wedding Photography",
        "Experienced photographers with 6-8 hour coverage",
        (0.1, 0.18), Priority.high,
        ["Professional quality within budget", "Good coverage duration"],
        ["Local wedding photographers", "Photography studios", "Freelance professionals"],
    )),
    (float("-inf"), (
        "photography-budget", "Emerging Photographer or Mini Package",
        "Talented newer photographers or shorter coverage packages",
        (0.12, 0.2), Priority.medium,
        ["Cost-effective photography solution", "Opportunity to work with emerging talent"],
        ["Photography students", "New professionals", "Mini packages"],
    )),
]

# Catering tiers are keyed on budget per guest rather than total budget.
_CATERING_TIERS = [
    (200, (
        "catering-premium", "Premium Catering with Multiple Courses",
        "Gourmet dining experience with cocktail hour and premium service",
        (0.3, 0.4), Priority.high,
        ["Budget allows for premium dining experience", "Multiple course options available"],
        ["High-end catering companies", "Hotel catering services", "Michelin-starred chefs"],
    )),
    (100, (
        "catering-standard", "Full-Service Catering",
        "Professional catering with buffet or plated service",
        (0.25, 0.35), Priority.high,
        ["Good balance of quality and quantity", "Professional service included"],
        ["Local catering companies", "Restaurant catering", "Event caterers"],
    )),
    (float("-inf"), (
        "catering-budget", "Casual Catering or Family Style",
        "Buffet-style or family-style serving with good quality food",
        (0.2, 0.3), Priority.medium,
        ["Cost-effective feeding solution", "More relaxed dining atmosphere"],
        ["Casual catering services", "Food trucks", "Family restaurants"],
    )),
]

_FLORIST_TIERS = [
    (float("-inf"), (
        "florist-recommendation", "Wedding Florals and Decorations",
        "Bridal bouquet, ceremony and reception florals",
        (0.06, 0.1), Priority.medium,
        ["Essential for wedding atmosphere", "Customizable to your style"],
        ["Local florists", "Wedding floral specialists", "Online flower services"],
    )),
]

_MUSIC_TIERS = [
    (30000, (
        "music-live-band", "Live Wedding Band",
        "Professional live music for ceremony and reception",
        (0.08, 0.12), Priority.medium,
        ["Budget supports live entertainment", "Creates memorable atmosphere"],
        ["Wedding bands", "Solo acoustic artists", "String quartets"],
    )),
    (float("-inf"), (
        "music-dj", "Professional DJ Services",
        "DJ with sound system and music for all wedding events",
        (0.05, 0.08), Priority.medium,
        ["Cost-effective entertainment solution", "Wide variety of music options"],
        ["Wedding DJs", "Event entertainment companies", "Mobile DJs"],
    )),
]

_DECORATION_TIERS = [
    (float("-inf"), (
        "decoration-package", "Wedding Decorations and Styling",
        "Centerpieces, lighting, linens, and ambient decorations",
        (0.05, 0.1), Priority.medium,
        ["Essential for creating the right atmosphere", "Customizable to your theme"],
        ["Event decorators", "Party rental companies", "Wedding stylists"],
    )),
]

_STYLE_PALETTES: list[tuple[str, dict[str, list[str]]]] = [
    ("rustic", {
        "colors": ["Warm Brown", "Sage Green", "Cream", "Dusty Rose"],
        "themes": ["Natural", "Countryside", "Vintage"],
        "elements": ["Wood accents", "Mason jars", "Wildflowers", "Burlap details"],
    }),
    ("modern", {
        "colors": ["White", "Black", "Gold", "Silver"],
        "themes": ["Minimalist", "Contemporary", "Elegant"],
        "elements": ["Clean lines", "Geometric shapes", "Metallic accents", "Orchids"],
    }),
    ("vintage", {
        "colors": ["Blush Pink", "Ivory", "Gold", "Burgundy"],
        "themes": ["Classic", "Romantic", "Timeless"],
        "elements": ["Lace details", "Antique furniture", "Pearl accents", "Roses"],
    }),
    ("garden", {
        "colors": ["Soft Pink", "Lavender", "White", "Green"],
        "themes": ["Natural", "Fresh", "Botanical"],
        "elements": ["Fresh flowers", "Greenery", "Natural lighting", "Outdoor elements"],
    }),
]

_DEFAULT_PALETTE = {
    "colors": ["White", "Ivory", "Gold", "Blush Pink"],
    "themes": ["Elegant", "Classic", "Romantic"],
    "elements": ["Fresh flowers", "Candles", "Elegant linens", "Crystal accents"],
}

_CULTURAL_ACCENTS: dict[str, dict[str, list[str]]] = {
    "South Asian": {
        "colors": ["Rich Red", "Gold", "Orange"],
        "themes": ["Vibrant", "Festive"],
        "elements": ["Marigolds", "Rangoli patterns", "Rich fabrics"],
    },
    "African": {
        "colors": ["Earth tones", "Vibrant Orange", "Deep Red"],
        "themes": ["Cultural heritage", "Earthy elegance"],
        "elements": ["African prints", "Natural textures", "Traditional patterns"],
    },
    "Middle Eastern": {
        "colors": ["Deep Purple", "Gold", "Royal Blue"],
        "themes": ["Luxurious", "Opulent"],
        "elements": ["Rich textiles", "Intricate patterns", "Golden details"],
    },
}


def _pick(kind: str, tiers: list, value: float, budget: float, currency: str) -> CategoryRecommendation:
    for threshold, spec in tiers:
        if value > threshold:
            break
    rec_id, title, description, (low, high), priority, reasons, vendors = spec
    return CategoryRecommendation(
        id=rec_id,
        type=kind,
        title=title,
        description=description,
        estimated_cost=EstimatedCost(
            min=round_half_up(budget * low),
            max=round_half_up(budget * high),
            currency=currency,
        ),
        priority=priority,
        reasons=reasons,
        suggested_vendors=vendors,
    )


def category_recommendations(prefs: WeddingPreferences) -> list[CategoryRecommendation]:
    """One allocation per vendor category, highest priority first."""
    budget = prefs.budget
    currency = prefs.currency
    per_guest = budget / guest_count_estimate(prefs.guest_count)

    recommendations = [
        _pick("venue", _VENUE_TIERS, budget, budget, currency),
        _pick("photographer", _PHOTOGRAPHY_TIERS, budget, budget, currency),
        _pick("catering", _CATERING_TIERS, per_guest, budget, currency),
        _pick("florist", _FLORIST_TIERS, budget, budget, currency),
        _pick("music", _MUSIC_TIERS, budget, budget, currency),
        _pick("decoration", _DECORATION_TIERS, budget, budget, currency),
    ]
    # sorted() is stable, so equal priorities keep category order.
    return sorted(recommendations, key=lambda r: _PRIORITY_ORDER[r.priority], reverse=True)


def _unique(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def build_moodboard(prefs: WeddingPreferences) -> Moodboard:
    style = (prefs.style or "").lower()
    palette = next(
        (p for keyword, p in _STYLE_PALETTES if keyword in style),
        _DEFAULT_PALETTE,
    )
    colors = list(palette["colors"])
    themes = list(palette["themes"])
    elements = list(palette["elements"])

    for tradition, accents in _CULTURAL_ACCENTS.items():
        if tradition in prefs.cultural_traditions:
            colors += accents["colors"]
            themes += accents["themes"]
            elements += accents["elements"]

    return Moodboard(
        style=prefs.style or "Elegant Classic",
        colors=_unique(colors),
        themes=_unique(themes),
        elements=_unique(elements),
    )
