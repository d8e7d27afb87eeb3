"""Booking.com hotel search — deterministic simulation of the partner API.

There are no partner credentials, so responses are generated. Generation is
seeded from the destination or hotel id, so a hotel returned by a search has
the same name, rating and price when its details are fetched.
"""

import hashlib
import logging
import random
import re
from datetime import date, timedelta

from travel_rec.services.affiliate_service import affiliate_service

logger = logging.getLogger(__name__)

SEARCH_RESULT_COUNT = 15
REVIEW_TOTAL = 50

HOTEL_TYPES = ["Hotel", "Resort", "Apartment", "Villa", "Boutique Hotel", "Hostel"]

LISTING_AMENITIES = [
    "Free WiFi", "Pool", "Spa", "Fitness Center", "Restaurant",
    "Room Service", "Airport Shuttle", "Parking",
]

DETAIL_AMENITIES = [
    "Free WiFi", "Swimming Pool", "Spa", "Fitness Center", "Restaurant",
    "Room Service", "Airport Shuttle", "Parking", "Air Conditioning",
    "Bar", "Breakfast Available", "Business Center", "Concierge",
    "Pet Friendly", "24-Hour Front Desk", "Non-smoking Rooms",
]

ROOM_TYPES = [
    {"name": "Standard Double", "beds": "1 Queen Bed", "size": "25m²", "price": 120},
    {"name": "Deluxe Double", "beds": "1 King Bed", "size": "30m²", "price": 150},
    {"name": "Twin Room", "beds": "2 Single Beds", "size": "28m²", "price": 130},
    {"name": "Family Suite", "beds": "1 King Bed & 2 Single Beds", "size": "40m²", "price": 200},
    {"name": "Executive Suite", "beds": "1 King Bed", "size": "45m²", "price": 250},
]

REVIEW_TITLES = [
    "Great stay!", "Wonderful experience", "Excellent service",
    "Will come back", "Loved this hotel", "Perfect location",
    "Disappointing", "Not as advertised", "Good value for money",
    "Average stay", "Very clean", "Friendly staff",
]

REVIEW_CATEGORIES = ["Cleanliness", "Comfort", "Location", "Facilities", "Staff", "Value for money"]

REVIEW_SENTENCES = [
    (0.3, "I really enjoyed my stay at this hotel."),
    (0.5, "The location was perfect for my needs."),
    (0.4, "The staff was very helpful and friendly."),
    (0.5, "The room was clean and comfortable."),
    (0.2, "I would definitely stay here again."),
]

HOTEL_ID_RE = re.compile(r"^(?P<slug>[a-z0-9]+(?:-[a-z0-9]+)*)-(?P<index>\d+)$")


def _rng(seed_str: str) -> random.Random:
    seed = int(hashlib.md5(seed_str.encode()).hexdigest()[:8], 16)
    return random.Random(seed)


def _slugify(destination: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", destination.strip().lower()).strip("-")


def _display_name(slug: str) -> str:
    return " ".join(part.capitalize() for part in slug.split("-"))


class BookingService:
    """Simulated Booking.com hotel search, details and reviews."""

    def search_hotels(
        self,
        destination: str,
        check_in: date,
        check_out: date,
        adults: int = 2,
        rooms: int = 1,
        min_rating: float = 0,
        max_price: float | None = None,
        amenities: list[str] | None = None,
    ) -> dict:
        slug = _slugify(destination)
        hotels = [self._summary(slug, i) for i in range(1, SEARCH_RESULT_COUNT + 1)]

        if min_rating:
            hotels = [h for h in hotels if h["rating"] >= min_rating]
        if max_price is not None:
            hotels = [h for h in hotels if h["price"]["current"] <= max_price]
        if amenities:
            wanted = {a.strip().lower() for a in amenities if a.strip()}
            hotels = [
                h for h in hotels
                if wanted <= {a.lower() for a in h["amenities"]}
            ]

        for h in hotels:
            h["booking_link"] = affiliate_service.booking_link(
                h["id"], check_in.isoformat(), check_out.isoformat()
            )
            h["expedia_link"] = affiliate_service.expedia_link(
                h["id"], check_in.isoformat(), check_out.isoformat()
            )

        logger.info(
            f"Booking search {destination} ({adults} adults, {rooms} rooms): {len(hotels)} hotels"
        )
        return {"status": "success", "count": len(hotels), "hotels": hotels}

    def get_hotel(self, hotel_id: str) -> dict | None:
        match = HOTEL_ID_RE.match(hotel_id)
        if not match:
            return None

        slug = match.group("slug")
        summary = self._summary(slug, int(match.group("index")))
        rng = _rng(f"{hotel_id}:detail")
        city = _display_name(slug)

        return {
            "id": hotel_id,
            "name": summary["name"],
            "type": summary["type"],
            "description": (
                f"Experience comfort at our property in the heart of {city}. "
                "Modern amenities, spacious rooms and attentive service, close to "
                "major attractions and business districts."
            ),
            "address": {
                "street": f"{rng.randint(1, 999)} Main Avenue",
                "city": city,
                "postal_code": str(rng.randint(10000, 99999)),
                "country": "United States",
            },
            "coordinates": {
                "latitude": round(rng.uniform(-90, 90), 6),
                "longitude": round(rng.uniform(-180, 180), 6),
            },
            "rating": summary["rating"],
            "review_count": summary["review_count"],
            "star_rating": rng.randint(3, 5),
            "price": summary["price"],
            "images": [
                f"https://picsum.photos/seed/{hotel_id}-{view}/800/600"
                for view in ("main", "room", "lobby", "pool", "restaurant")
            ],
            "amenities": rng.sample(DETAIL_AMENITIES, 10),
            "room_types": rng.sample(ROOM_TYPES, 3),
            "policies": {
                "check_in": "14:00",
                "check_out": "11:00",
                "free_cancellation": summary["free_cancellation"],
                "cancellation_policy": (
                    "Free cancellation up to 48 hours before check-in. "
                    "After that, the first night is non-refundable."
                ),
                "children_policy": "Children of all ages are welcome.",
                "pet_policy": "Pets allowed on request" if rng.random() > 0.7 else "No pets allowed",
            },
            "nearby_attractions": [
                {"name": f"{city} Central Park", "distance": "0.5 km"},
                {"name": f"{city} Museum of Art", "distance": "1.2 km"},
                {"name": f"{city} Shopping Center", "distance": "0.8 km"},
            ],
        }

    def get_reviews(self, hotel_id: str, page: int = 1, limit: int = 10) -> dict:
        rng = _rng(f"{hotel_id}:reviews:{page}:{limit}")
        today = date.today()
        offset = (page - 1) * limit
        count = max(0, min(limit, REVIEW_TOTAL - offset))

        reviews = []
        for i in range(offset, offset + count):
            overall = rng.randint(1, 5)
            reviews.append({
                "id": f"review-{hotel_id}-{i}",
                "title": rng.choice(REVIEW_TITLES),
                "rating": overall,
                "date": (today - timedelta(days=rng.randint(0, 59))).isoformat(),
                "reviewer": {
                    "name": f"Guest {chr(65 + i % 26)}",
                    "country": "United States",
                    "trip_type": "Business" if rng.random() > 0.5 else "Leisure",
                },
                "stay_duration": f"{rng.randint(1, 7)} nights",
                "room": "Standard Room" if rng.random() > 0.5 else "Deluxe Room",
                # Category scores stay within one point of the overall rating
                "category_ratings": {
                    cat: max(1, min(5, overall + rng.randint(-1, 1)))
                    for cat in REVIEW_CATEGORIES
                },
                "text": " ".join(s for p, s in REVIEW_SENTENCES if rng.random() < p),
                "pros": "Great location, friendly staff" if rng.random() > 0.3 else None,
                "cons": "Bathroom could be cleaner" if rng.random() > 0.7 else None,
            })

        return {
            "status": "success",
            "page": page,
            "limit": limit,
            "total": REVIEW_TOTAL,
            "reviews": reviews,
        }

    def _summary(self, slug: str, index: int) -> dict:
        hotel_id = f"{slug}-{index}"
        rng = _rng(hotel_id)
        hotel_type = HOTEL_TYPES[(index - 1) % len(HOTEL_TYPES)]
        price = rng.randint(50, 349)
        discounted = rng.random() < 0.3

        return {
            "id": hotel_id,
            "name": f"{_display_name(slug)} {hotel_type} {index}",
            "type": hotel_type,
            "address": f"{rng.randint(1, 999)} Main Street, {_display_name(slug)}",
            "rating": round(rng.uniform(2.0, 5.0), 1),
            "review_count": rng.randint(50, 549),
            "price": {
                "current": price,
                "original": round(price * 1.2, 2) if discounted else price,
                "currency": "USD",
            },
            "images": [f"https://picsum.photos/seed/{hotel_id}-{n}/800/600" for n in (1, 2, 3)],
            "amenities": LISTING_AMENITIES[: rng.randint(3, 7)],
            "free_cancellation": rng.random() > 0.5,
            "distance": f"{rng.uniform(0, 5):.1f} km from center",
        }


booking_service = BookingService()
