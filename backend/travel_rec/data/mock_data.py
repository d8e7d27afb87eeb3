"""Static location and hotel fixtures in Amadeus response shape, for offline development."""

import copy


def _location(sub_type: str, name: str, iata: str, city: str, country: str) -> dict:
    return {
        "type": "location",
        "subType": sub_type,
        "name": name,
        "iataCode": iata,
        "address": {"cityName": city, "countryName": country},
    }


LOCATIONS = [
    _location("CITY", "Brooklyn", "BKL", "Brooklyn", "United States"),
    _location("CITY", "Bronx", "BRX", "Bronx", "United States"),
    _location("CITY", "Brisbane", "BNE", "Brisbane", "Australia"),
    _location("AIRPORT", "Brisbane Airport", "BNE", "Brisbane", "Australia"),
    _location("CITY", "Broomfield", "BFD", "Broomfield", "United States"),
    _location("CITY", "Sydney", "SYD", "Sydney", "Australia"),
    _location("AIRPORT", "Sydney Kingsford Smith Airport", "SYD", "Sydney", "Australia"),
]

# (hotel name, city name, country code, rating, offer id, room, total, currency)
HOTELS_BY_CITY = {
    "NYC": [
        ("Grand Hotel Downtown", "New York", "US", "4", "NYC1001", "Deluxe King Room", "299.00", "USD"),
        ("Park Avenue Suites", "New York", "US", "5", "NYC1002", "Executive Suite", "459.00", "USD"),
    ],
    "LON": [
        ("Riverside Luxury Hotel", "London", "GB", "5", "LON2001", "Premium Room with Thames View", "279.00", "GBP"),
        ("Historic City Hotel", "London", "GB", "4", "LON2002", "Standard Double Room", "189.00", "GBP"),
    ],
    "SYD": [
        ("Harbour View Hotel", "Sydney", "AU", "5", "SYD3001", "Deluxe Suite with Opera House View", "389.00", "AUD"),
        ("Bondi Beach Resort", "Sydney", "AU", "4", "SYD3002", "Oceanfront Room", "259.00", "AUD"),
    ],
    "PAR": [
        ("Eiffel View Hotel", "Paris", "FR", "5", "PAR4001", "Luxury Suite with Eiffel Tower View", "459.00", "EUR"),
        ("Left Bank Boutique Hotel", "Paris", "FR", "4", "PAR4002", "Classic Double Room", "219.00", "EUR"),
    ],
}

# City name is filled in with the requested city code
DEFAULT_HOTELS = [
    ("International Grand Hotel", None, "US", "4", "DEF5001", "Standard Room", "199.00", "USD"),
    ("Downtown Plaza Hotel", None, "US", "3", "DEF5002", "Budget Room", "129.00", "USD"),
]


def search_locations(keyword: str) -> list[dict]:
    term = keyword.lower()
    return [
        copy.deepcopy(loc)
        for loc in LOCATIONS
        if term in loc["name"].lower()
        or term in loc["iataCode"].lower()
        or term in loc["address"]["cityName"].lower()
        or term in loc["address"]["countryName"].lower()
    ]


def hotels_for_city(city_code: str | None, check_in: str | None, check_out: str | None) -> list[dict]:
    code = (city_code or "").upper()
    rows = HOTELS_BY_CITY.get(code)
    if rows is None:
        rows = [
            (name, city_code or "Unknown City", country, rating, offer_id, room, total, currency)
            for name, _, country, rating, offer_id, room, total, currency in DEFAULT_HOTELS
        ]

    return [
        {
            "hotel": {
                "name": name,
                "cityCode": code if code in HOTELS_BY_CITY else (city_code or "---"),
                "address": {"cityName": city, "countryCode": country},
                "rating": rating,
            },
            "offers": [{
                "id": offer_id,
                "checkInDate": check_in,
                "checkOutDate": check_out,
                "roomDescription": room,
                "price": {"total": total, "currency": currency},
            }],
        }
        for name, city, country, rating, offer_id, room, total, currency in rows
    ]
