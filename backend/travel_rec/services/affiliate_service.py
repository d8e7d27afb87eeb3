"""Affiliate deep links for hotel booking partners."""

from urllib.parse import urlencode

from travel_rec.config import settings


class AffiliateService:
    def __init__(self, booking_affiliate_id: str | None = None, expedia_affiliate_id: str | None = None):
        self.booking_affiliate_id = (
            settings.booking_affiliate_id if booking_affiliate_id is None else booking_affiliate_id
        )
        self.expedia_affiliate_id = (
            settings.expedia_affiliate_id if expedia_affiliate_id is None else expedia_affiliate_id
        )

    def booking_link(self, hotel_id: str, check_in: str, check_out: str) -> str:
        query = urlencode({
            "aid": self.booking_affiliate_id,
            "hotelid": hotel_id,
            "checkin": check_in,
            "checkout": check_out,
        })
        return f"https://www.booking.com/hotel.html?{query}"

    def expedia_link(self, hotel_id: str, check_in: str, check_out: str) -> str:
        query = urlencode({
            "hotelID": hotel_id,
            "checkIn": check_in,
            "checkOut": check_out,
            "affid": self.expedia_affiliate_id,
        })
        return f"https://www.expedia.com/hotel?{query}"


affiliate_service = AffiliateService()
