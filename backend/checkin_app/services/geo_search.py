"""Great-circle venue search with composable filters."""
import math
from typing import Callable, List, NamedTuple, Optional

from checkin_app.db.store import SocialStore
from checkin_app.models.venue import Venue

EARTH_RADIUS_KM = 6371.0
DEFAULT_RADIUS_KM = 10.0
# Keeps venues sitting exactly on the radius inside the prefilter box
BOX_MARGIN_DEG = 1e-6


def great_circle_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dlambda = math.radians(lon2 - lon1)

    cos_angle = (
        math.sin(phi1) * math.sin(phi2)
        + math.cos(phi1) * math.cos(phi2) * math.cos(dlambda)
    )
    # Rounding can push the sum just past +/-1 for identical or antipodal points
    cos_angle = max(-1.0, min(1.0, cos_angle))
    return EARTH_RADIUS_KM * math.acos(cos_angle)


class BoundingBox(NamedTuple):
    min_lat: float
    max_lat: float
    min_lon: Optional[float]
    max_lon: Optional[float]


def bounding_box(lat: float, lon: float, radius_km: float) -> BoundingBox:
    """
    Coarse box around a point, used only to narrow the candidate set.

    The longitude band is dropped (None) when the circle reaches a pole or
    crosses the antimeridian.
    """
    angular = radius_km / EARTH_RADIUS_KM
    delta_lat = math.degrees(angular) + BOX_MARGIN_DEG
    min_lat, max_lat = lat - delta_lat, lat + delta_lat

    if min_lat <= -90 or max_lat >= 90 or angular >= math.pi / 2:
        return BoundingBox(max(min_lat, -90.0), min(max_lat, 90.0), None, None)

    delta_lon = math.degrees(math.asin(min(1.0, math.sin(angular) / math.cos(math.radians(lat))))) + BOX_MARGIN_DEG
    min_lon, max_lon = lon - delta_lon, lon + delta_lon
    if min_lon < -180 or max_lon > 180:
        return BoundingBox(min_lat, max_lat, None, None)
    return BoundingBox(min_lat, max_lat, min_lon, max_lon)


class Candidate(NamedTuple):
    venue: Venue
    distance_km: float


VenueFilter = Callable[[Candidate], bool]


def within_radius(radius_km: float) -> VenueFilter:
    return lambda candidate: candidate.distance_km <= radius_km


def in_category(category: str) -> VenueFilter:
    return lambda candidate: candidate.venue.category == category


def matches_text(query: str) -> VenueFilter:
    needle = query.lower()

    def _match(candidate: Candidate) -> bool:
        venue = candidate.venue
        if needle in (venue.name or "").lower():
            return True
        return venue.description is not None and needle in venue.description.lower()

    return _match


def build_filters(radius_km: float, category: Optional[str] = None, query: Optional[str] = None) -> List[VenueFilter]:
    filters = [within_radius(radius_km)]
    if category is not None:
        filters.append(in_category(category))
    if query:
        filters.append(matches_text(query))
    return filters


class GeoSearchEngine:
    def __init__(self, store: SocialStore):
        self.store = store

    def search(
        self,
        latitude: float,
        longitude: float,
        radius_km: Optional[float] = None,
        category: Optional[str] = None,
        query: Optional[str] = None,
    ) -> List[Venue]:
        """
        Venues within ``radius_km`` of the point, nearest first.

        Ties on distance are ordered by venue id so repeated calls return the
        same sequence.
        """
        if radius_km is None:
            radius_km = DEFAULT_RADIUS_KM
        filters = build_filters(radius_km, category, query)

        box = bounding_box(latitude, longitude, radius_km)
        venues = self.store.venues_in_bounds(box.min_lat, box.max_lat, box.min_lon, box.max_lon)

        matches = []
        for venue in venues:
            candidate = Candidate(venue, great_circle_km(latitude, longitude, venue.latitude, venue.longitude))
            if all(f(candidate) for f in filters):
                matches.append(candidate)

        matches.sort(key=lambda c: (c.distance_km, c.venue.id))
        return [c.venue for c in matches]
