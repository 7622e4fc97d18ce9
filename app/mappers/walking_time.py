import math

from app.mappers.coordinates import CAMPUS_ANCHOR

# Minutes per degree of planar distance, tuned for the streets around campus
MINUTES_PER_DEGREE = 2000


def estimate_walking_time(lat: float, lng: float) -> str:
    anchor_lat, anchor_lng = CAMPUS_ANCHOR
    distance = math.hypot(lat - anchor_lat, lng - anchor_lng)
    minutes = max(1, round(distance * MINUTES_PER_DEGREE))
    return f"{minutes} min walk"
