from app.schemas.property import ScrapeTarget

SCRAPE_TARGETS: tuple[ScrapeTarget, ...] = (
    ScrapeTarget(
        key="verve",
        name="Verve New Brunswick",
        url="https://vervenb.com",
        address="88 Easton Avenue, New Brunswick, NJ 08901",
        phone="(862) 244-1479",
    ),
    ScrapeTarget(
        key="standard",
        name="The Standard at New Brunswick",
        url="https://thestandardnewbrunswick.landmark-properties.com",
        address="90 New Street, New Brunswick, NJ 08901",
        phone="(732) 247-0500",
    ),
    ScrapeTarget(
        key="ruliving",
        name="RU Living",
        url="https://ruliving.com",
        address="12 Bartlett Street, New Brunswick, NJ 08901",
        phone="(732) 317-8313",
    ),
    ScrapeTarget(
        key="brunswicksh",
        name="Brunswick Student Housing",
        url="https://www.brunswickstudenthousing.com",
        address="Various Hamilton St Properties, New Brunswick, NJ",
        phone="(732) 545-7368",
    ),
)
