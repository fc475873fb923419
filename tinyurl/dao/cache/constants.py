# TTL caching tiers in seconds
WARM_TTL = 24 * 60 * 60  # 24 hours * 60 minutes * 60 seconds = 24 hours

# Cached URL documents are evicted after a day
DEFAULT_CACHE_TTL = WARM_TTL
