from prometheus_client import Counter

# Checkout Metrics
checkouts_total = Counter("storefront_checkouts_total", "Checkout attempts by outcome", ["status"])

# Cart Metrics
cart_mutations_total = Counter("storefront_cart_mutations_total", "Cart commands applied", ["action"])

# Remote read fallbacks to bundled sample data
remote_read_fallbacks_total = Counter(
    "storefront_remote_read_fallbacks_total", "Remote reads answered from sample data", ["collection"]
)

# Session Metrics
session_resolutions_total = Counter(
    "storefront_session_resolutions_total", "Initial session resolutions by resulting state", ["state"]
)
