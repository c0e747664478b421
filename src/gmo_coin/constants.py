"""
Constants for the GMO Coin client.
"""

# API Configuration
PUBLIC_API = "https://api.coin.z.com/public"
PRIVATE_API = "https://api.coin.z.com/private"
DEFAULT_USER_AGENT = "gmo-coin-python/0.3"

# Authentication Configuration
API_KEY_ENV = "GMO_COIN_API_KEY"
SECRET_KEY_ENV = "GMO_COIN_SECRET_KEY"

# Pagination defaults sent by the private listings
DEFAULT_PAGE = 1
DEFAULT_COUNT = 100

# Envelope status for a successful call
SUCCESS_STATUS = 0
