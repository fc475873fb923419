# Log events / error codes
INVALID_JSON = 'INVALID_JSON'
MISSING_LONG_URL = 'MISSING_LONG_URL'
INVALID_LONG_URL = 'INVALID_LONG_URL'
INVALID_LIVE_FOREVER = 'INVALID_LIVE_FOREVER'
STORAGE_FAILURE = 'STORAGE_FAILURE'
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
