# Log events / error codes
MISSING_URL_KEY = 'MISSING_URL_KEY'
TINY_URL_NOT_FOUND = 'TINY_URL_NOT_FOUND'
STORAGE_FAILURE = 'STORAGE_FAILURE'
DELETE_SUCCESS = 'DELETE_SUCCESS'
