# Structured log events / error codes emitted by the handlers
INVALID_JSON = 'INVALID_JSON'
MISSING_LONG_LINK = 'MISSING_LONG_LINK'
MISSING_SHORT_ID = 'MISSING_SHORT_ID'
INVALID_LONG_LINK = 'INVALID_LONG_LINK'
DOMAIN_MISMATCH = 'DOMAIN_MISMATCH'
SHORT_ID_NOT_FOUND = 'SHORT_ID_NOT_FOUND'
METHOD_NOT_ALLOWED = 'METHOD_NOT_ALLOWED'
STORAGE_WRITE_FAILED = 'STORAGE_WRITE_FAILED'
LINK_ADDED = 'LINK_ADDED'
LINK_UPDATED = 'LINK_UPDATED'
LINK_REMOVED = 'LINK_REMOVED'
LINKS_LISTED = 'LINKS_LISTED'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
