__version__ = '0.3.0'

API_VERSION = '2010-04-01'

DEFAULT_BASE_URL = 'https://api.twilio.com'

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 1000
