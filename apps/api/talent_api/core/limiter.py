from slowapi import Limiter
from slowapi.util import get_remote_address

# Per client IP; multi-instance needs Redis later
limiter = Limiter(key_func=get_remote_address)
