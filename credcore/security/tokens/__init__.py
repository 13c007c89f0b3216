# Token package initialization

from credcore.security.tokens.models import Claims, TokenType
from credcore.security.tokens.service import issue_token, verify_token
from credcore.security.tokens.utils import decode_jwt, encode_jwt

__all__ = [
    "Claims",
    "TokenType",
    "issue_token",
    "verify_token",
    "encode_jwt",
    "decode_jwt",
]
