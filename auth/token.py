import logging
from datetime import datetime, timedelta, timezone

import dacite
import jwt

from models import Account, Identity
from models.errors import InvalidOrExpiredToken

JWT_ALGORITHM = 'HS256'

logger = logging.getLogger(__name__)


class TokenService:
    """Issues and verifies signed, time-bound identity tokens.

    Tokens are stateless: validity depends only on the signature and the
    ``exp`` claim, so rotating ``secret`` invalidates every issued token.
    """

    def __init__(self, secret: str, expires_in: timedelta) -> None:
        self.secret = secret
        self.expires_in = expires_in

    def issue(self, account: Account) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'id': account.id,
            'username': account.username,
            'email': account.email,
            'role': account.role.value,
            'iat': int(now.timestamp()),
            'exp': int((now + self.expires_in).timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm=JWT_ALGORITHM)

    def verify(self, token: str) -> Identity:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[JWT_ALGORITHM], options={'require': ['exp']})
        except jwt.InvalidTokenError as err:
            logger.info('Token verification failed: %s', err)
            raise InvalidOrExpiredToken from err

        try:
            return dacite.from_dict(data_class=Identity, data=payload)
        except dacite.DaciteError as err:
            logger.info('Token payload rejected: %s', err)
            raise InvalidOrExpiredToken from err

    @property
    def expires_in_label(self) -> str:
        hours, remainder = divmod(int(self.expires_in.total_seconds()), 3600)
        if remainder:
            return f'{int(self.expires_in.total_seconds())}s'
        return f'{hours}h'
