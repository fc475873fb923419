import json
from dataclasses import dataclass
from datetime import datetime, UTC
from typing import Any

from tinyurl.exceptions import MalformedDocumentError


@dataclass(frozen=True)
class URLDocument:
    """Represent a tiny URL mapping, the unit of persistence and caching.

    Attributes:
        base10_id (int):
            Numeric identifier the URL key was encoded from.
        url_key (str):
            Short public identifier, derived from base10_id via base58 encoding.
        long_url (str):
            The original long URL that the URL key resolves to.
        expire_time (datetime):
            UTC moment after which the mapping is no longer valid.
            Set to a far-future sentinel for live-forever documents.
        live_forever (bool):
            If True, the mapping never expires.

    Example:
        >>> from datetime import datetime, timedelta, UTC
        >>> doc = URLDocument(
        ...     base10_id=2468135791013,
        ...     url_key='27qMi57J',
        ...     long_url='https://example.com/article/123',
        ...     expire_time=datetime.now(UTC) + timedelta(days=365),
        ... )
        >>> doc.is_expired()
        False
        >>> doc.to_dict()['urlKey']
        '27qMi57J'
    """

    base10_id: int
    url_key: str
    long_url: str
    expire_time: datetime
    live_forever: bool = False

    def is_expired(self, now: datetime | None = None) -> bool:
        """Return True if the mapping's expire time has passed (never for live-forever documents)."""
        if self.live_forever:
            return False
        return self.expire_time < (now or datetime.now(UTC))

    def to_url(self, base_url: str) -> str:
        """Render the externally resolvable tiny URL for this document."""
        return f'{base_url.rstrip("/")}/{self.url_key}'

    def to_dict(self) -> dict[str, Any]:
        return {
            'base10Id': self.base10_id,
            'urlKey': self.url_key,
            'longUrl': self.long_url,
            'expireTime': self.expire_time.isoformat(),
            'liveForever': self.live_forever,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> 'URLDocument':
        """Build a document from its flat serialized representation.

        Raises:
            MalformedDocumentError:
                If fields are missing or carry values of the wrong type.
        """
        try:
            base10_id = payload['base10Id']
            url_key = payload['urlKey']
            long_url = payload['longUrl']
            expire_time = datetime.fromisoformat(payload['expireTime'])
            live_forever = payload.get('liveForever', False)
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedDocumentError(f'Malformed URL document payload: {payload!r}.') from e

        # fmt: off
        if not isinstance(base10_id, int) or isinstance(base10_id, bool) \
                or not isinstance(url_key, str) \
                or not isinstance(long_url, str) \
                or not isinstance(live_forever, bool):
            raise MalformedDocumentError(f'Malformed URL document payload: {payload!r}.')
        # fmt: on

        if expire_time.tzinfo is None:
            expire_time = expire_time.replace(tzinfo=UTC)

        return cls(
            base10_id=base10_id,
            url_key=url_key,
            long_url=long_url,
            expire_time=expire_time,
            live_forever=live_forever,
        )

    @classmethod
    def from_json(cls, raw: str | bytes) -> 'URLDocument':
        try:
            payload = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise MalformedDocumentError(f'URL document is not valid JSON: {raw!r}.') from e
        if not isinstance(payload, dict):
            raise MalformedDocumentError(f'URL document must be a JSON object: {raw!r}.')
        return cls.from_dict(payload)
