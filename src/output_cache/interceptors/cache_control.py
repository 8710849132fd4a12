"""Cache-Control header parsing and stamping."""

import re
from dataclasses import dataclass, field

from starlette.requests import Request
from starlette.responses import Response

NO_CACHE = "no-cache"
NO_STORE = "no-store"
PUBLIC = "public"

_DIRECTIVE = re.compile(r'\s*([^,=\s]+)(?:\s*=\s*("[^"]*"|[^,\s]*))?\s*(?:,|$)')


@dataclass(frozen=True)
class CacheControl:
    """Parsed Cache-Control directives.

    Directive names are lower-cased. A directive without an argument maps to
    None.
    """

    directives: dict[str, str | None] = field(default_factory=dict)

    @classmethod
    def parse(cls, value: str | None) -> "CacheControl":
        """Parse a Cache-Control header value.

        Unparseable fragments are skipped rather than rejected.
        """
        directives: dict[str, str | None] = {}
        for match in _DIRECTIVE.finditer(value or ""):
            name, argument = match.group(1), match.group(2)
            if not name:
                continue
            if argument is not None and len(argument) >= 2 and argument[0] == argument[-1] == '"':
                argument = argument[1:-1]
            directives[name.lower()] = argument
        return cls(directives)

    @classmethod
    def from_request(cls, request: Request) -> "CacheControl":
        return cls.parse(request.headers.get("cache-control"))

    @property
    def no_cache(self) -> bool:
        return NO_CACHE in self.directives

    @property
    def no_store(self) -> bool:
        return NO_STORE in self.directives

    @property
    def public(self) -> bool:
        return PUBLIC in self.directives

    def with_directive(self, name: str) -> "CacheControl":
        """Return a copy with a bare directive added, keeping existing ones."""
        directives = dict(self.directives)
        directives.setdefault(name.lower(), None)
        return CacheControl(directives)

    def __str__(self) -> str:
        parts = []
        for name, argument in self.directives.items():
            if argument is None:
                parts.append(name)
            elif re.fullmatch(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+", argument):
                parts.append(f"{name}={argument}")
            else:
                parts.append(f'{name}="{argument}"')
        return ", ".join(parts)


def stamp_cache_control(response: Response, directive: str) -> None:
    """Add a directive to a response's Cache-Control header in place."""
    current = CacheControl.parse(response.headers.get("cache-control"))
    response.headers["cache-control"] = str(current.with_directive(directive))
