from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class AuthorFilter:
    """
    Exact author-email filter. Matching is case-sensitive:
    `a@x.com` and `A@x.com` are different authors here.
    An empty email accepts every commit.
    """

    email: str = ""

    def matches(self, author_email: str) -> bool:
        if not self.email:
            return True
        return author_email == self.email
