"""Abbreviation generation for links."""

from typing import Awaitable, Callable

VOWELS = frozenset("aeiou")

ExistsCheck = Callable[[str], Awaitable[bool]]


class AbbreviationGenerator:
    """Derive readable abbreviations from URLs.

    ``https://sub.example.com/path/to/index.html`` becomes ``sbxmplpti``: the
    domain without its top-level part, vowels and dots, followed by the first
    character of each path segment.
    """

    SCHEME_SEPARATOR = "://"

    def make_base(self, url: str) -> str:
        """Build the abbreviation for a URL before collision handling.

        URLs without a scheme are returned unchanged.

        Args:
            url: The URL to abbreviate

        Returns:
            Base abbreviation
        """
        index = url.find(self.SCHEME_SEPARATOR)
        if index <= 0:
            return url

        domain, *paths = url[index + len(self.SCHEME_SEPARATOR):].split("/")

        base = self.unvowelize(domain)
        if not base:
            # Nothing before the last dot survived (e.g. "a.com", "localhost")
            base = self._strip_vowels(domain)

        # Empty segments come from doubled or trailing slashes
        return base + "".join(segment[0] for segment in paths if segment)

    def unvowelize(self, domain: str) -> str:
        """Drop the top-level part, lowercase vowels and dots from a domain.

        Uppercase vowels are kept.
        """
        return self._strip_vowels(domain[:domain.rfind(".")] if "." in domain else "")

    async def generate(self, url: str, exists: ExistsCheck) -> str:
        """Generate an abbreviation that is not taken yet.

        Appends 1, 2, ... to the base abbreviation until ``exists`` reports a
        free candidate. An empty candidate counts as taken.

        Args:
            url: The URL to abbreviate
            exists: Async predicate telling whether a candidate is taken

        Returns:
            Free abbreviation
        """
        base = self.make_base(url)

        candidate = base
        suffix = 1
        while not candidate or await exists(candidate):
            candidate = f"{base}{suffix}"
            suffix += 1

        return candidate

    @staticmethod
    def _strip_vowels(text: str) -> str:
        return "".join(c for c in text if c not in VOWELS and c != ".")
