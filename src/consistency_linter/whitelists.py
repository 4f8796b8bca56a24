"""Token whitelists that suppress the abbreviation rule.

Two disjoint sets of lowercase tokens:

- common words: ordinary short English words that are not abbreviations at all
  (``get``, ``add``, ``is``, ``on``)
- accepted abbreviations: domain-standard shortenings such as protocol names,
  file formats and math/time terms (``url``, ``json``, ``max``, ``ms``)

Lookups check the common-word set first, then the abbreviation set.
"""

from dataclasses import dataclass
from typing import Iterable

COMMON_WORD = "common-word"
ACCEPTED_ABBREVIATION = "accepted-abbreviation"

DEFAULT_COMMON_WORDS = frozenset({
    "a", "i",
    "am", "an", "as", "at", "be", "by", "do", "go", "he", "if", "in", "is",
    "it", "me", "my", "no", "of", "oh", "ok", "on", "or", "so", "to", "up",
    "us", "we",
    "act", "add", "age", "ago", "aid", "aim", "air", "all", "and", "any",
    "are", "arm", "art", "ask", "bad", "bag", "ban", "bar", "bed", "bet",
    "big", "bin", "bit", "box", "boy", "bug", "bus", "but", "buy", "can",
    "cap", "car", "cat", "cup", "cut", "day", "did", "die", "dig", "dog",
    "dot", "dry", "due", "ear", "eat", "egg", "end", "era", "eye", "fan",
    "far", "fee", "few", "fit", "fix", "fly", "for", "fun", "gap", "gas",
    "get", "got", "gun", "guy", "has", "hat", "her", "hey", "him", "hip",
    "his", "hit", "hot", "how", "ice", "ink", "its", "jam", "job", "joy",
    "key", "kid", "lab", "lag", "law", "lay", "led", "leg", "let", "lid",
    "lie", "lot", "low", "map", "may", "mix", "mod", "net", "new", "nor",
    "not", "now", "nut", "odd", "off", "oil", "old", "one", "our", "out",
    "owe", "own", "pad", "pay", "pen", "per", "pet", "pie", "pin", "pit",
    "pop", "pot", "put", "ran", "raw", "red", "rid", "row", "run", "saw",
    "say", "sea", "see", "set", "she", "shy", "sit", "six", "sky", "son",
    "sum", "sun", "tab", "tag", "tap", "tax", "tea", "ten", "the", "tie",
    "tip", "toe", "too", "top", "toy", "try", "two", "use", "van", "via",
    "war", "was", "way", "web", "who", "why", "win", "won", "yes", "yet",
    "you", "zip",
})

DEFAULT_ACCEPTED_ABBREVIATIONS = frozenset({
    # identifiers and locations
    "id", "ids", "uid", "uuid", "url", "uri", "urn", "src", "dst", "dir",
    "pwd", "tmp", "env", "ref",
    # platform and tooling
    "api", "sdk", "cli", "gui", "ui", "ux", "db", "fs", "os", "io", "vm",
    "cpu", "gpu", "ram", "dom", "npm", "app", "ctx", "req", "res", "err",
    "msg", "fn", "cb", "pkg", "lib",
    # protocols and network
    "http", "https", "ftp", "ssh", "tcp", "udp", "dns", "ip", "ssl", "tls",
    "smtp", "jwt", "sso", "rpc", "ws", "wss",
    # file formats and encodings
    "json", "xml", "csv", "tsv", "pdf", "png", "jpg", "gif", "svg", "html",
    "css", "md", "txt", "yml", "yaml", "toml", "sql", "utf", "hex",
    "rgb", "rgba", "hsl", "sha", "md5", "ast",
    # math and time
    "min", "max", "avg", "abs", "sin", "cos", "tan", "pi", "exp", "sqrt",
    "x", "y", "z", "j", "k", "l", "n", "m",
    "ms", "ns", "sec", "utc", "gmt", "tz", "ts",
}) - DEFAULT_COMMON_WORDS


@dataclass(frozen=True)
class Whitelists:
    """Read-only whitelist configuration for the abbreviation rule"""

    common_words: frozenset[str] = DEFAULT_COMMON_WORDS
    accepted_abbreviations: frozenset[str] = DEFAULT_ACCEPTED_ABBREVIATIONS

    def classify(self, token: str) -> str | None:
        """Return which whitelist contains the token, or None."""
        lowered = token.lower()
        if lowered in self.common_words:
            return COMMON_WORD
        if lowered in self.accepted_abbreviations:
            return ACCEPTED_ABBREVIATION
        return None

    def suppresses(self, token: str) -> bool:
        return self.classify(token) is not None

    def extend(
        self,
        common_words: Iterable[str] = (),
        abbreviations: Iterable[str] = (),
    ) -> "Whitelists":
        """Return a new instance with extra tokens; common words win on overlap."""
        common = self.common_words | {w.strip().lower() for w in common_words if w.strip()}
        abbrevs = self.accepted_abbreviations | {
            a.strip().lower() for a in abbreviations if a.strip()
        }
        return Whitelists(common_words=frozenset(common), accepted_abbreviations=frozenset(abbrevs - common))


DEFAULT_WHITELISTS = Whitelists()
