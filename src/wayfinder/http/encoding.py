"""HRRI encoding: reconcile human-readable resource identifiers into URIs.

Characters that may appear in an XML Schema ``anyURI`` / XLink href but
are illegal in a URI are percent-encoded as UTF-8. Everything a URI
already allows is left alone, including ``%`` so existing escape
sequences are never double-encoded.

Lone surrogates, which cannot be UTF-8 encoded strictly, are escaped as
their surrogate code unit bytes.
"""

from urllib.parse import quote

# Printable ASCII that must be escaped (space is handled separately)
_ILLEGAL = frozenset('<>"{}|\\^`')


def _must_escape(char: str, *, encode_spaces: bool) -> bool:
    if char == " ":
        return encode_spaces
    code = ord(char)
    return code < 0x20 or code >= 0x7F or char in _ILLEGAL


def encode_hrri(value: str, *, encode_spaces: bool = True) -> str:
    """Percent-encode the characters of *value* that a URI cannot carry.

    Examples::

        >>> encode_hrri("/search?q=a b")
        '/search?q=a%20b'
        >>> encode_hrri("/café")
        '/caf%C3%A9'
        >>> encode_hrri("/already%20escaped")
        '/already%20escaped'
        >>> encode_hrri("/a b", encode_spaces=False)
        '/a b'
    """
    if not any(_must_escape(c, encode_spaces=encode_spaces) for c in value):
        return value
    return "".join(
        quote(c, safe="", errors="surrogatepass")
        if _must_escape(c, encode_spaces=encode_spaces)
        else c
        for c in value
    )
