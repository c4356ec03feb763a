"""XML helpers for the OSM XML exporter."""
from xml.sax.saxutils import escape

# escape() covers &, < and >; attribute values also need both quotes.
_ATTRIBUTE_ENTITIES = {'"': '&quot;', "'": '&#39;'}


def xml_escape(text) -> str:
    """Escape a value for use inside a double- or single-quoted attribute.

    Non-string values are converted with ``str`` first.

    Examples:
        >>> xml_escape('A & B <"x">')
        'A &amp; B &lt;&quot;x&quot;&gt;'
    """
    return escape(str(text), _ATTRIBUTE_ENTITIES)
