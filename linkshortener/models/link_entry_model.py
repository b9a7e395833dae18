from dataclasses import dataclass


@dataclass(frozen=True)
class LinkEntryModel:
    """Represent a shortened link mapping.

    Attributes:
        short_id (str):
            The unique short identifier representing the shortened link.
        long_url (str):
            The original long URL that the short identifier resolves to.

    Example:
        >>> entry = LinkEntryModel(short_id='ab12cd', long_url='https://example.com/article/123')
        >>> entry.short_id
        'ab12cd'
        >>> entry.long_url
        'https://example.com/article/123'
    """

    short_id: str
    long_url: str
