from linkshortener.models.link_entry_model import LinkEntryModel


__all__ = ['LinkEntryModel']
