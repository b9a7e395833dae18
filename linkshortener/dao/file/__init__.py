from linkshortener.dao.file.links_file_dao import LinksFileDAO
from linkshortener.dao.file.mixins import FileStorageMixin


__all__ = [
    'LinksFileDAO',
    'FileStorageMixin',
]
