from tinyurl.dao.base.url_document_base_dao import URLDocumentBaseDAO
from tinyurl.dao.base.cache_base_dao import CacheBaseDAO


__all__ = [
    'URLDocumentBaseDAO',
    'CacheBaseDAO',
]
