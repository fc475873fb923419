from tinyurl.dao.memory.memory_daos import URLDocumentMemoryDAO, MemoryCacheDAO


__all__ = [
    'URLDocumentMemoryDAO',
    'MemoryCacheDAO',
]
