from linkshrink.dao.memory.link_collection_memory_dao import LinkCollectionMemoryDAO


__all__ = ['LinkCollectionMemoryDAO']
