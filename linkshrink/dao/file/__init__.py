from linkshrink.dao.file.link_collection_file_dao import LinkCollectionFileDAO


__all__ = ['LinkCollectionFileDAO']
