from linkshrink.dao.base.link_collection_base_dao import LinkCollectionBaseDAO


__all__ = ['LinkCollectionBaseDAO']
