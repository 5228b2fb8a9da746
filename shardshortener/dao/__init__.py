from shardshortener.dao.base import ShortURLBaseDAO
from shardshortener.dao.memory import ShortURLMemoryDAO


__all__ = ['ShortURLBaseDAO', 'ShortURLMemoryDAO']
